"""Tests for the Flask CLI commands registered on the app"""

import json

import pytest

from kraken_seed.extension.extensions import db
from kraken_seed.models import PluginMetadata, PluginPack
from tests.factories import make_plugin, make_pack


@pytest.fixture
def runner(app):
    db.session.remove()
    return app.test_cli_runner()


def test_import_plugins_command(app, runner, write_json):
    path = write_json('plugins.json', [make_plugin('auto-clicker')])

    result = runner.invoke(args=['import-plugins', path])

    assert result.exit_code == 0, result.output
    assert 'Created: 1 | Updated: 0 | Skipped: 0 | Total: 1' in result.output
    assert PluginMetadata.query.count() == 1


def test_import_packs_command_reports_failure(app, runner, write_json):
    path = write_json('packs.json', [make_pack('starter', ['ghost'])])

    result = runner.invoke(args=['import-packs', path])

    assert result.exit_code == 1
    assert "Failed to import plugin packs" in result.output
    assert PluginPack.query.count() == 0


def test_show_plugin_decodes_values(app, runner, write_json):
    runner.invoke(args=['import-plugins', write_json('plugins.json', [make_plugin('auto-clicker')])])

    result = runner.invoke(args=['show-plugin', 'auto-clicker'])

    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data['name'] == 'auto-clicker'
    assert data['configurationOptions'][0]['values'] == ['a', 'b', 'c']
    assert data['priceDetails']['year'] == 900


def test_show_pack_lists_members(app, runner, write_json):
    runner.invoke(args=['import-plugins', write_json('plugins.json', [make_plugin('auto-clicker')])])
    runner.invoke(args=['import-packs', write_json('packs.json', [make_pack('starter', ['auto-clicker'])])])

    result = runner.invoke(args=['show-pack', 'starter'])

    assert result.exit_code == 0, result.output
    assert json.loads(result.output)['plugins'] == ['auto-clicker']


def test_show_unknown_pack(app, runner):
    result = runner.invoke(args=['show-pack', 'nope'])

    assert result.exit_code == 1
    assert "Pack 'nope' not found" in result.output


def test_init_db_is_repeatable(app, runner):
    result = runner.invoke(args=['init-db'])

    assert result.exit_code == 0
    assert 'Tables created' in result.output
