import json

import click
from flask.cli import with_appcontext

from kraken_seed.errors import SeedImportError
from kraken_seed.extension.extensions import db


def _echo_summary(result):
    click.echo(
        f"Created: {result['created']} | Updated: {result['updated']} | "
        f"Skipped: {result['skipped']} | Total: {result['total']}"
    )


@click.command('import-plugins')
@click.argument('path', type=click.Path(dir_okay=False))
@with_appcontext
def import_plugins_command(path):
    """
    Insert plugins from a plugin metadata JSON file.
    Plugins that already exist by name are skipped.

    Usage: flask --app kraken_seed import-plugins data/plugin_metadata.json
    """
    from kraken_seed.services.plugin_import_service import import_plugin_metadata

    click.echo(f"Importing plugin metadata from {path}...")
    try:
        result = import_plugin_metadata(path)
    except SeedImportError as e:
        raise click.ClickException(f"Failed to import plugin metadata: {e}")
    _echo_summary(result)


@click.command('import-packs')
@click.argument('path', type=click.Path(dir_okay=False))
@with_appcontext
def import_packs_command(path):
    """
    Create or update plugin packs from a pack JSON file.

    Usage: flask --app kraken_seed import-packs data/plugin_packs.json
    """
    from kraken_seed.services.pack_import_service import import_plugin_packs

    click.echo(f"Importing plugin packs from {path}...")
    try:
        result = import_plugin_packs(path)
    except SeedImportError as e:
        raise click.ClickException(f"Failed to import plugin packs: {e}")
    _echo_summary(result)


@click.command('init-db')
@with_appcontext
def init_db_command():
    """Create any missing tables for local setups"""
    db.create_all()
    click.echo("Tables created")


@click.command('show-plugin')
@click.argument('name')
@with_appcontext
def show_plugin_command(name):
    """Print a stored plugin, its price details and config options as JSON"""
    from kraken_seed.models.pluginMetadata import PluginMetadata

    plugin = PluginMetadata.query.filter_by(name=name).first()
    if not plugin:
        raise click.ClickException(f"Plugin '{name}' not found")
    click.echo(json.dumps(plugin.to_dict(), indent=2))


@click.command('show-pack')
@click.argument('name')
@with_appcontext
def show_pack_command(name):
    """Print a stored pack with its price details and member plugin names as JSON"""
    from kraken_seed.models.pluginPack import PluginPack

    pack = PluginPack.query.filter_by(name=name).first()
    if not pack:
        raise click.ClickException(f"Pack '{name}' not found")
    click.echo(json.dumps(pack.to_dict(), indent=2))


# Register all commands
def register_commands(app):
    """Register all Flask CLI commands"""

    # Importers
    app.cli.add_command(import_plugins_command)
    app.cli.add_command(import_packs_command)

    # Schema and inspection
    app.cli.add_command(init_db_command)
    app.cli.add_command(show_plugin_command)
    app.cli.add_command(show_pack_command)
