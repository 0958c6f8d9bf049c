"""
Shared fixtures: an app bound to in-memory SQLite with all tables created,
plus helpers to write seed files and watch write statements.
"""

import json

import pytest
from sqlalchemy import event

from kraken_seed import create_app
from kraken_seed.extension.extensions import db


@pytest.fixture
def app():
    app = create_app({
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite://',
        'LOG_LEVEL': 'DEBUG',
    })
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def write_json(tmp_path):
    """Write ``payload`` as JSON under tmp_path and return the path as a string"""
    def _write(name, payload):
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding='utf-8')
        return str(path)
    return _write


@pytest.fixture
def write_statements(app):
    """Collect every INSERT/UPDATE/DELETE the engine executes"""
    statements = []

    def _record(conn, cursor, statement, parameters, context, executemany):
        if statement.lstrip().split(' ', 1)[0].upper() in ('INSERT', 'UPDATE', 'DELETE'):
            statements.append(statement)

    event.listen(db.engine, 'before_cursor_execute', _record)
    yield statements
    event.remove(db.engine, 'before_cursor_execute', _record)
