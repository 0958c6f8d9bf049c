# kraken_seed/__init__.py
import logging

from flask import Flask

from kraken_seed.config import Config
from kraken_seed.extension.extensions import db

# SQLite pools don't accept sizing arguments
_POOL_SIZING_OPTIONS = ("pool_size", "max_overflow")


def create_app(config_overrides=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    if app.config["SQLALCHEMY_DATABASE_URI"].startswith("sqlite"):
        app.config["SQLALCHEMY_ENGINE_OPTIONS"] = {
            key: value
            for key, value in app.config.get("SQLALCHEMY_ENGINE_OPTIONS", {}).items()
            if key not in _POOL_SIZING_OPTIONS
        }

    log_level = str(app.config.get("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=log_level)
    app.logger.setLevel(log_level)

    db.init_app(app)

    # Models must be imported before create_all() can see their tables
    from kraken_seed import models  # noqa: F401
    from kraken_seed.commands import register_commands
    register_commands(app)

    return app
