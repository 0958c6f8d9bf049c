# kraken_seed/cli.py
import click
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from kraken_seed import create_app
from kraken_seed.config import build_database_uri
from kraken_seed.errors import SeedImportError
from kraken_seed.extension.extensions import db


@click.command('kraken-seed')
@click.option('--db-host', default='localhost', envvar='DB_HOST', show_default=True, help='Database host')
@click.option('--db-port', default=3306, type=int, envvar='DB_PORT', show_default=True, help='Database port')
@click.option('--db-user', default='root', envvar='DB_USER', show_default=True, help='Database user')
@click.option('--db-password', default='', envvar='DB_PASSWORD', help='Database password')
@click.option('--db-name', default='', envvar='DB_NAME', help='Database name (required)')
@click.option('--db-driver', default='mysql+pymysql', envvar='DB_DRIVER', show_default=True,
              help='SQLAlchemy driver, e.g. mysql+pymysql or sqlite')
@click.option('--plugin-file', default='./data/plugin_metadata.json', show_default=True,
              help='Path to plugin metadata JSON file; empty to skip')
@click.option('--pack-file', default='./data/plugin_packs.json', show_default=True,
              help='Path to plugin pack JSON file; empty to skip')
@click.option('--dry-run', is_flag=True, default=False, help='Run without making changes')
@click.option('--log-level', default='INFO', envvar='LOG_LEVEL', show_default=True)
def main(db_host, db_port, db_user, db_password, db_name, db_driver,
         plugin_file, pack_file, dry_run, log_level):
    """Seed plugin metadata and plugin packs from JSON files."""
    if not db_name:
        raise click.UsageError("Database name is required (--db-name)")

    app = create_app({
        'SQLALCHEMY_DATABASE_URI': build_database_uri(
            db_host, db_port, db_user, db_password, db_name, db_driver
        ),
        'LOG_LEVEL': log_level,
    })

    with app.app_context():
        try:
            with db.engine.connect() as conn:
                conn.execute(text('SELECT 1'))
        except SQLAlchemyError as e:
            raise click.ClickException(f"Failed to connect to database: {e}")

        app.logger.info(f"Connected to database: {db_name}")

        if dry_run:
            app.logger.info("DRY RUN MODE - No changes will be made")
            if plugin_file:
                app.logger.info(f"Would import plugin metadata from: {plugin_file}")
            if pack_file:
                app.logger.info(f"Would import plugin packs from: {pack_file}")
            return

        run_imports(app, plugin_file, pack_file)


def run_imports(app, plugin_file, pack_file):
    """Run the plugin pipeline, then the pack pipeline; the first error stops the run"""
    from kraken_seed.services.plugin_import_service import import_plugin_metadata
    from kraken_seed.services.pack_import_service import import_plugin_packs

    if plugin_file:
        app.logger.info(f"Importing plugin metadata from: {plugin_file}")
        try:
            result = import_plugin_metadata(plugin_file, db.session, app.logger)
        except SeedImportError as e:
            raise click.ClickException(f"Failed to import plugin metadata: {e}")
        app.logger.info(
            f"Plugin metadata import completed successfully: "
            f"{result['created']} created, {result['skipped']} skipped"
        )

    if pack_file:
        app.logger.info(f"Importing plugin packs from: {pack_file}")
        try:
            result = import_plugin_packs(pack_file, db.session, app.logger)
        except SeedImportError as e:
            raise click.ClickException(f"Failed to import plugin packs: {e}")
        app.logger.info(
            f"Plugin packs import completed successfully: "
            f"{result['created']} created, {result['updated']} updated"
        )

    if not plugin_file and not pack_file:
        app.logger.info("No files specified. Use --plugin-file or --pack-file")
