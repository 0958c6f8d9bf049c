# kraken_seed/services/plugin_import_service.py
from flask import current_app

from kraken_seed.extension.extensions import db
from kraken_seed.models.pluginMetadata import PluginMetadata, PluginPriceDetails, PluginConfigOption
from kraken_seed.services.import_transaction import (
    begin_transaction, commit_transaction, find_by_name, insert_row
)
from kraken_seed.services.json_loader import (
    load_json_array, check_fields, check_object, check_list,
    STRING, INTEGER, BOOLEAN, PRICE_DETAILS_FIELDS
)

PLUGIN_FIELDS = {
    'name': STRING,
    'title': STRING,
    'description': STRING,
    'imageUrl': STRING,
    'videoUrl': STRING,
    'topPick': BOOLEAN,
    'tier': INTEGER,
}

CONFIG_OPTION_FIELDS = {
    'name': STRING,
    'section': STRING,
    'description': STRING,
    'type': STRING,
    'isBool': BOOLEAN,
}


def check_plugin_record(record, where, json_file_path):
    check_fields(record, PLUGIN_FIELDS, where, json_file_path)
    price_details = check_object(record, 'priceDetails', where, json_file_path)
    check_fields(price_details, PRICE_DETAILS_FIELDS, f"{where}.priceDetails", json_file_path)

    options = check_list(record, 'configurationOptions', where, json_file_path, item_types=(dict,))
    for index, option in enumerate(options):
        option_where = f"{where}.configurationOptions[{index}]"
        check_fields(option, CONFIG_OPTION_FIELDS, option_where, json_file_path)
        check_list(option, 'values', option_where, json_file_path, item_types=STRING)


def import_plugin_metadata(json_file_path, session=None, logger=None):
    """
    Insert every plugin of the file that isn't stored yet.

    Plugins already present by name are skipped, never updated. All records
    share one transaction: any failure rolls back the whole file.

    Returns a summary dict: created, updated, skipped, total.
    """
    session = session or db.session
    logger = logger or current_app.logger

    records = load_json_array(json_file_path, 'plugin metadata', check_plugin_record)
    begin_transaction(session, json_file_path, logger)

    result = {'created': 0, 'updated': 0, 'skipped': 0, 'total': len(records)}

    try:
        for record in records:
            name = record.get('name') or ''
            logger.debug(f"finding plugin: {name}")

            if find_by_name(session, PluginMetadata, name, json_file_path) is not None:
                logger.debug(f"plugin already exists: {name}")
                result['skipped'] += 1
                continue

            plugin = _create_plugin(session, record, json_file_path)
            result['created'] += 1
            logger.debug(
                f"created plugin {plugin.name} (id={plugin.id}) "
                f"with {len(record.get('configurationOptions') or [])} config option(s)"
            )
    except Exception as e:
        logger.error(f"Rolling back plugin import from {json_file_path}: {e}")
        session.rollback()
        raise

    commit_transaction(session, json_file_path, logger)
    return result


def _create_plugin(session, record, json_file_path):
    plugin = insert_row(session, PluginMetadata.from_dict(record), 'plugin metadata', json_file_path)

    price_details = PluginPriceDetails.from_dict(record.get('priceDetails') or {})
    price_details.plugin_metadata_id = plugin.id
    insert_row(session, price_details, 'price details', json_file_path)

    for option_data in record.get('configurationOptions') or []:
        option = PluginConfigOption.from_dict(option_data)
        option.plugin_metadata_id = plugin.id
        insert_row(session, option, 'config option', json_file_path)

    return plugin
