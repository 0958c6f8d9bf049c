# kraken_seed/services/pack_import_service.py
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from kraken_seed.errors import PluginNotFoundError, RecordWriteError
from kraken_seed.extension.extensions import db
from kraken_seed.models.pluginMetadata import PluginMetadata
from kraken_seed.models.pluginPack import PluginPack, PluginPackPriceDetails, PluginPackItem
from kraken_seed.services.import_transaction import (
    begin_transaction, commit_transaction, find_by_name, insert_row, insert_values
)
from kraken_seed.services.json_loader import (
    load_json_array, check_fields, check_object, check_list,
    STRING, NUMBER, BOOLEAN, PRICE_DETAILS_FIELDS
)

PACK_FIELDS = {
    'name': STRING,
    'title': STRING,
    'description': STRING,
    'imageUrl': STRING,
    'discount': NUMBER,
    'active': BOOLEAN,
}


def check_pack_record(record, where, json_file_path):
    check_fields(record, PACK_FIELDS, where, json_file_path)
    check_list(record, 'plugins', where, json_file_path, item_types=STRING)
    price_details = check_object(record, 'priceDetails', where, json_file_path)
    check_fields(price_details, PRICE_DETAILS_FIELDS, f"{where}.priceDetails", json_file_path)


def import_plugin_packs(json_file_path, session=None, logger=None):
    """
    Create packs that don't exist yet and update the ones that do.

    An update overwrites the pack's display fields, updates its price
    details in place and replaces its whole membership set. Every listed
    plugin name must resolve to a stored plugin. All records share one
    transaction: any failure rolls back the whole file.

    Returns a summary dict: created, updated, skipped, total.
    """
    session = session or db.session
    logger = logger or current_app.logger

    records = load_json_array(json_file_path, 'plugin pack', check_pack_record)
    begin_transaction(session, json_file_path, logger)

    result = {'created': 0, 'updated': 0, 'skipped': 0, 'total': len(records)}

    try:
        for record in records:
            name = record.get('name') or ''
            logger.debug(f"finding pack: {name}")
            existing_pack = find_by_name(session, PluginPack, name, json_file_path)

            if existing_pack is None:
                pack = _create_pack(session, record, json_file_path)
                result['created'] += 1
                logger.debug(f"created pack {pack.name} (id={pack.id})")
            else:
                _update_pack(session, existing_pack, record, json_file_path, logger)
                result['updated'] += 1
                logger.debug(f"updated pack {existing_pack.name} (id={existing_pack.id})")
    except Exception as e:
        logger.error(f"Rolling back plugin pack import from {json_file_path}: {e}")
        session.rollback()
        raise

    commit_transaction(session, json_file_path, logger)
    return result


def _create_pack(session, record, json_file_path):
    pack = insert_row(session, PluginPack.from_dict(record), 'plugin pack', json_file_path)

    # plugin_metadata_id must not appear in the INSERT
    price_values = PluginPackPriceDetails.price_fields(record.get('priceDetails') or {})
    price_values['plugin_pack_id'] = pack.id
    insert_values(session, PluginPackPriceDetails, price_values, 'price details', json_file_path)

    _link_plugins(session, pack, record.get('plugins') or [], json_file_path)
    return pack


def _update_pack(session, pack, record, json_file_path, logger):
    pack.apply_fields(record)
    try:
        session.flush()
    except SQLAlchemyError as e:
        raise RecordWriteError(f"failed to update plugin pack: {e}", path=json_file_path) from e

    try:
        updated_rows = (
            session.query(PluginPackPriceDetails)
            .filter(PluginPackPriceDetails.plugin_pack_id == pack.id)
            .update(
                PluginPackPriceDetails.price_fields(record.get('priceDetails') or {}),
                synchronize_session=False
            )
        )
    except SQLAlchemyError as e:
        raise RecordWriteError(f"failed to update price details: {e}", path=json_file_path) from e

    if not updated_rows:
        logger.warning(f"pack {pack.name} has no price details row to update")

    try:
        session.query(PluginPackItem).filter(PluginPackItem.pack_id == pack.id).delete(
            synchronize_session=False
        )
    except SQLAlchemyError as e:
        raise RecordWriteError(
            f"failed to delete existing plugin pack items: {e}", path=json_file_path
        ) from e

    _link_plugins(session, pack, record.get('plugins') or [], json_file_path)


def _link_plugins(session, pack, plugin_names, json_file_path):
    for plugin_name in plugin_names:
        plugin = find_by_name(session, PluginMetadata, plugin_name, json_file_path)
        if plugin is None:
            raise PluginNotFoundError(
                f"failed to find plugin metadata '{plugin_name}' for pack '{pack.name}'",
                plugin_name=plugin_name,
                path=json_file_path
            )

        item = PluginPackItem(pack_id=pack.id, plugin_metadata_id=plugin.id)
        insert_row(session, item, 'plugin pack item', json_file_path)
