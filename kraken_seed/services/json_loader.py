# kraken_seed/services/json_loader.py
import json

from kraken_seed.errors import ImportFileError, ImportDecodeError

# JSON types accepted for each scalar field; null is always accepted and
# stored as the field's zero value
STRING = (str,)
INTEGER = (int,)
NUMBER = (int, float)
BOOLEAN = (bool,)

# Integer columns are signed 64-bit at most
INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1

PRICE_DETAILS_FIELDS = {
    'month': INTEGER,
    'threeMonth': INTEGER,
    'year': INTEGER,
}


def load_json_array(json_file_path, label, check_record=None):
    """
    Read ``json_file_path`` and decode it as a JSON array of objects.

    ``check_record(record, where, json_file_path)`` runs on every element so
    shape errors surface before any transaction is opened.
    """
    try:
        with open(json_file_path, encoding='utf-8') as fh:
            raw = fh.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ImportFileError(f"failed to read JSON file {json_file_path}: {e}", path=json_file_path) from e

    try:
        records = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ImportDecodeError(f"failed to unmarshal {label} JSON data: {e}", path=json_file_path) from e

    if not isinstance(records, list):
        raise ImportDecodeError(
            f"failed to unmarshal {label} JSON data: expected an array, got {type(records).__name__}",
            path=json_file_path
        )

    for index, record in enumerate(records):
        where = f"{label}[{index}]"
        if not isinstance(record, dict):
            raise ImportDecodeError(f"{where}: expected an object", path=json_file_path)
        if check_record:
            check_record(record, where, json_file_path)

    return records


def check_fields(data, field_types, where, json_file_path):
    """Reject scalar fields whose JSON type can't be decoded into the column"""
    for field, accepted in field_types.items():
        value = data.get(field)
        if value is None:
            continue
        # bool is an int subclass in Python but not a JSON number
        if isinstance(value, bool) and bool not in accepted:
            ok = False
        else:
            ok = isinstance(value, accepted)
        if not ok:
            raise ImportDecodeError(
                f"{where}.{field}: cannot decode {type(value).__name__} value {value!r}",
                path=json_file_path
            )
        if isinstance(value, int) and not isinstance(value, bool) and not INT64_MIN <= value <= INT64_MAX:
            raise ImportDecodeError(
                f"{where}.{field}: value {value} overflows a 64-bit integer",
                path=json_file_path
            )


def check_object(data, field, where, json_file_path):
    value = data.get(field)
    if value is not None and not isinstance(value, dict):
        raise ImportDecodeError(f"{where}.{field}: expected an object", path=json_file_path)
    return value or {}


def check_list(data, field, where, json_file_path, item_types=None):
    value = data.get(field)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ImportDecodeError(f"{where}.{field}: expected an array", path=json_file_path)
    if item_types:
        for index, item in enumerate(value):
            if not isinstance(item, item_types):
                raise ImportDecodeError(
                    f"{where}.{field}[{index}]: cannot decode {type(item).__name__}",
                    path=json_file_path
                )
    return value
