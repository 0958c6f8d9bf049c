# kraken_seed/services/import_transaction.py
from sqlalchemy import insert
from sqlalchemy.exc import SQLAlchemyError

from kraken_seed.errors import (
    TransactionBeginError, RecordLookupError, RecordWriteError, TransactionCommitError
)


def begin_transaction(session, json_file_path, logger):
    """Check out a connection and open the file's transaction on ``session``"""
    try:
        session.connection()
    except SQLAlchemyError as e:
        logger.error(f"Could not begin transaction for {json_file_path}: {e}")
        session.rollback()
        raise TransactionBeginError(f"failed to begin transaction: {e}", path=json_file_path) from e


def commit_transaction(session, json_file_path, logger):
    try:
        session.commit()
    except SQLAlchemyError as e:
        logger.error(f"Could not commit import of {json_file_path}: {e}")
        session.rollback()
        raise TransactionCommitError(f"failed to commit transaction: {e}", path=json_file_path) from e


def find_by_name(session, model, name, json_file_path):
    """Return the row whose unique name equals ``name``, or None when absent"""
    try:
        return session.query(model).filter_by(name=name).one_or_none()
    except SQLAlchemyError as e:
        raise RecordLookupError(
            f"error checking for existing {model.__tablename__} row '{name}': {e}",
            path=json_file_path
        ) from e


def insert_row(session, row, what, json_file_path):
    """Insert ``row`` immediately so its primary key is available"""
    try:
        session.add(row)
        session.flush()
    except SQLAlchemyError as e:
        raise RecordWriteError(f"failed to create {what}: {e}", path=json_file_path) from e
    return row


def insert_values(session, model, values, what, json_file_path):
    """INSERT naming only the columns in ``values``; every other column is left to the database"""
    try:
        session.execute(insert(model).values(**values))
    except SQLAlchemyError as e:
        raise RecordWriteError(f"failed to create {what}: {e}", path=json_file_path) from e
