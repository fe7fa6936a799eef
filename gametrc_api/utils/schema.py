import logging

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from ..models import Base
from .errors import StorageError

logger = logging.getLogger(__name__)


def provision_schema(engine: Engine) -> str:
    """
    Create the catalog tables and indexes if they are missing.

    Safe to run on every start: existing tables and rows are left alone.
    Turns on WAL journaling and foreign key enforcement on the shared
    connection. Returns the journal mode SQLite settled on ("wal" for files,
    "memory" for in-memory databases).
    """
    try:
        # journal_mode cannot change inside a transaction, so it goes first
        with engine.connect() as conn:
            journal_mode = conn.execute(text("PRAGMA journal_mode=WAL")).scalar()
            conn.execute(text("PRAGMA foreign_keys=ON"))
            conn.commit()
        Base.metadata.create_all(bind=engine, checkfirst=True)
    except SQLAlchemyError as e:
        logger.error(f"Schema provisioning failed: {e}")
        raise StorageError(f"Failed to initialise database schema: {e}") from e

    logger.info(f"Schema ready (journal_mode={journal_mode})")
    return str(journal_mode).lower()
