from pathlib import Path

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool

from .utils.config import DATABASE_URL, DB_ECHO


def _enable_foreign_keys(dbapi_connection, connection_record):
    # SQLite leaves FK enforcement off per connection unless asked
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def ensure_data_dir(database_url: str = DATABASE_URL) -> None:
    """Create the parent folder of a file-backed SQLite database."""
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite" or url.database in (None, "", ":memory:"):
        return
    Path(url.database).expanduser().parent.mkdir(parents=True, exist_ok=True)


def create_catalog_engine(database_url: str = DATABASE_URL, echo: bool = DB_ECHO) -> Engine:
    """
    Engine over exactly one shared SQLite connection.
    Callers must go through CatalogStore, which serializes access to it.
    """
    engine = create_engine(
        database_url,
        echo=echo,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    event.listen(engine, "connect", _enable_foreign_keys)
    return engine


from .catalog import GameCatalog

catalog = GameCatalog.from_engine(create_catalog_engine())


def get_catalog() -> GameCatalog:
    return catalog
