import logging
import threading
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from .errors import CatalogError, StorageError, StoreUnavailableError

logger = logging.getLogger(__name__)


class CatalogStore:
    """
    The single shared connection behind one lock.

    Every repository call runs inside `session()`, so no two operations ever
    touch the database at the same time. An unexpected exception raised while
    the lock is held poisons the store; from then on `session()` refuses to
    hand out sessions.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self._session_factory = sessionmaker(
            bind=engine, autocommit=False, autoflush=False, expire_on_commit=False
        )
        self._lock = threading.Lock()
        self._poisoned: str | None = None
        self._disposed = False

    @property
    def poisoned(self) -> bool:
        return self._poisoned is not None

    @contextmanager
    def session(self) -> Iterator[Session]:
        """
        Hold the lock for the whole block and yield a session on the shared connection.
        Example:

            with store.session() as db:
                ...
        """
        with self._lock:
            if self._disposed:
                raise StoreUnavailableError("Catalog store has been closed")
            if self._poisoned is not None:
                raise StoreUnavailableError(f"Catalog store lock poisoned: {self._poisoned}")

            db = self._session_factory()
            try:
                yield db
            except CatalogError:
                db.rollback()
                raise
            except SQLAlchemyError as e:
                db.rollback()
                raise StorageError(str(e)) from e
            except Exception as e:
                self._poisoned = f"{type(e).__name__}: {e}"
                logger.exception("Catalog store poisoned by an unexpected error")
                raise
            finally:
                db.close()

    def dispose(self) -> None:
        with self._lock:
            self._disposed = True
            self.engine.dispose()
