import logging
from typing import List, Optional

from sqlalchemy.engine import Engine

from .schemas.game import Game as GameSchema, GameInput, SearchFilter
from .schemas.stats import GameStats
from .utils.db_tools import CatalogStore
from .utils.franchise import list_franchises
from .utils.game import create_game, delete_game, get_game, list_games, update_game
from .utils.genre import list_genres
from .utils.platform import list_platforms
from .utils.schema import provision_schema
from .utils.search import search_games
from .utils.stats import compute_stats

logger = logging.getLogger(__name__)


class GameCatalog:
    """
    Everything the outside world may do with the catalog.

    Each call takes the store lock for its whole duration and hands back
    detached pydantic models, so no ORM object leaves the locked section.
    """

    def __init__(self, store: CatalogStore):
        self.store = store

    @classmethod
    def from_engine(cls, engine: Engine) -> "GameCatalog":
        return cls(CatalogStore(engine))

    def provision(self) -> str:
        with self.store.session():
            return provision_schema(self.store.engine)

    def get_all(self) -> List[GameSchema]:
        with self.store.session() as db:
            return [GameSchema.model_validate(g) for g in list_games(db)]

    def get_by_id(self, game_id: int) -> Optional[GameSchema]:
        with self.store.session() as db:
            game = get_game(db, game_id)
            return GameSchema.model_validate(game) if game else None

    def add(self, game_input: GameInput) -> GameSchema:
        with self.store.session() as db:
            return GameSchema.model_validate(create_game(db, game_input))

    def update(self, game_id: int, game_input: GameInput) -> GameSchema:
        with self.store.session() as db:
            return GameSchema.model_validate(update_game(db, game_id, game_input))

    def delete(self, game_id: int) -> bool:
        with self.store.session() as db:
            return delete_game(db, game_id)

    def search(self, search: SearchFilter) -> List[GameSchema]:
        with self.store.session() as db:
            return [GameSchema.model_validate(g) for g in search_games(db, search)]

    def stats(self) -> GameStats:
        with self.store.session() as db:
            return GameStats(**compute_stats(db))

    def platforms(self) -> List[str]:
        with self.store.session() as db:
            return list_platforms(db)

    def franchises(self) -> List[str]:
        with self.store.session() as db:
            return list_franchises(db)

    def genres(self) -> List[str]:
        with self.store.session() as db:
            return list_genres(db)

    def dispose(self) -> None:
        logger.info("Closing catalog store")
        self.store.dispose()
