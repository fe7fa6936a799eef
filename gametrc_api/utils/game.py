import logging
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from ..models.game import Game
from ..models.game_genre import GameGenre
from ..models.game_screenshot import GameScreenshot
from ..schemas.game import GameInput
from .errors import GameNotFoundError, InvalidGameError

logger = logging.getLogger(__name__)

# same batch size selectinload uses for its own IN lists
HYDRATE_BATCH_SIZE = 500


def utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _validate_input(game_input: GameInput) -> None:
    if not game_input.title or not game_input.title.strip():
        raise InvalidGameError("title must not be empty")
    if not game_input.platform or not game_input.platform.strip():
        raise InvalidGameError("platform must not be empty")


def _apply_fields(game: Game, game_input: GameInput) -> None:
    game.title = game_input.title
    game.franchise = game_input.franchise
    game.sequence_in_franchise = game_input.sequence_in_franchise
    game.release_date = game_input.release_date
    game.platform = game_input.platform
    game.status = game_input.status.value
    game.progress_percent = game_input.progress_percent
    game.playtime_hours = game_input.playtime_hours
    game.rating = game_input.rating
    game.notes = game_input.notes
    game.cover_art_path = game_input.cover_art_path
    game.developer = game_input.developer
    game.publisher = game_input.publisher


def _add_children(game: Game, game_input: GameInput) -> None:
    for path in game_input.screenshots:
        game.screenshots.append(GameScreenshot(path=path))
    for genre in game_input.genres:
        game.genres.append(GameGenre(genre=genre))


def _write_children(session: Session, game: Game, game_input: GameInput) -> None:
    """Flush the root row, insert the children in the given order, then commit."""
    try:
        session.flush()
        _add_children(game, game_input)
        session.commit()
    except IntegrityError as e:
        session.rollback()
        reason = str(getattr(e, "orig", e))
        logger.warning(f"Rejected game write: {reason}")
        raise InvalidGameError(reason) from e


def hydrate_games(session: Session, game_ids: Sequence[int]) -> List[Game]:
    """
    Load games with their screenshots and genres, in the order of `game_ids`.
    Every read path goes through here.
    """
    if not game_ids:
        return []

    # older SQLite builds cap a statement at 999 bound variables
    by_id = {}
    for start in range(0, len(game_ids), HYDRATE_BATCH_SIZE):
        batch = game_ids[start:start + HYDRATE_BATCH_SIZE]
        games = (
            session.query(Game)
            .options(
                selectinload(Game.screenshots),
                selectinload(Game.genres),
            )
            .filter(Game.id.in_(batch))
            .all()
        )
        by_id.update((g.id, g) for g in games)
    return [by_id[gid] for gid in game_ids if gid in by_id]


def get_game(session: Session, game_id: int) -> Optional[Game]:
    games = hydrate_games(session, [game_id])
    return games[0] if games else None


def list_games(session: Session) -> List[Game]:
    """Every game, most recently updated first."""
    rows = session.query(Game.id).order_by(Game.updated_at.desc(), Game.id.desc()).all()
    return hydrate_games(session, [row.id for row in rows])


def create_game(session: Session, game_input: GameInput) -> Game:
    _validate_input(game_input)

    now = utc_now()
    game = Game(created_at=now, updated_at=now)
    _apply_fields(game, game_input)
    session.add(game)
    _write_children(session, game, game_input)

    logger.info(f"Added game {game.id} ({game.title!r})")
    return get_game(session, game.id)


def update_game(session: Session, game_id: int, game_input: GameInput) -> Game:
    """
    Overwrite every field of an existing game and replace its screenshots and
    genres wholesale. Child rows get new ids on every update.
    """
    game = session.query(Game).filter_by(id=game_id).first()
    if not game:
        logger.warning(f"Update of missing game {game_id}")
        raise GameNotFoundError(game_id)

    _validate_input(game_input)

    _apply_fields(game, game_input)
    # ISO strings in UTC compare in time order
    game.updated_at = max(utc_now(), game.updated_at)

    game.screenshots.clear()
    game.genres.clear()
    _write_children(session, game, game_input)

    logger.info(f"Updated game {game_id}")
    session.expire(game)
    return get_game(session, game_id)


def delete_game(session: Session, game_id: int) -> bool:
    """
    Delete a game by its ID. Returns True if deleted, False if not found.
    Screenshots and genres go with it through ON DELETE CASCADE.
    """
    game = session.query(Game).filter_by(id=game_id).first()
    if not game:
        return False
    session.delete(game)
    session.commit()
    logger.info(f"Deleted game {game_id}")
    return True
