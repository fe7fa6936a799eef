from typing import List

from sqlalchemy import or_, nulls_last
from sqlalchemy.orm import Query, Session

from ..models.game import Game
from ..models.game_genre import GameGenre
from ..schemas.game import SearchFilter, SortField
from .game import hydrate_games

_SORT_COLUMNS = {
    SortField.TITLE: Game.title,
    SortField.RELEASE_DATE: Game.release_date,
    SortField.RATING: Game.rating,
    SortField.PLAYTIME_HOURS: Game.playtime_hours,
    SortField.PROGRESS_PERCENT: Game.progress_percent,
    SortField.UPDATED_AT: Game.updated_at,
    SortField.SEQUENCE_IN_FRANCHISE: Game.sequence_in_franchise,
}


def _like_pattern(value: str) -> str:
    """Substring pattern in which %, _ and \\ from the user match literally."""
    escaped = value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def build_search_query(session: Session, search: SearchFilter) -> Query:
    """
    Query for the distinct ids of games matching every filter field that is set.
    Every field that is set adds a condition, empty strings included; unset fields
    add none. Values always travel as bound parameters.
    """
    # no joins, so ids come back distinct
    query = session.query(Game.id)

    if search.query is not None:
        pattern = _like_pattern(search.query)
        query = query.filter(or_(
            Game.title.ilike(pattern, escape="\\"),
            Game.franchise.ilike(pattern, escape="\\"),
            Game.notes.ilike(pattern, escape="\\"),
        ))

    if search.status is not None:
        query = query.filter(Game.status == search.status.value)

    if search.platform is not None:
        query = query.filter(Game.platform == search.platform)

    if search.franchise is not None:
        query = query.filter(Game.franchise.ilike(_like_pattern(search.franchise), escape="\\"))

    if search.genre is not None:
        query = query.filter(Game.genres.any(GameGenre.genre == search.genre))

    if search.min_rating is not None:
        query = query.filter(Game.rating >= search.min_rating)

    column = _SORT_COLUMNS[search.sort_by or SortField.UPDATED_AT]
    ascending = True if search.sort_asc is None else search.sort_asc
    direction = column.asc() if ascending else column.desc()
    tiebreak = Game.id.asc() if ascending else Game.id.desc()

    return query.order_by(nulls_last(direction), tiebreak)


def search_games(session: Session, search: SearchFilter) -> List[Game]:
    ids = [row.id for row in build_search_query(session, search).all()]
    return hydrate_games(session, ids)
