from __future__ import annotations

from typing import Dict, List

from sqlalchemy import func
from sqlalchemy.orm import Session

from ..models.game import Game
from ..models.game_genre import GameGenre
from ..schemas.game import GameStatus
from .config import STATS_TOP_N, STATS_RECENT_COMPLETIONS

# status token -> StatusBreakdown field
_STATUS_BUCKETS: Dict[str, str] = {
    GameStatus.NOT_STARTED.value: "not_started",
    GameStatus.PLAYING.value: "playing",
    GameStatus.COMPLETED.value: "completed",
    GameStatus.DROPPED.value: "dropped",
    GameStatus.BACKLOG.value: "backlog",
    GameStatus.WISHLIST.value: "wishlist",
}


def _count_by(session: Session, column, *, limit: int | None = None, skip_null: bool = False) -> List[dict]:
    """
    name/count pairs for `column`, biggest first, ties by name.
    NULL names come back as "Unknown".
    """
    count = func.count().label("total")
    query = session.query(column, count)
    if skip_null:
        query = query.filter(column.isnot(None))
    query = query.group_by(column).order_by(count.desc(), column.asc())
    if limit:
        query = query.limit(limit)
    return [
        {"name": name if name is not None else "Unknown", "count": int(n)}
        for name, n in query.all()
    ]


def compute_stats(session: Session) -> Dict[str, object]:
    """
    Dashboard numbers, recomputed from the tables on every call.

      - per-status counts (tokens outside the six statuses are not counted anywhere)
      - total games, total playtime (missing hours count as 0)
      - average rating over rated games only (None when nothing is rated)
      - completion rate: completed / (total - wishlist) * 100, 0 when nothing is owned
      - platform counts, top franchises and genres
      - titles of the most recently updated completed games

    An empty catalog is a normal result: zeros, None average, empty lists.
    """
    by_status = {field: 0 for field in _STATUS_BUCKETS.values()}
    for status, n in session.query(Game.status, func.count()).group_by(Game.status).all():
        field = _STATUS_BUCKETS.get(status)
        if field is not None:
            by_status[field] = int(n)

    total_games = session.query(func.count(Game.id)).scalar() or 0
    total_playtime = session.query(func.coalesce(func.sum(Game.playtime_hours), 0.0)).scalar()
    average_rating = session.query(func.avg(Game.rating)).filter(Game.rating.isnot(None)).scalar()

    owned = total_games - by_status["wishlist"]
    completion_rate = (by_status["completed"] / owned) * 100.0 if owned > 0 else 0.0

    recent_completions = [
        title
        for (title,) in session.query(Game.title)
        .filter(Game.status == GameStatus.COMPLETED.value)
        .order_by(Game.updated_at.desc(), Game.id.desc())
        .limit(STATS_RECENT_COMPLETIONS)
        .all()
    ]

    return {
        "total_games": int(total_games),
        "by_status": by_status,
        "total_playtime_hours": float(total_playtime or 0.0),
        "average_rating": float(average_rating) if average_rating is not None else None,
        "completion_rate": completion_rate,
        "games_by_platform": _count_by(session, Game.platform),
        "games_by_genre": _count_by(session, GameGenre.genre, limit=STATS_TOP_N),
        "games_by_franchise": _count_by(session, Game.franchise, limit=STATS_TOP_N, skip_null=True),
        "recent_completions": recent_completions,
    }
