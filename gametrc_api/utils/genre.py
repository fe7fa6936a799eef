from typing import List

from sqlalchemy.orm import Session

from ..models.game_genre import GameGenre


def list_genres(session: Session) -> List[str]:
    rows = session.query(GameGenre.genre).distinct().order_by(GameGenre.genre).all()
    return [name for (name,) in rows]
