from typing import List

from sqlalchemy.orm import Session

from ..models.game import Game


def list_platforms(session: Session) -> List[str]:
    """Distinct platform names in use, sorted."""
    rows = session.query(Game.platform).distinct().order_by(Game.platform).all()
    return [name for (name,) in rows]
