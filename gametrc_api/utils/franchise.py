from typing import List

from sqlalchemy.orm import Session

from ..models.game import Game


def list_franchises(session: Session) -> List[str]:
    """Distinct franchise names, sorted. Games without a franchise are skipped."""
    rows = (
        session.query(Game.franchise)
        .filter(Game.franchise.isnot(None))
        .distinct()
        .order_by(Game.franchise)
        .all()
    )
    return [name for (name,) in rows]
