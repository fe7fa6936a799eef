from fastapi import APIRouter, Depends

from ..catalog import GameCatalog
from ..db import get_catalog
from ..schemas.stats import GameStats

router = APIRouter(prefix="/stats", tags=["Stats"])


@router.get("/", response_model=GameStats)
def stats_overview(catalog: GameCatalog = Depends(get_catalog)) -> GameStats:
    """
    Dashboard numbers: status breakdown, totals, average rating, completion rate,
    platform/genre/franchise counts and recent completions. Never cached.
    """
    return catalog.stats()
