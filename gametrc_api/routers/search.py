from fastapi import APIRouter, Depends
from typing import List

from ..catalog import GameCatalog
from ..db import get_catalog
from ..schemas.game import Game as GameSchema, SearchFilter

router = APIRouter(prefix="/search", tags=["Search"])


@router.post("/", response_model=List[GameSchema])
def search(search_filter: SearchFilter, catalog: GameCatalog = Depends(get_catalog)):
    """
    Filter and sort games. Every field of the body is optional, e.g.

        {"query": "zelda", "status": "Completed", "sort_by": "Rating", "sort_asc": false}
    """
    return catalog.search(search_filter)
