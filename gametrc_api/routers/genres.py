from fastapi import APIRouter, Depends

from ..catalog import GameCatalog
from ..db import get_catalog

router = APIRouter(prefix="/genres", tags=["Genres"])


@router.get("/", response_model=list[str])
def list_genres(catalog: GameCatalog = Depends(get_catalog)):
    return catalog.genres()
