from fastapi import APIRouter, Depends

from ..catalog import GameCatalog
from ..db import get_catalog

router = APIRouter(prefix="/platforms", tags=["Platforms"])


@router.get("/", response_model=list[str])
def get_all_platforms(catalog: GameCatalog = Depends(get_catalog)):
    return catalog.platforms()
