from fastapi import APIRouter, Depends

from ..catalog import GameCatalog
from ..db import get_catalog

router = APIRouter(prefix="/franchises", tags=["Franchises"])


@router.get("/", response_model=list[str])
def get_all_franchises(catalog: GameCatalog = Depends(get_catalog)):
    return catalog.franchises()
