from fastapi import APIRouter, Depends
from typing import List

from ..catalog import GameCatalog
from ..db import get_catalog
from ..schemas.game import Game as GameSchema, GameInput
from ..utils.errors import GameNotFoundError

router = APIRouter(prefix="/games", tags=["Games"])


@router.get("/", response_model=List[GameSchema])
def get_all_games(catalog: GameCatalog = Depends(get_catalog)):
    return catalog.get_all()


@router.get("/{game_id}", response_model=GameSchema)
def get_game_by_id(game_id: int, catalog: GameCatalog = Depends(get_catalog)):
    game = catalog.get_by_id(game_id)
    if not game:
        raise GameNotFoundError(game_id)
    return game


@router.post("/", response_model=GameSchema)
def add_game(game: GameInput, catalog: GameCatalog = Depends(get_catalog)):
    return catalog.add(game)


@router.put("/{game_id}", response_model=GameSchema)
def edit_game(game_id: int, game: GameInput, catalog: GameCatalog = Depends(get_catalog)):
    return catalog.update(game_id, game)


@router.delete("/{game_id}", response_model=bool)
def remove_game(game_id: int, catalog: GameCatalog = Depends(get_catalog)):
    return catalog.delete(game_id)
