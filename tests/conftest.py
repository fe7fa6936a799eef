"""
Shared fixtures: every test gets its own provisioned in-memory catalog, and
the HTTP client is wired to that same catalog.
"""
import os
import sys
from typing import Callable, Generator

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from gametrc_api.catalog import GameCatalog
from gametrc_api.db import create_catalog_engine, get_catalog
from gametrc_api.main import app
from gametrc_api.schemas.game import GameInput

IN_MEMORY_URL = "sqlite://"


@pytest.fixture
def catalog() -> Generator[GameCatalog, None, None]:
    cat = GameCatalog.from_engine(create_catalog_engine(IN_MEMORY_URL))
    cat.provision()
    try:
        yield cat
    finally:
        cat.dispose()


@pytest.fixture
def client(catalog: GameCatalog) -> Generator[TestClient, None, None]:
    # Plain TestClient (no `with`) skips the lifespan, so the default database is never opened
    app.dependency_overrides[get_catalog] = lambda: catalog
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def new_game() -> Callable[..., GameInput]:
    """Factory for GameInput payloads; keyword arguments override the defaults."""
    def _make(**overrides) -> GameInput:
        data = {
            "title": "Test Game",
            "platform": "PC",
        }
        data.update(overrides)
        return GameInput(**data)
    return _make
