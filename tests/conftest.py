import random

import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_game_service, get_move_selector
from app.engine.move_selector import MoveSelector
from app.services.game_service import GameService
from main import app


@pytest.fixture
def selector():
    return MoveSelector(rng=random.Random(1234))


@pytest.fixture
def game_service(selector):
    return GameService(selector=selector, think_delay=0)


@pytest.fixture
def client(game_service, selector):
    app.dependency_overrides[get_game_service] = lambda: game_service
    app.dependency_overrides[get_move_selector] = lambda: selector
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
