from __future__ import annotations

from typing import Any, Dict, List

import pytest

from scanlings.app import create_app
from scanlings.config import Settings


def _unit(local_id: str, archetype: str, rarity: str = "Common") -> Dict[str, Any]:
    return {"local_id": local_id, "archetype": archetype, "element": "Water", "rarity": rarity}


@pytest.fixture
def team_payload():
    def build(archetypes: List[str], prefix: str = "u", rarity: str = "Common") -> List[Dict[str, Any]]:
        return [_unit(f"{prefix}{i}", name, rarity) for i, name in enumerate(archetypes)]

    return build


@pytest.fixture
def battle_body(team_payload) -> Dict[str, Any]:
    return {
        "my_team": team_payload(["Bulwark Golem", "Cannon Critter", "Sprout Medic"], "m"),
        "opponent_team": team_payload(["Pouncer", "Zoner Wisp", "Hex Scholar"], "o"),
    }


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def app_and_socketio(settings):
    app, socketio = create_app(settings)
    app.config["TESTING"] = True
    return app, socketio


@pytest.fixture
def client(app_and_socketio):
    app, _ = app_and_socketio
    return app.test_client()
