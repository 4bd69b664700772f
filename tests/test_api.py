"""REST API endpoint tests."""

from __future__ import annotations

import numpy as np
import pytest
from httpx import ASGITransport, AsyncClient

from snekhaus.config import GameConfig
from snekhaus.game import Game
from snekhaus.server.app import create_app
from snekhaus.server.session import GameSession

BASE = "http://test"


@pytest.fixture()
def session():
    config = GameConfig(arena_width=10, arena_height=10)
    game = Game(arena_size=(10, 10), config=config, rng=np.random.default_rng(0))
    return GameSession(config=config, game=game)


@pytest.fixture()
def app(session):
    application = create_app()
    application.state.session = session
    return application


@pytest.fixture()
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url=BASE) as c:
        yield c


class TestGetGame:
    async def test_idle_state(self, client):
        resp = await client.get("/game")
        assert resp.status_code == 200
        data = resp.json()
        assert data["phase"] == "idle"
        assert data["best_score"] == 0
        assert data["head"] is None

    async def test_running_state(self, client):
        await client.post("/game/intents", json={"intent": "start"})
        data = (await client.get("/game")).json()
        assert data["phase"] == "running"
        assert data["head"] == [6, 5]
        assert len(data["morsels"]) == 1


class TestIntents:
    async def test_start(self, client):
        resp = await client.post("/game/intents", json={"intent": "start"})
        assert resp.status_code == 200
        assert resp.json() == {"intent": "start", "applied": True, "phase": "running"}

    async def test_ignored_intent(self, client):
        resp = await client.post("/game/intents", json={"intent": "pause"})
        assert resp.status_code == 200
        assert resp.json()["applied"] is False
        assert resp.json()["phase"] == "idle"

    async def test_unknown_intent(self, client):
        resp = await client.post("/game/intents", json={"intent": "jump"})
        assert resp.status_code == 422

    async def test_turn_and_tick(self, client, session):
        await client.post("/game/intents", json={"intent": "start"})
        await client.post("/game/intents", json={"intent": "move_north"})
        session.game.on_tick()
        data = (await client.get("/game")).json()
        assert data["head"] == [6, 4]
        assert data["direction"] == "north"

    async def test_pause_resume_quit(self, client):
        for intent, phase in [
            ("start", "running"),
            ("pause", "paused"),
            ("resume", "running"),
            ("quit", "ended"),
            ("start", "idle"),
            ("terminate", "terminated"),
        ]:
            resp = await client.post("/game/intents", json={"intent": intent})
            assert resp.json()["phase"] == phase


class TestArena:
    async def test_set_size(self, client):
        resp = await client.put("/game/arena", json={"width": 12, "height": 8})
        assert resp.status_code == 200
        await client.post("/game/intents", json={"intent": "start"})
        data = (await client.get("/game")).json()
        assert data["arena_size"] == [12, 8]

    async def test_size_fixed_once_started(self, client):
        await client.post("/game/intents", json={"intent": "start"})
        resp = await client.put("/game/arena", json={"width": 12, "height": 8})
        assert resp.status_code == 409

    async def test_too_narrow(self, client):
        resp = await client.put("/game/arena", json={"width": 3, "height": 8})
        assert resp.status_code == 422

    async def test_invalid_dimensions(self, client):
        resp = await client.put("/game/arena", json={"width": 0, "height": 8})
        assert resp.status_code == 422


class TestFailedStart:
    @pytest.fixture()
    def session(self, request):
        config = GameConfig(arena_width=10, arena_height=10)
        game = Game(arena_size=request.param, config=config, rng=np.random.default_rng(0))
        return GameSession(config=config, game=game)

    @pytest.mark.parametrize(
        ("session", "status"),
        [((3, 3), 422), ((4, 1), 409)],
        indirect=["session"],
    )
    async def test_arena_stays_configurable(self, client, status):
        resp = await client.post("/game/intents", json={"intent": "start"})
        assert resp.status_code == status
        assert "detail" in resp.json()
        assert (await client.get("/game")).json()["phase"] == "idle"

        resp = await client.put("/game/arena", json={"width": 12, "height": 8})
        assert resp.status_code == 200
        resp = await client.post("/game/intents", json={"intent": "start"})
        assert resp.json()["phase"] == "running"


async def test_error_schema_documented(client):
    schema = (await client.get("/openapi.json")).json()
    assert "ErrorResponse" in schema["components"]["schemas"]
    responses = schema["paths"]["/game/arena"]["put"]["responses"]
    assert "409" in responses
