"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from snekhaus.config import GameConfig
from snekhaus.scores import HighScoreStore
from snekhaus.server.routes import router
from snekhaus.server.session import GameSession
from snekhaus.server.websocket import ws_router


def create_app(
    config: GameConfig | None = None,
    store: HighScoreStore | None = None,
) -> FastAPI:
    """Build and return the FastAPI application."""
    config = config if config is not None else GameConfig()

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        app.state.session = GameSession(config=config, store=store)
        app.state.session.start()
        yield
        await app.state.session.cleanup()

    app = FastAPI(title="Snekhaus API", version="0.1.0", lifespan=_lifespan)
    app.include_router(router)
    app.include_router(ws_router)
    return app
