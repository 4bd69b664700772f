"""A single shared game session with an async tick loop and broadcasts."""

from __future__ import annotations

import asyncio
import json
import logging

from starlette.websockets import WebSocket, WebSocketState

from snekhaus.config import GameConfig
from snekhaus.game import Game, Intent, new_game
from snekhaus.scores import HighScoreStore

logger = logging.getLogger(__name__)


class GameSession:
    """Owns one :class:`Game` and ticks it in the background.

    All access to the game goes through :attr:`lock`, so ticks and
    intents arriving from sockets or HTTP never interleave.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        store: HighScoreStore | None = None,
        game: Game | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        if game is None:
            game = new_game(
                store=store,
                config=self.config,
                arena_size=(self.config.arena_width, self.config.arena_height),
            )
        self.game = game
        self.lock = asyncio.Lock()
        self.clients: list[WebSocket] = []
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Launch the background tick loop if it is not already running."""
        if self.running:
            return
        self._task = asyncio.create_task(self._tick_loop())
        logger.info("Session tick loop started (%d ms).", self.config.tick_rate_ms)

    async def apply(self, intent: Intent) -> bool:
        """Apply *intent* under the session lock and push the new state."""
        async with self.lock:
            applied = self.game.on_intent(intent)
            payload = self.snapshot_json()
        if applied:
            await self._broadcast(payload)
        return applied

    def snapshot(self) -> dict:
        return self.game.current_phase().to_dict()

    def snapshot_json(self) -> str:
        return json.dumps(self.snapshot(), separators=(",", ":"))

    async def _tick_loop(self) -> None:
        """Tick the game at a fixed rate, broadcasting state each tick."""
        interval = self.config.tick_interval
        try:
            while not self.game.terminated:
                await asyncio.sleep(interval)
                async with self.lock:
                    report = self.game.on_tick()
                    payload = self.snapshot_json()
                if report.result is not None:
                    await self._broadcast(payload)
        except asyncio.CancelledError:
            logger.info("Session tick loop cancelled.")
        except Exception:
            logger.exception("Session tick loop error.")
        finally:
            if self.game.terminated:
                await self._close_connections()

    async def _broadcast(self, payload: str) -> None:
        """Send *payload* to every connected client, dropping dead ones."""
        dead: list[WebSocket] = []
        # Iterate over a snapshot; disconnect handlers mutate the live list.
        for ws in list(self.clients):
            try:
                if ws.client_state == WebSocketState.CONNECTED:
                    await ws.send_text(payload)
            except Exception:
                dead.append(ws)
        for ws in dead:
            if ws in self.clients:
                self.clients.remove(ws)

    async def _close_connections(self) -> None:
        for ws in list(self.clients):
            try:
                if ws.client_state == WebSocketState.CONNECTED:
                    await ws.close(code=1000, reason="Game terminated.")
            except Exception:
                logger.warning("Failed closing client socket.")
        self.clients.clear()

    async def cleanup(self) -> None:
        """Cancel the tick loop and close client sockets."""
        if self._task is not None and not self._task.done():
            self._task.cancel()
            await asyncio.gather(self._task, return_exceptions=True)
        await self._close_connections()
        logger.info("GameSession cleanup complete.")
