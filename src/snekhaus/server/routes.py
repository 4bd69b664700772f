"""REST API route handlers for the shared game session."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from snekhaus.errors import SnekHausError
from snekhaus.server.models import (
    ArenaSizeRequest,
    ErrorResponse,
    IntentRequest,
    IntentResponse,
)
from snekhaus.server.session import GameSession

router = APIRouter(prefix="/game", tags=["game"])


def _get_session(request: Request) -> GameSession:
    return request.app.state.session


@router.get("")
async def get_game(request: Request) -> dict:
    """Return the current game view."""
    session = _get_session(request)
    async with session.lock:
        return session.snapshot()


@router.post(
    "/intents",
    responses={409: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def post_intent(body: IntentRequest, request: Request) -> IntentResponse:
    """Apply one intent to the game."""
    session = _get_session(request)
    try:
        applied = await session.apply(body.intent)
    except SnekHausError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return IntentResponse(
        intent=body.intent,
        applied=applied,
        phase=session.game.phase.tag.value,
    )


@router.put(
    "/arena",
    responses={409: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def put_arena(body: ArenaSizeRequest, request: Request) -> dict:
    """Set the arena size used by the next game."""
    session = _get_session(request)
    if body.width <= session.config.initial_length:
        raise HTTPException(
            status_code=422,
            detail="width must exceed the initial snek length.",
        )
    async with session.lock:
        accepted = session.game.set_arena_size(body.width, body.height)
    if not accepted:
        raise HTTPException(status_code=409, detail="Arena size is already fixed.")
    return {"width": body.width, "height": body.height}
