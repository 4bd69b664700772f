"""Pydantic models for API request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

from snekhaus.game import Intent


class IntentRequest(BaseModel):
    """Request body for POST /game/intents."""

    intent: Intent


class IntentResponse(BaseModel):
    """Result of applying an intent."""

    intent: Intent
    applied: bool
    phase: str


class ArenaSizeRequest(BaseModel):
    """Request body for PUT /game/arena."""

    width: int = Field(ge=1, le=500)
    height: int = Field(ge=1, le=500)


class ErrorResponse(BaseModel):
    """Standard error envelope."""

    detail: str
