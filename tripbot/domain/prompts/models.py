"""Inputs the travel prompts are assembled from."""

from __future__ import annotations

from datetime import date
from typing import Any, Literal

from pydantic import BaseModel, Field


class ChatMessage(BaseModel):
    role: Literal['user', 'assistant']
    content: str


class Budget(BaseModel):
    min: float = Field(ge=0)
    max: float = Field(ge=0)
    currency: str = 'USD'


class TripPreferences(BaseModel):
    """Travel preferences extracted from a conversation so far.

    All fields are optional; a conversation fills them in gradually.
    """

    destination: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    travelers: int | None = Field(default=None, ge=1)
    budget: Budget | None = None
    flight_preferences: dict[str, Any] = Field(default_factory=dict)
    hotel_preferences: dict[str, Any] = Field(default_factory=dict)
    restaurant_preferences: dict[str, Any] = Field(default_factory=dict)
