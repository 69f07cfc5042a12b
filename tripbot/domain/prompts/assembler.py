"""Build the variable bags for the travel prompts and render them.

Each method mirrors one shipped template under ``tripbot/prompts``.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from datetime import date
from typing import Any

from tripbot.domain.prompts.formatting import (
    NO_PREFERENCES,
    format_budget,
    format_conversation_history,
    format_date,
    format_preferences,
)
from tripbot.domain.prompts.models import ChatMessage, TripPreferences
from tripbot.domain.rendering import TemplateEngine


class PromptAssembler:
    def __init__(self, engine: TemplateEngine) -> None:
        self._engine = engine

    def conversation(
        self,
        user_message: str,
        *,
        previous_messages: Sequence[ChatMessage] = (),
        preferences: TripPreferences | None = None,
        user_id: str | None = None,
        conversation_id: str | None = None,
    ) -> str:
        variables: dict[str, Any] = {'userMessage': user_message}
        # Empty sequences and objects still satisfy {{#if}}, so leave them out.
        if previous_messages:
            variables['previousMessages'] = list(previous_messages)
        summary = format_preferences(preferences)
        if summary != NO_PREFERENCES:
            variables['extractedPreferences'] = preferences
            variables['preferencesSummary'] = summary
        if user_id is not None:
            variables['userId'] = user_id
        if conversation_id is not None:
            variables['conversationId'] = conversation_id
        return self._engine.render('conversation', variables)

    def preference_extraction(self, history: Sequence[ChatMessage]) -> str:
        return self._engine.render(
            'preference_extraction',
            {'conversationHistory': format_conversation_history(history)},
        )

    def _search(self, category: str, preferences: TripPreferences, extra_key: str, extra: dict[str, Any]) -> str:
        variables: dict[str, Any] = {
            'destination': preferences.destination,
            'startDate': format_date(preferences.start_date),
            'endDate': format_date(preferences.end_date),
            'travelers': preferences.travelers or 1,
            'budget': format_budget(preferences.budget),
            extra_key: json.dumps(extra, default=str),
        }
        # Unset values stay as literal placeholders rather than rendering "null".
        return self._engine.render(
            category,
            {key: value for key, value in variables.items() if value is not None},
        )

    def flight_search(self, preferences: TripPreferences) -> str:
        return self._search('flight_search', preferences, 'flightPreferences', preferences.flight_preferences)

    def hotel_search(self, preferences: TripPreferences) -> str:
        return self._search('hotel_search', preferences, 'hotelPreferences', preferences.hotel_preferences)

    def restaurant_search(self, preferences: TripPreferences) -> str:
        return self._search(
            'restaurant_search',
            preferences,
            'restaurantPreferences',
            preferences.restaurant_preferences,
        )

    def itinerary(
        self,
        *,
        destination: str,
        start_date: date,
        end_date: date,
        travelers: int,
        budget: float,
        flights: list[dict[str, Any]],
        hotels: list[dict[str, Any]],
        restaurants: list[dict[str, Any]],
    ) -> str:
        duration = (end_date - start_date).days
        return self._engine.render(
            'itinerary_generation',
            {
                'destination': destination,
                'startDate': format_date(start_date),
                'endDate': format_date(end_date),
                'duration': duration,
                'travelers': travelers,
                'budget': budget,
                'flights': json.dumps(flights, indent=2, default=str),
                'hotels': json.dumps(hotels, indent=2, default=str),
                'restaurants': json.dumps(restaurants, indent=2, default=str),
            },
        )
