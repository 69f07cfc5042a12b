"""Plain-text formatting of conversation state for prompt variables."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from tripbot.domain.prompts.models import Budget, ChatMessage, TripPreferences

NO_PREFERENCES = 'No preferences specified yet.'
NOT_SPECIFIED = 'Not specified'


def _amount(value: float) -> str:
    return f'{value:g}'


def format_date(value: date | None) -> str | None:
    """Render a date the way prompts show it, e.g. ``Mon Mar 02 2026``."""
    if value is None:
        return None
    return value.strftime('%a %b %d %Y')


def format_budget(budget: Budget | None) -> str:
    if budget is None:
        return NOT_SPECIFIED
    return f'${_amount(budget.min)}-${_amount(budget.max)} {budget.currency}'


def format_conversation_history(messages: Iterable[ChatMessage]) -> str:
    return '\n'.join(f'{msg.role}: {msg.content}' for msg in messages)


def format_preferences(preferences: TripPreferences | None) -> str:
    if preferences is None:
        return NO_PREFERENCES

    lines: list[str] = []
    if preferences.destination:
        lines.append(f'Destination: {preferences.destination}')
    if preferences.start_date:
        lines.append(f'Start Date: {format_date(preferences.start_date)}')
    if preferences.end_date:
        lines.append(f'End Date: {format_date(preferences.end_date)}')
    if preferences.travelers:
        lines.append(f'Travelers: {preferences.travelers}')
    if preferences.budget:
        lines.append(f'Budget: {format_budget(preferences.budget)}')

    if not lines:
        return NO_PREFERENCES
    return '\n'.join(lines)
