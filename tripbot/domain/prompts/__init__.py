"""Travel prompt assembly on top of the template engine."""
from .models import Budget, ChatMessage, TripPreferences
from .formatting import format_budget, format_conversation_history, format_date, format_preferences
from .assembler import PromptAssembler

__all__ = [
    "Budget",
    "ChatMessage",
    "PromptAssembler",
    "TripPreferences",
    "format_budget",
    "format_conversation_history",
    "format_date",
    "format_preferences",
]
