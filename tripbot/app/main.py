"""FastAPI service exposing the travel prompt templates.

Callers that assemble LLM requests can:
- list the registered template categories
- render a category against a JSON variable bag
- reload templates after editing them on disk, without a restart
"""

from __future__ import annotations

from fastapi import FastAPI

from tripbot import __version__
from tripbot.api.routes import register_routes
from tripbot.config import settings
from tripbot.observability.logging import configure_logging

tags_metadata = [
    {
        "name": "Prompts",
        "description": "Render and reload the travel assistant's prompt templates"
    },
]

configure_logging(settings.log_level, json_output=settings.log_json)

app = FastAPI(
    title='Travel Assistant Prompt Service',
    version=__version__,
    description='Prompt templates for the travel-planning assistant',
    openapi_tags=tags_metadata
)

# Register all API routes
register_routes(app)
