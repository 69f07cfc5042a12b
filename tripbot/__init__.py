"""Prompt templates and rendering for the travel-planning assistant."""

__version__ = "1.0.0"
