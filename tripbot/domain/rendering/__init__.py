"""Prompt template rendering."""

from .engine import Template, TemplateEngine
from .stages import PIPELINE, conditionals, dotted_access, interpolate, iterations, run_pipeline
from .variables import Lookup, ValueKind, VariableBag

__all__ = [
    "Lookup",
    "PIPELINE",
    "Template",
    "TemplateEngine",
    "ValueKind",
    "VariableBag",
    "conditionals",
    "dotted_access",
    "interpolate",
    "iterations",
    "run_pipeline",
]
