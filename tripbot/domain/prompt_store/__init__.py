"""This module handles fetching prompt templates from their sources."""
from .prompt_store import PromptStore
from .file_system_prompt_store import FilesystemPromptStore
from .in_memory_prompt_store import InMemoryPromptStore

__all__ = ["PromptStore", "FilesystemPromptStore", "InMemoryPromptStore"]
