"""Template engine: a registry of named prompt templates plus rendering.

The engine owns its registry; there is no module-level instance. The
application container builds one and hands it to whoever needs it.
"""

from __future__ import annotations

import threading
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import structlog

from tripbot.core.errors import TemplateNotFound
from tripbot.domain.prompt_store import PromptStore
from tripbot.domain.rendering.stages import run_pipeline
from tripbot.domain.rendering.variables import VariableBag
from tripbot.observability.tracing import traced

logger = structlog.get_logger()


@dataclass(frozen=True)
class Template:
    """A named prompt template."""

    category: str
    text: str


class TemplateEngine:
    """Render named templates against a variable bag.

    Args:
        store: Source set the registry is populated from at construction
            and on ``reload()``. Without one the engine starts empty.

    Examples:
        >>> engine = TemplateEngine()
        >>> engine.load("greeting", "Hi {{name}}!")
        >>> engine.render("greeting", {"name": "Ann"})
        'Hi Ann!'
    """

    def __init__(self, store: PromptStore | None = None) -> None:
        self._store = store
        self._lock = threading.Lock()
        self._templates: Mapping[str, Template] = {}
        self.reload()

    def load(self, category: str, template_text: str) -> None:
        """Register ``template_text`` under ``category``, replacing any existing one.

        The template's syntax is not checked here; mistakes only show up
        as unresolved text in rendered output.
        """
        with self._lock:
            templates = dict(self._templates)
            templates[category] = Template(category=category, text=template_text)
            self._templates = templates

    def get(self, category: str) -> Template:
        template = self._templates.get(category)
        if template is None:
            raise TemplateNotFound(category)
        return template

    def render(
        self,
        category: str,
        variables: Mapping[str, Any] | None = None,
        *,
        trace_id: str | None = None,
    ) -> str:
        """Render a registered template.

        Args:
            category: Template name.
            variables: Mapping of variable names to values.
            trace_id: Trace to attach the render span to. Defaults to the
                trace bound with ``bind_trace``, if any.

        Returns:
            Rendered prompt text.

        Raises:
            TemplateNotFound: If no template is registered under ``category``.
        """
        template = self.get(category)

        with traced('prompt_rendered', 'prompt.render', trace_id=trace_id, category=category) as span:
            rendered = run_pipeline(template.text, VariableBag(variables))
            span.attributes['chars'] = len(rendered)
        return rendered

    def list_available(self) -> list[str]:
        return sorted(self._templates)

    def reload(self) -> None:
        """Drop every template and repopulate the registry from the store.

        The new registry is built before it replaces the old one, so
        concurrent renders never see a half-cleared registry.
        """
        loaded = self._store.load_all() if self._store is not None else {}
        templates = {
            category: Template(category=category, text=text)
            for category, text in loaded.items()
        }
        with self._lock:
            self._templates = templates
        logger.info('prompt_templates_loaded', count=len(templates))

    def __contains__(self, category: object) -> bool:
        return category in self._templates

    def __len__(self) -> int:
        return len(self._templates)
