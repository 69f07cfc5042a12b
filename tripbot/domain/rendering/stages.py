"""Render stages.

Each stage is a pure ``(text, variables) -> text`` rewrite. The engine runs
them in ``PIPELINE`` order on every render, whether or not the template
uses the directive a stage handles.

Unresolvable or malformed directives never raise: they are left in the
output as literal text (interpolation, dotted access) or collapse to an
empty string (conditionals, iteration).
"""

from __future__ import annotations

import re
from typing import Any, Callable

from tripbot.domain.rendering.variables import (
    Lookup,
    ValueKind,
    VariableBag,
    classify,
    is_truthy,
    to_text,
)

Stage = Callable[[str, VariableBag], str]

_VARIABLE = re.compile(r'\{\{(\w+)\}\}')
_IF_BLOCK = re.compile(r'\{\{#if\s+(\w+)\}\}(.*?)\{\{/if\}\}', re.DOTALL)
_EACH_BLOCK = re.compile(r'\{\{#each\s+(\w+)\}\}(.*?)\{\{/each\}\}', re.DOTALL)
_DOTTED = re.compile(r'\{\{(\w+)\.(\w+)\}\}')


def interpolate(text: str, variables: VariableBag) -> str:
    """Replace ``{{name}}`` with the value of ``name`` when it is present."""

    def replace(match: re.Match) -> str:
        found = variables.lookup(match.group(1))
        if not found.found:
            return match.group(0)
        return to_text(found.value)

    return _VARIABLE.sub(replace, text)


def conditionals(text: str, variables: VariableBag) -> str:
    """Keep or drop ``{{#if name}}...{{/if}}`` bodies. Blocks do not nest."""

    def replace(match: re.Match) -> str:
        if is_truthy(variables.lookup(match.group(1))):
            return match.group(2)
        return ''

    return _IF_BLOCK.sub(replace, text)


def _render_item(body: str, item: Lookup) -> str:
    if item.kind is ValueKind.OBJECT:
        for prop, value in item.value.items():
            body = body.replace('{{%s}}' % prop, to_text(value))
        return body
    if item.kind is ValueKind.SEQUENCE:
        for index, value in enumerate(item.value):
            body = body.replace('{{%d}}' % index, to_text(value))
        return body
    return body.replace('{{this}}', to_text(item.value))


def iterations(text: str, variables: VariableBag) -> str:
    """Expand ``{{#each name}}...{{/each}}`` once per element of ``name``.

    Only the element's own top-level properties (or ``{{this}}`` for
    scalars) are substituted in the body. Dotted tokens such as
    ``{{trip.destination}}`` inside the body are left for the dotted
    access stage, which resolves them against the outer variables.
    """

    def replace(match: re.Match) -> str:
        found = variables.lookup(match.group(1))
        if found.kind is not ValueKind.SEQUENCE:
            return ''
        body = match.group(2)
        return ''.join(_render_item(body, classify(item)) for item in found.value)

    return _EACH_BLOCK.sub(replace, text)


def dotted_access(text: str, variables: VariableBag) -> str:
    """Replace ``{{name.prop}}`` when ``name`` is an object holding ``prop``."""

    def replace(match: re.Match) -> str:
        found = variables.attribute(match.group(1), match.group(2))
        if not found.found:
            return match.group(0)
        return to_text(found.value)

    return _DOTTED.sub(replace, text)


PIPELINE: tuple[Stage, ...] = (
    interpolate,
    conditionals,
    iterations,
    dotted_access,
)


def run_pipeline(text: str, variables: dict[str, Any] | VariableBag | None = None) -> str:
    bag = variables if isinstance(variables, VariableBag) else VariableBag(variables)
    for stage in PIPELINE:
        text = stage(text, bag)
    return text
