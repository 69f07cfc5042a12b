"""Variable bag lookups.

A variable bag is any mapping of names to values. Values fall into one of
a few kinds, and every lookup reports which one it found so callers can
branch on a miss explicitly instead of probing for ``None``.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any


class ValueKind(str, Enum):
    MISSING = 'missing'
    NULL = 'null'
    SCALAR = 'scalar'
    OBJECT = 'object'
    SEQUENCE = 'sequence'


@dataclass(frozen=True)
class Lookup:
    kind: ValueKind
    value: Any = None

    @property
    def found(self) -> bool:
        return self.kind is not ValueKind.MISSING


MISS = Lookup(ValueKind.MISSING)


def as_mapping(obj: Any) -> Mapping[str, Any] | None:
    """Return the property mapping of an object-like value, if it has one."""
    if isinstance(obj, Mapping):
        return obj

    # Pydantic v2
    if hasattr(obj, "model_dump") and not isinstance(obj, type):
        return obj.model_dump()

    return None


def classify(value: Any) -> Lookup:
    if value is None:
        return Lookup(ValueKind.NULL, None)
    if isinstance(value, (list, tuple)):
        return Lookup(ValueKind.SEQUENCE, value)
    mapping = as_mapping(value)
    if mapping is not None:
        return Lookup(ValueKind.OBJECT, mapping)
    return Lookup(ValueKind.SCALAR, value)


def to_text(value: Any) -> str:
    """String form of a value as it appears in a rendered prompt."""
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (list, tuple)):
        return ','.join('' if item is None else to_text(item) for item in value)
    return str(value)


def is_truthy(lookup: Lookup) -> bool:
    # Objects and sequences count as truthy even when empty.
    if lookup.kind in (ValueKind.MISSING, ValueKind.NULL):
        return False
    if lookup.kind is not ValueKind.SCALAR:
        return True
    value = lookup.value
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)


class VariableBag:
    """Read-only view over the variables supplied to a render call."""

    def __init__(self, variables: Mapping[str, Any] | None = None) -> None:
        self._variables: Mapping[str, Any] = variables if variables is not None else {}

    def lookup(self, name: str) -> Lookup:
        if name not in self._variables:
            return MISS
        return classify(self._variables[name])

    def attribute(self, name: str, prop: str) -> Lookup:
        """Look up ``name.prop``; only one level of nesting is supported.

        Sequences expose their elements by index, so ``items.0`` is the
        first element of ``items``.
        """
        outer = self.lookup(name)
        if outer.kind is ValueKind.SEQUENCE:
            if not prop.isdecimal() or int(prop) >= len(outer.value):
                return MISS
            return classify(outer.value[int(prop)])
        if outer.kind is not ValueKind.OBJECT or prop not in outer.value:
            return MISS
        return classify(outer.value[prop])
