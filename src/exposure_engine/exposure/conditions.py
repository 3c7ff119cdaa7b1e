"""Condition evaluation for conditional exposures."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .types import Condition, Exposure


def _flags_match(flags: Mapping[str, Any], options: Mapping[str, Any]) -> bool:
    """True if every flag has exactly its expected value in the options."""
    return all(options.get(key) == expected for key, expected in flags.items())


def _holds(condition: Condition, obj: Any, options: Mapping[str, Any]) -> bool:
    if isinstance(condition, Mapping):
        return _flags_match(condition, options)
    return bool(condition(obj, options))


def conditions_met(exposure: Exposure, obj: Any, options: Mapping[str, Any] | None) -> bool:
    """
    Decide whether an exposure is emitted for an object and options context.

    - ``if`` mapping: every listed flag must equal its expected value
    - ``if`` predicate: must return a truthy value
    - ``unless`` mapping: excluded only when every listed flag matches
    - ``unless`` predicate: excluded when it returns a truthy value

    When both ``if`` and ``unless`` are declared, both must allow the exposure.
    """
    options = options if options is not None else {}

    if_condition = exposure.if_condition
    if if_condition is not None and not _holds(if_condition, obj, options):
        return False

    unless_condition = exposure.unless_condition
    if unless_condition is not None and _holds(unless_condition, obj, options):
        return False

    return True
