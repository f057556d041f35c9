"""Truncate the oversized field of a JSON response without touching the input."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from contextfit.core.locator import LargeFieldLocator
from contextfit.utils.config import ResponseConfig
from contextfit.utils.json_value import ROOT_PATH, clone_json, join_path, visiting


@dataclass
class LimitResult:
    limited: Any
    original_count: int
    was_limited: bool
    limited_field: str | None


class ResponseLimiter:
    """Limits the first oversized array (see LargeFieldLocator) to the configured size.

    When nothing is oversized the input is returned as-is. Otherwise the
    result is built from a structural clone, so the caller's value is never
    mutated and never shares containers with the limited copy.
    """

    def __init__(self, config: ResponseConfig, locator: LargeFieldLocator | None = None):
        self._config = config
        self._locator = locator or LargeFieldLocator(config)

    def limit(self, data: Any) -> LimitResult:
        location = self._locator.find(data)
        if location is None:
            return LimitResult(limited=data, original_count=0, was_limited=False, limited_field=None)

        max_items = self._config.max_items_for_context
        original_count = len(location.array)
        head = clone_json(location.array[:max_items])

        if location.parent is None:
            return LimitResult(
                limited=head,
                original_count=original_count,
                was_limited=True,
                limited_field=ROOT_PATH,
            )

        limited = _clone_replacing(data, location.keys, head, "", set())

        return LimitResult(
            limited=limited,
            original_count=original_count,
            was_limited=True,
            limited_field=location.path,
        )


def _clone_replacing(
    obj: dict[str, Any],
    keys: tuple[str, ...],
    replacement: list[Any],
    path: str,
    stack: set[int],
) -> dict[str, Any]:
    """Clone ``obj`` with the field at ``keys`` swapped for ``replacement``.

    The oversized array itself is never copied.
    """
    first, rest = keys[0], keys[1:]
    with visiting(obj, stack, path):
        out: dict[str, Any] = {}
        for key, value in obj.items():
            child_path = join_path(path, key)
            if key != first:
                out[key] = clone_json(value, child_path, stack)
            elif rest:
                out[key] = _clone_replacing(value, rest, replacement, child_path, stack)
            else:
                out[key] = replacement
        return out
