"""Helpers for working with decoded JSON values.

A JSON value here is whatever ``json.loads`` produces: ``None``, ``bool``,
``int``/``float``, ``str``, ``list`` or ``dict``. Values are treated as
immutable input; anything that needs a modified version works on a clone.
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from contextfit.exceptions import UnserializableValueError

# Path reported when the value itself is the oversized array
ROOT_PATH = "(root)"

# Deepest container nesting walked before giving up; keeps well clear of the
# interpreter recursion limit
MAX_DEPTH = 200


def json_type_name(value: Any) -> str:
    """Name a scalar the way the agent-facing outline does."""
    if value is None:
        return "null"
    # bool is a subclass of int, so it has to be checked first
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def is_container(value: Any) -> bool:
    return isinstance(value, (list, dict))


def join_path(parent: str, key: str) -> str:
    return f"{parent}.{key}" if parent else key


def clone_json(value: Any, _path: str = "", _stack: set[int] | None = None) -> Any:
    """Structural copy of a JSON tree.

    Containers are rebuilt, scalars are shared (they are immutable).
    Raises UnserializableValueError on cycles or nesting deeper than MAX_DEPTH.
    """
    if not is_container(value):
        return value

    stack = _stack if _stack is not None else set()
    with visiting(value, stack, _path):
        if isinstance(value, dict):
            return {
                key: clone_json(item, join_path(_path, str(key)), stack)
                for key, item in value.items()
            }
        return [
            clone_json(item, f"{_path}[{i}]", stack)
            for i, item in enumerate(value)
        ]


def dumps_json(value: Any) -> str:
    """Pretty-print a JSON value; non-JSON input fails here instead of downstream."""
    try:
        return json.dumps(value, indent=2, ensure_ascii=False)
    except (TypeError, ValueError, RecursionError) as e:
        raise UnserializableValueError(f"Value is not serializable as JSON: {e}") from e


@contextmanager
def visiting(container: Any, stack: set[int], path: str = "") -> Iterator[None]:
    """Track containers on the current path.

    ``stack`` holds the ids of the enclosing containers. Revisiting one of
    them, or nesting deeper than MAX_DEPTH, raises UnserializableValueError
    instead of recursing forever or hitting RecursionError.
    """
    oid = id(container)
    if oid in stack:
        raise UnserializableValueError(f"Cycle detected at {path or ROOT_PATH}")
    if len(stack) >= MAX_DEPTH:
        raise UnserializableValueError(
            f"Nesting deeper than {MAX_DEPTH} levels at {path or ROOT_PATH}"
        )
    stack.add(oid)
    try:
        yield
    finally:
        stack.discard(oid)
