"""Render the shape of a JSON value as a compact tree outline."""

from __future__ import annotations

from typing import Any

from contextfit.utils.json_value import json_type_name, visiting

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
SPACE = "    "


class StructureSummarizer:
    """Outlines types and array lengths instead of values.

    Only the first element of an array is expanded, so the outline stays
    small no matter how many items the array holds:

        posts: Array[10]
        └── [item]:
            ├── id: string
            └── votesCount: number
    """

    def summarize(self, value: Any) -> str:
        stack: set[int] = set()
        if isinstance(value, list):
            if not value:
                return "[]"
            with visiting(value, stack):
                lines = [f"Array[{len(value)}]"]
                lines.extend(self._item_lines(value[0], "", "[0]", stack))
            return "\n".join(lines)
        if isinstance(value, dict):
            if not value:
                return "{}"
            return "\n".join(self._object_lines(value, "", stack))
        return _leaf(value)

    def _object_lines(self, obj: dict[str, Any], prefix: str, stack: set[int]) -> list[str]:
        lines: list[str] = []
        with visiting(obj, stack):
            keys = list(obj.keys())
            for index, key in enumerate(keys):
                is_last = index == len(keys) - 1
                head = prefix + (LAST_BRANCH if is_last else BRANCH) + f"{key}:"
                child_prefix = prefix + (SPACE if is_last else PIPE)
                value = obj[key]

                if isinstance(value, list) and value:
                    first = value[0]
                    if isinstance(first, (list, dict)):
                        lines.append(f"{head} Array[{len(value)}]")
                        with visiting(value, stack):
                            lines.extend(self._item_lines(first, child_prefix, "[item]", stack))
                    else:
                        lines.append(f"{head} Array[{len(value)}] of {_leaf(first)}")
                elif isinstance(value, dict) and value:
                    lines.append(head)
                    lines.extend(self._object_lines(value, child_prefix, stack))
                else:
                    lines.append(f"{head} {_leaf(value)}")
        return lines

    def _item_lines(self, item: Any, prefix: str, label: str, stack: set[int]) -> list[str]:
        head = f"{prefix}{LAST_BRANCH}{label}:"
        child_prefix = prefix + SPACE
        if isinstance(item, dict) and item:
            return [head, *self._object_lines(item, child_prefix, stack)]
        if isinstance(item, list) and item:
            with visiting(item, stack):
                return [
                    f"{head} Array[{len(item)}]",
                    *self._item_lines(item[0], child_prefix, "[0]", stack),
                ]
        return [f"{head} {_leaf(item)}"]


def _leaf(value: Any) -> str:
    if isinstance(value, list):
        return "[]"
    if isinstance(value, dict):
        return "{}"
    return json_type_name(value)

