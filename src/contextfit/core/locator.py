"""Find the oversized array field in a JSON response."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from contextfit.utils.config import ResponseConfig
from contextfit.utils.json_value import ROOT_PATH, join_path, visiting


@dataclass
class FieldLocation:
    path: str
    array: list[Any]
    parent: dict[str, Any] | None
    key: str
    # Keys from the root down to the field; a dotted path is ambiguous when keys contain "."
    keys: tuple[str, ...] = ()


class LargeFieldLocator:
    """Locates the first array field holding more than the configured number of items.

    Search order at every object level:
    1. every direct key, in declaration order, whose value is an oversized array
    2. only if none matched, each nested object in the same key order,
       applying the same rule recursively

    A direct oversized field therefore always wins over a deeper one, no
    matter where the nested objects sit among its siblings. Arrays are never
    searched inside.
    """

    def __init__(self, config: ResponseConfig):
        self._config = config

    @property
    def threshold(self) -> int:
        return self._config.max_items_for_context

    def find(self, data: Any) -> FieldLocation | None:
        if isinstance(data, list):
            if self._is_oversized(data):
                return FieldLocation(path=ROOT_PATH, array=data, parent=None, key="")
            return None
        if isinstance(data, dict):
            return self._find_in_object(data, "", (), set())
        return None

    def _find_in_object(
        self,
        obj: dict[str, Any],
        path: str,
        keys: tuple[str, ...],
        stack: set[int],
    ) -> FieldLocation | None:
        with visiting(obj, stack, path):
            for key, value in obj.items():
                if isinstance(value, list) and self._is_oversized(value):
                    return FieldLocation(
                        path=join_path(path, key),
                        array=value,
                        parent=obj,
                        key=key,
                        keys=(*keys, key),
                    )

            for key, value in obj.items():
                if isinstance(value, dict):
                    found = self._find_in_object(value, join_path(path, key), (*keys, key), stack)
                    if found is not None:
                        return found
            return None

    def _is_oversized(self, array: list[Any]) -> bool:
        return len(array) > self.threshold
