"""Configuration management for contextfit."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from contextfit.exceptions import ConfigError

load_dotenv()  # Load environment variables from .env file

DEFAULT_MAX_ITEMS_FOR_CONTEXT = 10


@dataclass(frozen=True)
class ResponseConfig:
    """Limits applied to JSON responses before they reach the agent.

    ``max_items_for_context`` is both the detection threshold (an array is
    oversized when it has more items) and the truncation size.
    """

    max_items_for_context: int = DEFAULT_MAX_ITEMS_FOR_CONTEXT
    default_save_dir: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.max_items_for_context, bool) or not isinstance(self.max_items_for_context, int):
            raise ConfigError(
                f"max_items_for_context must be an integer, got {type(self.max_items_for_context).__name__}"
            )
        if self.max_items_for_context <= 0:
            raise ConfigError(
                f"max_items_for_context must be positive, got {self.max_items_for_context}"
            )

    @classmethod
    def from_env(cls) -> ResponseConfig:
        """Create config from environment variables."""
        return cls(
            max_items_for_context=_parse_int(
                os.environ.get("CONTEXTFIT_MAX_ITEMS"),
                default=DEFAULT_MAX_ITEMS_FOR_CONTEXT,
            ),
            default_save_dir=os.environ.get("CONTEXTFIT_RAW_DATA_DIR") or None,
        )


def _parse_int(value: str | None, default: int) -> int:
    if value is None:
        return default
    try:
        parsed = int(value)
    except ValueError:
        return default
    return parsed if parsed > 0 else default
