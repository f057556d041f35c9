"""Filesystem-backed archive of full, untruncated responses."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from contextfit.exceptions import ArchiveError
from contextfit.utils.json_value import dumps_json

logger = logging.getLogger(__name__)

# Parameter naming the archive directory itself; never part of the filename
SAVE_DIR_PARAM = "raw_data_save_dir"

MAX_PARAM_VALUE_LENGTH = 30

_UNSAFE_FILENAME_CHARS = re.compile(r"[^a-zA-Z0-9_=-]")


@dataclass
class ArchiveResult:
    file_path: str
    file_size: int


class RawDataArchiver:
    """Writes complete response values as pretty-printed JSON files.

    Files are named ``{tool}{_params}_{timestamp}.json`` so that several
    calls of the same tool with different arguments can be told apart.
    """

    def save(
        self,
        data: Any,
        save_dir: str,
        tool_name: str,
        params: dict[str, Any] | None = None,
    ) -> ArchiveResult:
        # Serialize first so a bad value never leaves a partial file behind
        content = dumps_json(data)

        directory = Path(save_dir).expanduser()
        filename = f"{_safe_name(tool_name)}{_params_token(params)}_{_timestamp_token()}.json"
        path = (directory / filename).absolute()

        try:
            directory.mkdir(parents=True, exist_ok=True)
            # "x" so a same-millisecond name collision fails instead of overwriting
            with open(path, "x", encoding="utf-8") as f:
                f.write(content)
            size = path.stat().st_size
        except OSError as e:
            raise ArchiveError(f"Could not save raw data to {path}: {e}") from e

        logger.info("Saved raw %s response to %s (%d bytes)", tool_name, path, size)
        return ArchiveResult(file_path=str(path), file_size=size)


def _safe_name(tool_name: str) -> str:
    # Keeps the file inside save_dir: no separators or ".." survive
    return _UNSAFE_FILENAME_CHARS.sub("-", tool_name) or "response"


def _timestamp_token() -> str:
    """ISO-8601 UTC instant (millisecond precision) made filename-safe."""
    now = datetime.now(UTC)
    iso = now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"
    return iso.replace(":", "-").replace(".", "-")


def _params_token(params: dict[str, Any] | None) -> str:
    if not params:
        return ""
    parts = [
        f"{key}={_param_text(value)[:MAX_PARAM_VALUE_LENGTH]}"
        for key, value in params.items()
        if key != SAVE_DIR_PARAM and value is not None
    ]
    if not parts:
        return ""
    return _UNSAFE_FILENAME_CHARS.sub("-", "_" + "_".join(parts))


def _param_text(value: Any) -> str:
    # Booleans as the agent sent them (true/false), not Python's True/False
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(_param_text(item) for item in value)
    return str(value)
