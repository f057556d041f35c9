"""Compose agent-facing markdown for (possibly oversized) JSON responses."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from contextfit.core.limiter import LimitResult, ResponseLimiter
from contextfit.core.summarizer import StructureSummarizer
from contextfit.exceptions import ArchiveError
from contextfit.storage.archiver import ArchiveResult, RawDataArchiver, SAVE_DIR_PARAM
from contextfit.utils.config import ResponseConfig
from contextfit.utils.json_value import dumps_json

logger = logging.getLogger(__name__)

DEFAULT_TOOL_NAME = "response"
DEFAULT_TITLE = "Response"


@dataclass
class RenderOptions:
    raw_data_save_dir: str | None = None
    tool_name: str | None = None
    params: dict[str, Any] = field(default_factory=dict)


def format_file_size(num_bytes: int) -> str:
    """Human-readable size using binary multiples (1.0 KB == 1024 bytes)."""
    if num_bytes < 1024:
        return f"{num_bytes} B"
    if num_bytes < 1024 * 1024:
        return f"{num_bytes / 1024:.1f} KB"
    return f"{num_bytes / (1024 * 1024):.1f} MB"


class ResponseRenderer:
    """Turns a JSON response into a bounded markdown block for the agent.

    The block always has the same sections, in order:

    - ``## {tool}`` header
    - notices: where the raw data was saved, and which field was limited
    - ``### JSON Structure``: a type outline of the limited value
    - ``### Data``: the limited value as indented JSON

    Saving raw data is best-effort. A failed save is reported inside the
    text and the structure and data sections are still produced.
    """

    def __init__(
        self,
        config: ResponseConfig,
        limiter: ResponseLimiter | None = None,
        summarizer: StructureSummarizer | None = None,
        archiver: RawDataArchiver | None = None,
    ):
        self._config = config
        self._limiter = limiter or ResponseLimiter(config)
        self._summarizer = summarizer or StructureSummarizer()
        self._archiver = archiver or RawDataArchiver()

    @property
    def config(self) -> ResponseConfig:
        return self._config

    def render(self, data: Any, options: RenderOptions | None = None) -> str:
        options = options or RenderOptions()

        saved: ArchiveResult | None = None
        archive_error: str | None = None
        if options.raw_data_save_dir:
            try:
                saved = self._archiver.save(
                    data,
                    options.raw_data_save_dir,
                    options.tool_name or DEFAULT_TOOL_NAME,
                    options.params,
                )
            except ArchiveError as e:
                logger.warning("Raw data archive failed: %s", e)
                archive_error = str(e)

        result = self._limiter.limit(data)
        if result.was_limited:
            logger.debug(
                "Limited %s to %d of %d items",
                result.limited_field,
                self._config.max_items_for_context,
                result.original_count,
            )

        lines: list[str] = [f"## {options.tool_name or DEFAULT_TITLE}", ""]

        if saved is not None:
            lines.append(
                f"> **Raw data saved to**: `{saved.file_path}` ({format_file_size(saved.file_size)})"
            )
            lines.append("")
        if archive_error is not None:
            lines.append(f"> **Warning**: Failed to save raw data: {archive_error}")
            lines.append("")

        if result.was_limited:
            lines.append(self._limit_notice(result, saved, archive_error))
            lines.append("")

        lines.append("### JSON Structure")
        lines.append("```")
        lines.append(self._summarizer.summarize(result.limited))
        lines.append("```")
        lines.append("")

        if result.was_limited:
            lines.append(
                f"### Data (`{result.limited_field}`: "
                f"{self._config.max_items_for_context}/{result.original_count} items)"
            )
        else:
            lines.append("### Data")
        lines.append("```json")
        lines.append(dumps_json(result.limited))
        lines.append("```")

        return "\n".join(lines)

    def format_response(self, data: Any, options: RenderOptions | None = None) -> dict[str, Any]:
        """Render and wrap in a tool-call result envelope."""
        return to_tool_result(self.render(data, options))

    def _limit_notice(
        self,
        result: LimitResult,
        saved: ArchiveResult | None,
        archive_error: str | None,
    ) -> str:
        if saved is not None:
            follow_up = "Full data saved to file."
        elif archive_error is not None:
            follow_up = "Full data could not be saved to file."
        else:
            follow_up = f"Provide `{SAVE_DIR_PARAM}` parameter to save full response."
        return (
            f"> **Note**: `{result.limited_field}` limited to "
            f"{self._config.max_items_for_context} items ({result.original_count} total). "
            f"{follow_up}"
        )


def to_tool_result(text: str) -> dict[str, Any]:
    return {"content": [{"type": "text", "text": text}]}
