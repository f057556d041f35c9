"""Central registry for JSON-returning tools exposed to the agent."""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from contextfit.render.renderer import RenderOptions, ResponseRenderer
from contextfit.storage.archiver import SAVE_DIR_PARAM

logger = logging.getLogger(__name__)

SAVE_DIR_SCHEMA = {
    "type": "string",
    "description": (
        "Optional directory to save the complete, untruncated response as JSON. "
        "Large collections are shortened in the reply; the saved file keeps every item."
    ),
}


@dataclass
class ToolDefinition:
    name: str
    description: str
    input_schema: dict[str, Any]
    handler: Callable[..., Any]


class ToolRegistry:
    """Registry for tools whose handlers return JSON values.

    Each tool has a name, description, input_schema (JSON Schema),
    and a handler function. Every result goes through the
    ResponseRenderer, so oversized collections are limited before the
    agent sees them and can be saved in full via ``raw_data_save_dir``.
    """

    def __init__(self, renderer: ResponseRenderer):
        self._renderer = renderer
        self._tools: dict[str, ToolDefinition] = {}

    def register(
        self,
        name: str,
        description: str,
        input_schema: dict[str, Any],
        handler: Callable[..., Any],
    ) -> None:
        """Register a tool with its schema and handler."""
        self._tools[name] = ToolDefinition(
            name=name,
            description=description,
            input_schema=input_schema,
            handler=handler,
        )

    def get_tool_schemas(self) -> list[dict[str, Any]]:
        """Return all tool schemas in OpenAI function calling format."""
        schemas = []
        for tool in self._tools.values():
            parameters = copy.deepcopy(tool.input_schema)
            parameters.setdefault("type", "object")
            parameters.setdefault("properties", {})[SAVE_DIR_PARAM] = dict(SAVE_DIR_SCHEMA)
            schemas.append({
                "type": "function",
                "function": {
                    "name": tool.name,
                    "description": tool.description,
                    "parameters": parameters,
                },
            })
        return schemas

    def execute(self, tool_name: str, tool_input: dict[str, Any]) -> str:
        """Execute a tool by name, return the rendered result."""
        params = dict(tool_input)
        save_dir = params.pop(SAVE_DIR_PARAM, None) or self._renderer.config.default_save_dir
        options = RenderOptions(raw_data_save_dir=save_dir, tool_name=tool_name, params=params)

        tool = self._tools.get(tool_name)
        if tool is None:
            return self._renderer.render({"error": f"Unknown tool: {tool_name}"}, RenderOptions(tool_name=tool_name))

        try:
            result = tool.handler(**params)
        except Exception as e:
            logger.warning("Tool %s failed: %s: %s", tool_name, type(e).__name__, e)
            return self._renderer.render(
                {"error": f"{type(e).__name__}: {e}"},
                RenderOptions(tool_name=tool_name),
            )

        return self._renderer.render(result, options)

    def has_tool(self, name: str) -> bool:
        return name in self._tools

    def list_tools(self) -> list[str]:
        return list(self._tools.keys())
