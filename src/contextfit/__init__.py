"""contextfit - keep oversized JSON responses inside an agent's context window.

Wrap a tool's JSON result before handing it to the agent:

    from contextfit import render_response
    text = render_response(data, tool_name="get_posts", raw_data_save_dir="./raw")

The largest offending collection is cut down to a configured number of
items, the shape of the response is outlined, and the full response can be
saved to disk for later retrieval.

Or from the shell:

    $ contextfit response.json --save-dir ./raw
"""

from __future__ import annotations

from typing import Any

__version__ = "0.1.0"


def render_response(
    data: Any,
    *,
    tool_name: str | None = None,
    raw_data_save_dir: str | None = None,
    params: dict[str, Any] | None = None,
    max_items: int | None = None,
) -> str:
    """Render ``data`` as agent-facing markdown using config from the environment.

    ``max_items`` overrides CONTEXTFIT_MAX_ITEMS for this call only.
    """
    from dataclasses import replace

    from contextfit.render.renderer import RenderOptions, ResponseRenderer
    from contextfit.utils.config import ResponseConfig

    config = ResponseConfig.from_env()
    if max_items is not None:
        config = replace(config, max_items_for_context=max_items)

    renderer = ResponseRenderer(config)
    return renderer.render(
        data,
        RenderOptions(
            raw_data_save_dir=raw_data_save_dir or config.default_save_dir,
            tool_name=tool_name,
            params=dict(params or {}),
        ),
    )
