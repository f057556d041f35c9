"""Shared test fixtures."""

from __future__ import annotations

from typing import Any

import pytest

from contextfit.core.limiter import ResponseLimiter
from contextfit.core.locator import LargeFieldLocator
from contextfit.core.summarizer import StructureSummarizer
from contextfit.render.renderer import ResponseRenderer
from contextfit.utils.config import ResponseConfig


def make_posts(count: int) -> list[dict[str, Any]]:
    """Build a list of post-like records, as a product listing API returns them."""
    return [
        {
            "id": str(i),
            "name": f"Product {i}",
            "votesCount": i * 3,
            "featured": i % 2 == 0,
            "topics": {"edges": [{"node": {"name": "AI"}}]},
        }
        for i in range(count)
    ]


@pytest.fixture
def config():
    """Config with the default threshold of 10 items."""
    return ResponseConfig(max_items_for_context=10)


@pytest.fixture
def locator(config):
    return LargeFieldLocator(config)


@pytest.fixture
def limiter(config):
    return ResponseLimiter(config)


@pytest.fixture
def summarizer():
    return StructureSummarizer()


@pytest.fixture
def renderer(config):
    return ResponseRenderer(config)


@pytest.fixture
def paginated_response():
    """A GraphQL-style connection with one oversized edge list."""
    return {
        "edges": [{"node": post} for post in make_posts(20)],
        "pageInfo": {"hasNextPage": True, "endCursor": "abc"},
        "totalCount": 20,
    }


@pytest.fixture
def posts_factory():
    return make_posts
