"""Structural analysis of JSON responses: locate, limit, summarize."""

from contextfit.core.limiter import LimitResult, ResponseLimiter
from contextfit.core.locator import FieldLocation, LargeFieldLocator
from contextfit.core.summarizer import StructureSummarizer

__all__ = [
    "FieldLocation",
    "LargeFieldLocator",
    "LimitResult",
    "ResponseLimiter",
    "StructureSummarizer",
]
