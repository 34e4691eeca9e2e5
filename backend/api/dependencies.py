"""Shared dependencies for API routes."""

from functools import lru_cache

from config import settings
from services.narrative import NarrativeSource, resolve_narrative_source


@lru_cache(maxsize=1)
def _resolved_source() -> NarrativeSource | None:
    return resolve_narrative_source(settings)


def get_narrative_source() -> NarrativeSource | None:
    """The process-wide narrative source, or ``None`` for deterministic output."""
    return _resolved_source()
