"""Fit assessment returned by the match step."""

from pydantic import BaseModel, Field


class MatchOutput(BaseModel):
    """Bounded fit score with supporting highlights and gaps.

    ``llm_fit_score`` and ``keyword_overlap`` are diagnostics: the narrative
    score before blending and the keyword-overlap score respectively.
    """
    fit_score: float = Field(ge=0, le=100)
    highlights: list[str] = []
    gaps: list[str] = []
    verdict: str
    llm_fit_score: float | None = Field(default=None, ge=0, le=100)
    keyword_overlap: float | None = Field(default=None, ge=0, le=100)
