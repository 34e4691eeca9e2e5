"""Fit score blending and the deterministic keyword-only match verdict."""

from models.schemas import MatchOutput
from services.keyword_extractor import KeywordStats

DEFAULT_LLM_WEIGHT = 0.7

# Caps on narrative lists handed to the renderer
MAX_FEEDBACK_ITEMS = 6
FALLBACK_FEEDBACK_ITEMS = 3

STRONG_THRESHOLD = 70
PARTIAL_THRESHOLD = 40


def clamp_score(value: float) -> int:
    """Round and bound a score to [0, 100]."""
    return max(0, min(100, round(value)))


def blend_score(llm_score: float, keyword_score: float, llm_weight: float = DEFAULT_LLM_WEIGHT) -> int:
    """Weighted blend of the narrative and keyword scores, bounded to [0, 100]."""
    return clamp_score(llm_score * llm_weight + keyword_score * (1 - llm_weight))


def verdict_for_score(score: float) -> str:
    if score > STRONG_THRESHOLD:
        return "Likely qualified with strong alignment."
    if score > PARTIAL_THRESHOLD:
        return "Partially qualified; additional evidence would help."
    return "Limited evidence of fit for the role."


def build_fallback_match(
    job_keywords: list[str],
    resume_keywords: list[str],
    stats: KeywordStats,
) -> MatchOutput:
    """Keyword-only match used when no narrative score is available."""
    keyword_score = stats.keyword_score
    resume_set = set(resume_keywords)

    highlights = [
        f"Resume references {keyword}."
        for keyword in resume_keywords[:FALLBACK_FEEDBACK_ITEMS]
    ]
    gaps = [
        f"No direct mention of {keyword}."
        for keyword in [kw for kw in job_keywords if kw not in resume_set][:FALLBACK_FEEDBACK_ITEMS]
    ]

    return MatchOutput(
        fit_score=clamp_score(keyword_score),
        highlights=highlights,
        gaps=gaps,
        verdict=verdict_for_score(keyword_score),
        llm_fit_score=clamp_score(keyword_score),
        keyword_overlap=clamp_score(keyword_score),
    )


def finalize_match(
    parsed: MatchOutput,
    stats: KeywordStats,
    llm_weight: float = DEFAULT_LLM_WEIGHT,
) -> MatchOutput:
    """Blend a validated narrative match with the keyword score and apply caps."""
    llm_score = clamp_score(parsed.fit_score)
    return MatchOutput(
        fit_score=blend_score(llm_score, stats.keyword_score, llm_weight),
        highlights=parsed.highlights[:MAX_FEEDBACK_ITEMS],
        gaps=parsed.gaps[:MAX_FEEDBACK_ITEMS],
        verdict=parsed.verdict.strip(),
        llm_fit_score=llm_score,
        keyword_overlap=clamp_score(stats.keyword_score),
    )
