"""Keyword tokenization and overlap scoring for resume-JD matching.

Keywords are lower-cased alphanumeric runs (``+`` allowed, so ``c++`` survives)
longer than two characters and outside a small stop-word list. The overlap
score is a heuristic signal, not a probability.
"""

import re
from collections import Counter
from collections.abc import Iterable

from pydantic import BaseModel

_TOKEN_RE = re.compile(r"[a-z0-9+]+")

STOP_WORDS: frozenset[str] = frozenset({
    # Articles / conjunctions
    "and", "or", "the", "a", "an",
    # Prepositions
    "for", "with", "from", "to", "of", "in", "on", "by", "as", "at",
    "into", "within", "across", "about",
    # Pronouns / determiners
    "that", "this", "your", "our", "their", "we", "you", "they", "them",
    "its", "it's",
    # Auxiliary verbs
    "is", "are", "be", "was", "were", "been", "will", "can", "able",
    "have", "has",
})

DEFAULT_TOP_KEYWORDS = 25

# Job sets smaller than this are scored as if they had this many keywords
_SCORE_DENOMINATOR_FLOOR = 10
_SCORE_MULTIPLIER = 120


class KeywordStats(BaseModel):
    overlap_terms: list[str] = []
    overlap_count: int = 0
    keyword_score: float = 0.0
    percent: int = 0


def tokenize(text: str) -> list[str]:
    """Split text into comparable keyword tokens, in order of appearance."""
    return [
        token for token in _TOKEN_RE.findall(text.lower())
        if len(token) > 2 and token not in STOP_WORDS
    ]


def extract_top_keywords(text: str, limit: int = DEFAULT_TOP_KEYWORDS) -> list[str]:
    """Return up to ``limit`` tokens by descending frequency.

    Ties keep first-occurrence order.
    """
    if limit <= 0:
        return []
    counts = Counter(tokenize(text))
    return [token for token, _ in counts.most_common(limit)]


def compute_keyword_stats(
    job_keywords: Iterable[str],
    resume_keywords: Iterable[str],
) -> KeywordStats:
    """Score how many job keywords the resume keywords cover.

    ``percent`` is the plain coverage percentage. ``keyword_score`` divides by
    at least 10 so a short job keyword list cannot saturate the score from a
    couple of lucky matches.
    """
    job_set = list(dict.fromkeys(job_keywords))
    if not job_set:
        return KeywordStats()

    resume_set = set(resume_keywords)
    overlap_terms = [kw for kw in job_set if kw in resume_set]
    overlap_count = len(overlap_terms)
    percent = round(min(100.0, overlap_count / len(job_set) * 100))
    keyword_score = min(
        100.0,
        overlap_count / max(_SCORE_DENOMINATOR_FLOOR, len(job_set)) * _SCORE_MULTIPLIER,
    )
    return KeywordStats(
        overlap_terms=overlap_terms,
        overlap_count=overlap_count,
        keyword_score=keyword_score,
        percent=percent,
    )
