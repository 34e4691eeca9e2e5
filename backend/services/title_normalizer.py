"""Structural cleanup of short labels: project titles, company names, summaries."""

import re

_PARENTHETICAL_RE = re.compile(r"\s*\([^)]*\)\s*")
_SEPARATOR_RUN_RE = re.compile(r"[-–—|•]+")
_MULTI_SPACE_RE = re.compile(r"\s{2,}")


def _normalize_separator(match: re.Match) -> str:
    source = match.string
    start, end = match.start(), match.end()
    # String edges count as whitespace
    prev_is_space = start == 0 or source[start - 1].isspace()
    next_is_space = end >= len(source) or source[end].isspace()
    if not prev_is_space and not next_is_space:
        return "-"
    return " - "


def sanitize_project_title(text: str) -> str:
    """Drop parentheticals and unify separators.

    A separator run flush between two characters is a compound-word hyphen
    (``Full-Stack``); anything else becomes a spaced clause separator
    (``A - B``).

    >>> sanitize_project_title("How to Draw (iOS) - Step-by-step")
    'How to Draw - Step-by-step'
    """
    without_parens = _PARENTHETICAL_RE.sub(" ", text)
    normalized = _SEPARATOR_RUN_RE.sub(_normalize_separator, without_parens)
    return _MULTI_SPACE_RE.sub(" ", normalized).strip()


def strip_name_from_summary(summary: str, full_name: str) -> str:
    """Remove the first whole-word, case-insensitive mention of ``full_name``."""
    parts = full_name.split()
    if not parts:
        return summary.strip()
    pattern = re.compile(r"\b" + r"\s+".join(re.escape(p) for p in parts) + r"\b", re.IGNORECASE)
    stripped = pattern.sub("", summary, count=1)
    return _MULTI_SPACE_RE.sub(" ", stripped).strip()
