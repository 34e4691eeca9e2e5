"""Character-level cleanup of resume and job description text."""

import re
import unicodedata

# Bullet and dash glyphs unified to an ASCII hyphen before rendering
_RENDER_GLYPHS_RE = re.compile(r"[•–—│‒―▪·]")
_NON_PRINTABLE_RE = re.compile(r"[^\x20-\x7E\t\n\r]")
_MULTI_SPACE_RE = re.compile(r"\s{2,}")
_LINE_BREAK_RE = re.compile(r"\r?\n")

# Bullet glyphs rewritten to a "- " prefix before keyword extraction
_BULLET_RE = re.compile(r"[•·◦▪►■◆▶▸-]\s*")
_WHITESPACE_RE = re.compile(r"\s+")
_DISALLOWED_RE = re.compile(r"[^a-zA-Z0-9.,;:/()&\-'\s]")

# Everything from the first of these phrases onward is compensation boilerplate
_BENEFITS_RE = re.compile(r"\b(?:what we offer|benefits|compensation)[\s\S]*", re.IGNORECASE)


def ascii_safe(text: str) -> str:
    """Reduce text to printable ASCII with single-spaced whitespace.

    Idempotent: ``ascii_safe(ascii_safe(x)) == ascii_safe(x)``.
    """
    text = _RENDER_GLYPHS_RE.sub("-", text)
    text = unicodedata.normalize("NFKD", text)
    text = _NON_PRINTABLE_RE.sub("", text)
    text = _MULTI_SPACE_RE.sub(" ", text)
    return text.strip()


def dedupe_lines(text: str) -> str:
    """Drop blank and repeated lines, keeping first occurrences in order."""
    seen: set[str] = set()
    kept: list[str] = []
    for line in _LINE_BREAK_RE.split(text):
        line = line.strip()
        if line and line not in seen:
            seen.add(line)
            kept.append(line)
    return "\n".join(kept)


def _clean(text: str) -> str:
    text = _BULLET_RE.sub("- ", text)
    text = _DISALLOWED_RE.sub("", text)
    text = _WHITESPACE_RE.sub(" ", text)
    return text.strip()


def clean_resume_text(text: str) -> str:
    """Flatten resume text to a single allow-listed line for keyword extraction."""
    return _clean(text)


def clean_job_description(text: str) -> str:
    """Like :func:`clean_resume_text`, but cut at the benefits section first."""
    return _clean(_BENEFITS_RE.sub("", text))
