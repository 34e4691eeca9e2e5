"""Heuristic resume parsing: positional and section-heading rules.

Used when structured extraction is unavailable or fails. Output always goes
through :func:`services.normalizers.normalize_candidate_profile`.
"""

import logging
import re
from urllib.parse import urlparse

from models.schemas import CandidateProfile, Contact, Project
from services.normalizers import (
    DEFAULT_CANDIDATE_NAME,
    DEFAULT_PROJECT_NAME,
    DEFAULT_PROJECT_SUMMARY,
    normalize_candidate_profile,
    trim_list,
)

logger = logging.getLogger(__name__)

# Known section headings (lower-cased, bullet-stripped line must equal one)
SECTION_HEADINGS: frozenset[str] = frozenset({
    "about",
    "profile",
    "summary",
    "objective",
    "what i've done",
    "what i want to achieve",
    "experience",
    "work experience",
    "professional experience",
    "projects",
    "skills",
    "technical skills",
    "tools",
    "toolbox",
    "education",
    "certifications",
    "language",
    "languages",
    "contact",
    "willing to relocate",
})

EXPERIENCE_HEADINGS: frozenset[str] = frozenset({
    "experience",
    "work experience",
    "professional experience",
})

ROLE_RE = re.compile(r"\b(?:developer|engineer|designer|manager|specialist)\b", re.IGNORECASE)
EMAIL_RE = re.compile(r"[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}", re.IGNORECASE)
PHONE_RE = re.compile(r"\+?\d[\d \t().-]{7,}\d")
URL_RE = re.compile(r"https?://[^\s)]+", re.IGNORECASE)
LOCATION_RE = re.compile(r"[A-Za-z]+(?:\s*[/,]\s*[A-Za-z]+)+")
JOB_LINE_RE = re.compile(r"^(.+?)\s*@\s*(.+)$")

_BULLET_PREFIX_RE = re.compile(r"^[\s•*·\-–—²▪›»●◦]+\s*")
_TRAILING_ANGLE_RE = re.compile(r"[<>]+$")
_ITEM_SPLIT_RE = re.compile(r"[,;•·|]")
_ITEM_PREFIX_RE = re.compile(r"^[^A-Za-z0-9+]+")
_NAME_SUFFIX_RE = re.compile(r"\s{2,}.+$")

MIN_PHONE_DIGITS = 9
TITLE_SEARCH_LINES = 5
RELOCATION_WINDOW = 4


def sanitize_line(line: str) -> str:
    """Strip bullet prefixes and trailing angle brackets from a line."""
    line = _BULLET_PREFIX_RE.sub("", line)
    return _TRAILING_ANGLE_RE.sub("", line).strip()


def split_lines(text: str) -> list[str]:
    """Non-blank, trimmed lines of ``text``."""
    return [line.strip() for line in re.split(r"\r?\n", text) if line.strip()]


def extract_section_list(lines: list[str], label: str) -> list[str]:
    """Collect the comma/semicolon/pipe/bullet separated items under a heading.

    The section starts after the first line equal to ``label`` (or starting
    with ``label:``) and ends at a blank line once items were collected, or at
    a different known heading.
    """
    lower_label = label.lower()
    values: dict[str, None] = {}
    active = False

    for line in lines:
        cleaned = sanitize_line(line.strip())
        normalized = cleaned.lower()

        if not active:
            if normalized == lower_label or normalized.startswith(f"{lower_label}:"):
                active = True
            continue

        if not cleaned:
            if values:
                break
            continue

        if normalized in SECTION_HEADINGS and normalized != lower_label:
            break

        if normalized.startswith(lower_label):
            continue

        candidates = [
            _ITEM_PREFIX_RE.sub("", part).strip()
            for part in _ITEM_SPLIT_RE.split(cleaned)
        ]
        candidates = [c for c in candidates if c]
        for candidate in candidates or [cleaned]:
            values[candidate] = None

    return list(values)


def extract_projects(lines: list[str]) -> list[Project]:
    """Read ``role @ company`` entries and their bullets from experience sections."""
    entries: list[dict] = []
    current: dict | None = None
    in_experience = False

    def flush() -> None:
        nonlocal current
        if current is not None:
            entries.append(current)
            current = None

    for raw_line in lines:
        trimmed = raw_line.strip()
        if not trimmed:
            continue

        cleaned = sanitize_line(trimmed)
        normalized = cleaned.lower()

        if normalized in SECTION_HEADINGS:
            flush()
            in_experience = normalized in EXPERIENCE_HEADINGS
            continue

        if not in_experience:
            continue

        job_match = JOB_LINE_RE.match(cleaned)
        if job_match:
            flush()
            current = {
                "name": job_match.group(2).strip(),
                "summary": job_match.group(1).strip(),
                "outcomes": [],
            }
            continue

        if current is not None and cleaned:
            current["outcomes"].append(cleaned)

    flush()

    projects = []
    for entry in entries:
        if not (entry["name"] or entry["summary"] or entry["outcomes"]):
            continue
        projects.append(Project(
            name=entry["name"] or entry["summary"] or DEFAULT_PROJECT_NAME,
            summary=entry["summary"] or entry["name"] or DEFAULT_PROJECT_SUMMARY,
            skills=[],
            outcomes=trim_list(entry["outcomes"]),
        ))
    return projects


def _to_url(value: str | None) -> str | None:
    if not value:
        return None
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        return None
    return value


def _find_phone(text: str) -> str | None:
    for match in PHONE_RE.finditer(text):
        candidate = match.group(0)
        if sum(ch.isdigit() for ch in candidate) >= MIN_PHONE_DIGITS:
            return re.sub(r"\s+", " ", candidate).strip()
    return None


def _find_location(lines: list[str]) -> str | None:
    for index, line in enumerate(lines):
        if "willing to relocate" in line.lower():
            window = lines[index:index + RELOCATION_WINDOW]
            for candidate in window:
                if "/" in candidate or "," in candidate:
                    return candidate
            break

    for line in lines:
        # URL and email lines contain slashes but are never locations
        if "://" in line or "@" in line:
            continue
        if LOCATION_RE.search(line) and not ROLE_RE.search(line):
            return line
    return None


def parse_resume_heuristically(text: str) -> CandidateProfile:
    """Derive a best-effort candidate profile from raw resume text."""
    lines = split_lines(text)

    name = _NAME_SUFFIX_RE.sub("", lines[0]).strip() if lines else ""
    title = next(
        (line for line in lines[1:1 + TITLE_SEARCH_LINES] if ROLE_RE.search(line)),
        None,
    )

    email_match = EMAIL_RE.search(text)
    email = email_match.group(0).rstrip(".,;").strip() if email_match else None

    urls = [match.group(0).rstrip(".,)") for match in URL_RE.finditer(text)]
    linkedin = next((url for url in urls if "linkedin" in url.lower()), None)
    portfolio = next((url for url in urls if url != linkedin), None)

    profile = CandidateProfile(
        contact=Contact(
            name=name or DEFAULT_CANDIDATE_NAME,
            email=email,
            phone=_find_phone(text),
            linkedin=_to_url(linkedin),
            portfolio=_to_url(portfolio),
        ),
        title=title,
        location=_find_location(lines),
        skills=extract_section_list(lines, "skills"),
        tools=extract_section_list(lines, "tools"),
        projects=extract_projects(lines),
    )
    logger.debug(
        "Heuristic parse: %d skills, %d tools, %d projects",
        len(profile.skills), len(profile.tools), len(profile.projects),
    )
    return normalize_candidate_profile(profile)
