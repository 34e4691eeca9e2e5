"""Post-processing of rewritten resumes before rendering.

Every string leaving this module is ASCII-safe and every bullet list is
capped. The sanitizer only cleans what is present; it never adds sections.
"""

import re

from models.schemas import (
    CandidateProfile,
    RewriteContact,
    RewriteEducation,
    RewriteExperience,
    RewriteProject,
    RewriteResume,
)
from services.normalizers import DEFAULT_CANDIDATE_NAME
from services.text_sanitizer import ascii_safe, dedupe_lines
from services.title_normalizer import sanitize_project_title, strip_name_from_summary

MAX_EXPERIENCE_BULLETS = 3
MAX_PROJECT_BULLETS = 2
MAX_FALLBACK_EXPERIENCE = 2

_LEADING_SEPARATOR_RE = re.compile(r"^[\s\-|:,;]+")


def sanitize_bullets(items: list[str], limit: int) -> list[str]:
    """Dedupe lines, ASCII-clean each, drop empties, keep at most ``limit``."""
    lines = dedupe_lines("\n".join(items)).split("\n")
    cleaned = [ascii_safe(line) for line in lines]
    return [line for line in cleaned if line][:limit]


def _safe_optional(value: str | None) -> str | None:
    if value is None:
        return None
    return ascii_safe(value) or None


def _safe_title(value: str) -> str:
    return ascii_safe(sanitize_project_title(value))


def _sanitize_contact(contact: RewriteContact, candidate_name: str) -> RewriteContact:
    # Names that clean down to nothing fall through to the next candidate
    name = next(
        (n for n in (ascii_safe(contact.name), ascii_safe(candidate_name)) if n),
        DEFAULT_CANDIDATE_NAME,
    )
    return RewriteContact(
        name=name,
        email=_safe_optional(contact.email),
        phone=_safe_optional(contact.phone),
        linkedin=_safe_optional(contact.linkedin),
        website=_safe_optional(contact.website),
        behance=_safe_optional(contact.behance),
        location=_safe_optional(contact.location),
    )


def _sanitize_experience(entry: RewriteExperience) -> RewriteExperience:
    return RewriteExperience(
        company=_safe_title(entry.company),
        role=ascii_safe(entry.role),
        dates=_safe_optional(entry.dates),
        bullets=None if entry.bullets is None else sanitize_bullets(entry.bullets, MAX_EXPERIENCE_BULLETS),
    )


def _sanitize_project(entry: RewriteProject) -> RewriteProject:
    return RewriteProject(
        title=_safe_title(entry.title),
        bullets=None if entry.bullets is None else sanitize_bullets(entry.bullets, MAX_PROJECT_BULLETS),
    )


def _sanitize_education(entry: RewriteEducation) -> RewriteEducation:
    return RewriteEducation(
        school=ascii_safe(entry.school),
        degree=_safe_optional(entry.degree),
        dates=_safe_optional(entry.dates),
    )


def _sanitize_summary(summary: str, candidate_name: str) -> str:
    stripped = ascii_safe(strip_name_from_summary(summary, candidate_name))
    return _LEADING_SEPARATOR_RE.sub("", stripped)


def sanitize_rewrite(payload: RewriteResume, target_role: str, candidate_name: str) -> RewriteResume:
    """Clean a generated or assembled resume for rendering.

    The headline is always the target role. The candidate's name is removed
    from the summary along with any separator it leaves at the start.
    """
    skills = None
    if payload.skills is not None:
        skills = list(dict.fromkeys(s for s in (ascii_safe(skill) for skill in payload.skills) if s))

    return RewriteResume(
        contact=_sanitize_contact(payload.contact, candidate_name),
        headline=ascii_safe(target_role),
        summary=_sanitize_summary(payload.summary, candidate_name),
        skills=skills,
        experience=None if payload.experience is None else [_sanitize_experience(e) for e in payload.experience],
        projects=None if payload.projects is None else [_sanitize_project(p) for p in payload.projects],
        education=None if payload.education is None else [_sanitize_education(e) for e in payload.education],
    )


def build_fallback_rewrite(
    profile: CandidateProfile,
    target_role: str,
    highlights: list[str],
    gaps: list[str],
) -> RewriteResume:
    """Assemble a resume from profile evidence alone, without a narrative source.

    Callers still pass the result through :func:`sanitize_rewrite`.
    """
    summary_parts = [
        part for part in (
            profile.additional_context,
            f"Strengths: {', '.join(highlights)}" if highlights else None,
            f"Focus Areas: {', '.join(gaps)}" if gaps else None,
        ) if part
    ]
    summary = ". ".join(summary_parts) if summary_parts else target_role

    skills = list(dict.fromkeys(profile.skills + profile.tools))

    experience = [
        RewriteExperience(
            company=project.name,
            role=target_role,
            bullets=[project.summary, *project.outcomes, profile.additional_context or ""],
        )
        for project in profile.projects[:MAX_FALLBACK_EXPERIENCE]
    ]
    projects = [
        RewriteProject(title=project.name, bullets=[project.summary, *project.outcomes])
        for project in profile.projects
    ]

    contact = profile.contact
    return RewriteResume(
        contact=RewriteContact(
            name=contact.name,
            email=contact.email,
            phone=contact.phone,
            linkedin=contact.linkedin,
            website=contact.website or contact.portfolio,
            behance=contact.behance,
            location=profile.location or contact.location,
        ),
        headline=target_role,
        summary=summary,
        skills=skills,
        experience=experience,
        projects=projects or None,
    )
