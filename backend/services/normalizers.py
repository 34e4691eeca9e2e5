"""Field-level normalization of job specs and candidate profiles.

Both normalizers are pure and idempotent: they return new models and
re-normalizing an already normalized value yields an equal value.
"""

from collections.abc import Iterable

from models.schemas import CandidateProfile, Contact, JobSpec, Project
from services.title_normalizer import sanitize_project_title

DEFAULT_CANDIDATE_NAME = "Candidate"
DEFAULT_PROJECT_NAME = "Untitled Project"
DEFAULT_PROJECT_SUMMARY = "Summary forthcoming."


def trim_list(values: Iterable[str] | None) -> list[str]:
    """Trim entries, drop blanks, and dedupe by exact value in first-seen order.

    Deduplication is case-sensitive: ``"React"`` and ``"react"`` both survive.
    """
    trimmed = (value.strip() for value in values or [])
    return list(dict.fromkeys(value for value in trimmed if value))


def _optional(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None


def normalize_job_spec(spec: JobSpec) -> JobSpec:
    return JobSpec(
        title=spec.title.strip(),
        responsibilities=trim_list(spec.responsibilities),
        must_haves=trim_list(spec.must_haves),
        nice_to_haves=trim_list(spec.nice_to_haves),
        keywords=trim_list(spec.keywords),
        location=_optional(spec.location),
        employment_type=_optional(spec.employment_type),
    )


def normalize_contact(contact: Contact) -> Contact:
    return Contact(
        name=contact.name.strip() or DEFAULT_CANDIDATE_NAME,
        email=_optional(contact.email),
        phone=_optional(contact.phone),
        linkedin=_optional(contact.linkedin),
        portfolio=_optional(contact.portfolio),
        website=_optional(contact.website),
        behance=_optional(contact.behance),
        location=_optional(contact.location),
    )


def normalize_project(project: Project) -> Project:
    return Project(
        name=sanitize_project_title(project.name) or DEFAULT_PROJECT_NAME,
        summary=project.summary.strip() or DEFAULT_PROJECT_SUMMARY,
        skills=trim_list(project.skills),
        outcomes=trim_list(project.outcomes),
    )


def normalize_candidate_profile(profile: CandidateProfile) -> CandidateProfile:
    return CandidateProfile(
        contact=normalize_contact(profile.contact),
        title=_optional(profile.title),
        years=profile.years,
        location=_optional(profile.location),
        skills=trim_list(profile.skills),
        tools=trim_list(profile.tools),
        projects=[normalize_project(p) for p in profile.projects],
        additional_context=_optional(profile.additional_context),
    )
