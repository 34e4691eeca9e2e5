"""Evidence strings and comparison corpora built from structured records."""

from models.schemas import CandidateProfile, JobSpec
from services.text_sanitizer import clean_job_description, clean_resume_text


def collect_evidence_strings(profile: CandidateProfile) -> list[str]:
    """Flatten what the candidate can prove into one list of literal strings.

    Order: name, title, additional context, skills, tools, then every
    project's skills followed by every project's outcomes.
    """
    project_skills = [skill for project in profile.projects for skill in project.skills]
    project_outcomes = [outcome for project in profile.projects for outcome in project.outcomes]

    entries = [
        profile.contact.name,
        profile.title,
        profile.additional_context,
        *profile.skills,
        *profile.tools,
        *project_skills,
        *project_outcomes,
    ]
    return [entry for entry in entries if isinstance(entry, str) and entry]


def build_job_corpus(job: JobSpec) -> str:
    """Cleaned job text used for keyword extraction and as the narrative context.

    The fields are joined before the benefits cut, so a requirement that
    mentions benefits or compensation drops every field after it.
    """
    return clean_job_description(" ".join([
        job.title,
        *job.responsibilities,
        *job.must_haves,
        *job.nice_to_haves,
        *job.keywords,
    ]))


def build_resume_evidence(profile: CandidateProfile) -> str:
    """Cleaned candidate text: headline fields plus every evidence string."""
    parts = [
        profile.contact.name,
        profile.title,
        profile.location,
        profile.additional_context,
        *collect_evidence_strings(profile),
    ]
    return clean_resume_text(" ".join(p for p in parts if p))
