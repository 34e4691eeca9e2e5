"""Prompt templates and JSON payloads for the narrative collaborator."""

import json
import re
from typing import Literal

from models.schemas import CandidateProfile, JobSpec

RoleCategory = Literal["uiux", "frontend", "backend", "marketing", "general"]

TRUTH_GUARD_RULES = """You are a truthful job matcher.
- Use only evidence present in the candidate profile. Missing information is a gap, state it as one.
- Never invent employers, dates, metrics, or responsibilities.
- Call out mismatches explicitly and keep wording short and factual.
- Respond with a minified JSON object of this shape:
  {"fit_score": <integer 0-100>, "highlights": [<string>], "gaps": [<string>], "verdict": <string>}
- Every highlight or gap must cite resume evidence or name the missing evidence.
- Return no keys and no commentary beyond that JSON object."""

_CRITERIA: dict[str, tuple[str, list[str]]] = {
    "uiux": ("UI/UX design", [
        "Mobile UI/UX delivery and product case studies (30%)",
        "Design process: research and usability testing (20%)",
        "Design tooling: Figma, Sketch, Adobe, prototyping (20%)",
        "Collaboration with engineering and product (15%)",
        "Cultural and language fit for stakeholder work (15%)",
    ]),
    "frontend": ("frontend engineering", [
        "Modern web frameworks and component architecture (30%)",
        "Performance, accessibility, and testing practice (20%)",
        "Tooling: TypeScript, build systems, CI/CD (20%)",
        "Collaboration with design and product (15%)",
        "Documentation, mentorship, and cultural fit (15%)",
    ]),
    "backend": ("backend engineering", [
        "Distributed systems, APIs, and data modeling (30%)",
        "Reliability, scalability, and observability (20%)",
        "Language and infrastructure proficiency (20%)",
        "Cross-functional collaboration (15%)",
        "Security, compliance, and cultural fit (15%)",
    ]),
    "marketing": ("marketing and growth", [
        "Campaign strategy with measurable outcomes (30%)",
        "Channel expertise: paid, organic, lifecycle, partnerships (20%)",
        "Tooling and analytics (20%)",
        "Cross-team communication (15%)",
        "Cultural fit and market/language alignment (15%)",
    ]),
    "general": ("general professional", [
        "Direct experience with the listed responsibilities (30%)",
        "Process, methodology, and execution (20%)",
        "Tools and technical proficiency (20%)",
        "Collaboration, communication, and leadership (15%)",
        "Cultural and language fit (15%)",
    ]),
}

_UIUX_RE = re.compile(r"\b(?:ui|ux)\b")

PARSE_SYSTEM_PROMPT = """You convert resume text into a structured JSON object.
- Use ONLY the provided resumeText. Do not invent people, companies, dates, or accomplishments.
- Omit fields that do not appear in the resume.
- Shape:
  {"contact": {"name": string, "email"?: string, "phone"?: string, "linkedin"?: string, "portfolio"?: string},
   "title"?: string, "location"?: string, "skills": [string], "tools": [string],
   "projects": [{"name": string, "summary": string, "skills": [string], "outcomes": [string]}]}
- skills, tools, and outcomes are lists of unique, trimmed strings.
- A project summary is one or two sentences; each outcome is a single achievement."""


def infer_role_category(job: JobSpec) -> RoleCategory:
    """Guess the role family from the job text; drives the scoring rubric."""
    corpus = " ".join([
        job.title,
        *job.responsibilities,
        *job.must_haves,
        *job.nice_to_haves,
        *job.keywords,
    ]).lower()

    if _UIUX_RE.search(corpus) or "product designer" in corpus or "design system" in corpus:
        return "uiux"
    if any(term in corpus for term in ("frontend", "front-end", "react", "typescript")):
        return "frontend"
    if any(term in corpus for term in ("backend", "back-end", "api", "microservice")):
        return "backend"
    if any(term in corpus for term in ("marketing", "growth", "seo", "demand gen")):
        return "marketing"
    return "general"


def build_match_system_prompt(role: RoleCategory) -> str:
    area, criteria = _CRITERIA[role]
    rubric = "\n".join(f"{i}) {c}" for i, c in enumerate(criteria, start=1))
    return (
        f"You are an HR analyst assessing {area} roles.\n"
        f"Score the candidate with these weighted criteria:\n{rubric}\n\n"
        f"{TRUTH_GUARD_RULES}"
    )


def build_match_user_content(
    job: JobSpec,
    profile: CandidateProfile,
    cleaned_job_description: str,
    cleaned_resume_text: str,
    role: RoleCategory,
    job_keywords: list[str],
    resume_keywords: list[str],
) -> str:
    return json.dumps({
        "target_role": job.title,
        "role_category": role,
        "job_spec": job.model_dump(by_alias=True, exclude_none=True),
        "cleaned_job_description": cleaned_job_description,
        "candidate_profile": profile.model_dump(by_alias=True, exclude_none=True),
        "cleaned_resume_text": cleaned_resume_text,
        "keyword_summary": {
            "job_keywords": job_keywords,
            "resume_keywords": resume_keywords,
        },
    })


def build_rewrite_system_prompt(target_role: str) -> str:
    return f"""You are a truthful resume strategist. Rewrite the candidate's resume using only the supplied evidence, aligned to the target role "{target_role}".

Hard rules:
- Never add employers, projects, dates, metrics, or responsibilities the data does not support.
- The only headline allowed is "{target_role}". Do not repeat legacy titles.
- The summary must not mention the candidate's name, previous titles, or location.
- Project titles carry no parenthetical content and use clean separators ("A - B").
- Keep sentences short and grounded in the evidence.

Respond with a minified JSON object of this shape:
{{"contact": {{"name": string, "email"?: string, "phone"?: string, "linkedin"?: string, "website"?: string, "behance"?: string, "location"?: string}},
 "headline": "{target_role}", "summary": string, "skills": [string],
 "experience": [{{"company": string, "role": string, "dates"?: string, "bullets": [string]}}],
 "projects"?: [{{"title": string, "bullets": [string]}}],
 "education"?: [{{"school": string, "degree"?: string, "dates"?: string}}]}}

- At most three bullets per experience entry.
- Omit a field rather than inventing it.
- No commentary outside the JSON object."""


def build_rewrite_user_content(
    target_role: str,
    cleaned_job_description: str,
    profile: CandidateProfile,
    cleaned_resume_text: str,
    match_highlights: list[str],
    match_gaps: list[str],
    match_verdict: str,
) -> str:
    return json.dumps({
        "target_role": target_role,
        "cleaned_job_description": cleaned_job_description,
        "candidate_profile": profile.model_dump(by_alias=True, exclude_none=True),
        "resume_evidence": cleaned_resume_text,
        "match_summary": {
            "highlights": match_highlights,
            "gaps": match_gaps,
            "verdict": match_verdict,
        },
    })


def build_parse_user_content(resume_text: str, max_length: int) -> str:
    return json.dumps({"resumeText": resume_text[:max_length]})
