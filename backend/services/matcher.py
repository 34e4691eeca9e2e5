"""Orchestrator: match, rewrite, and parse with a deterministic fallback.

Pipeline (match):
1. Normalize job spec and candidate profile
2. Build cleaned job corpus and resume evidence
3. Extract top keywords on both sides and score overlap
4. Narrative scoring (optional, when a source is injected)
5. Blend narrative + keyword scores, or fall back to keywords alone

A narrative failure at step 4 is logged and absorbed: the caller always gets
a conforming result.
"""

import logging

from pydantic import ValidationError

from config import settings
from models.schemas import CandidateProfile, JobSpec, MatchOutput, RewriteResume
from services import prompt_builder
from services.evidence import build_job_corpus, build_resume_evidence
from services.fit_scorer import build_fallback_match, finalize_match
from services.keyword_extractor import compute_keyword_stats, extract_top_keywords
from services.narrative import NarrativeMalformed, NarrativeSource
from services.normalizers import normalize_candidate_profile, normalize_job_spec
from services.rewrite_sanitizer import build_fallback_rewrite, sanitize_rewrite
from services.section_parser import parse_resume_heuristically

logger = logging.getLogger(__name__)

DEFAULT_TARGET_ROLE = "Target Role"


async def match(
    job: JobSpec,
    profile: CandidateProfile,
    narrative: NarrativeSource | None = None,
) -> MatchOutput:
    """Score a candidate against a job."""
    job = normalize_job_spec(job)
    profile = normalize_candidate_profile(profile)

    job_corpus = build_job_corpus(job)
    resume_evidence = build_resume_evidence(profile)
    job_keywords = extract_top_keywords(job_corpus, settings.top_keyword_limit)
    resume_keywords = extract_top_keywords(resume_evidence, settings.top_keyword_limit)
    stats = compute_keyword_stats(job_keywords, resume_keywords)

    if narrative is None:
        return build_fallback_match(job_keywords, resume_keywords, stats)

    role = prompt_builder.infer_role_category(job)
    result = await narrative.generate_json(
        prompt_builder.build_match_system_prompt(role),
        prompt_builder.build_match_user_content(
            job,
            profile,
            cleaned_job_description=job_corpus,
            cleaned_resume_text=resume_evidence,
            role=role,
            job_keywords=job_keywords,
            resume_keywords=resume_keywords,
        ),
    )
    if isinstance(result, NarrativeMalformed):
        logger.warning("Narrative scoring unavailable (%s), using keyword fallback", result.reason)
        return build_fallback_match(job_keywords, resume_keywords, stats)

    try:
        parsed = MatchOutput.model_validate(result.value)
    except ValidationError as e:
        logger.warning("Narrative match did not match schema, using keyword fallback: %s", e)
        return build_fallback_match(job_keywords, resume_keywords, stats)

    return finalize_match(parsed, stats, settings.llm_weight)


async def rewrite(
    job: JobSpec,
    profile: CandidateProfile,
    match_output: MatchOutput,
    narrative: NarrativeSource | None = None,
) -> RewriteResume:
    """Produce a sanitized resume targeted at the job title."""
    job = normalize_job_spec(job)
    profile = normalize_candidate_profile(profile)
    target_role = job.title or DEFAULT_TARGET_ROLE
    candidate_name = profile.contact.name

    fallback = build_fallback_rewrite(
        profile, target_role, match_output.highlights, match_output.gaps
    )
    if narrative is None:
        return sanitize_rewrite(fallback, target_role, candidate_name)

    result = await narrative.generate_json(
        prompt_builder.build_rewrite_system_prompt(target_role),
        prompt_builder.build_rewrite_user_content(
            target_role,
            cleaned_job_description=build_job_corpus(job),
            profile=profile,
            cleaned_resume_text=build_resume_evidence(profile),
            match_highlights=match_output.highlights,
            match_gaps=match_output.gaps,
            match_verdict=match_output.verdict,
        ),
    )
    if isinstance(result, NarrativeMalformed):
        logger.warning("Narrative rewrite unavailable (%s), using assembled resume", result.reason)
        return sanitize_rewrite(fallback, target_role, candidate_name)

    try:
        parsed = RewriteResume.model_validate(result.value)
    except ValidationError as e:
        logger.warning("Narrative rewrite did not match schema, using assembled resume: %s", e)
        return sanitize_rewrite(fallback, target_role, candidate_name)

    return sanitize_rewrite(parsed, target_role, candidate_name)


async def parse_resume(text: str, narrative: NarrativeSource | None = None) -> CandidateProfile:
    """Structured extraction from raw resume text, heuristic on any failure."""
    if narrative is None:
        return parse_resume_heuristically(text)

    result = await narrative.generate_json(
        prompt_builder.PARSE_SYSTEM_PROMPT,
        prompt_builder.build_parse_user_content(text, settings.max_ai_input_length),
    )
    if isinstance(result, NarrativeMalformed):
        logger.warning("Structured extraction failed (%s), using heuristic parser", result.reason)
        return parse_resume_heuristically(text)

    try:
        profile = CandidateProfile.model_validate(result.value)
    except ValidationError as e:
        logger.warning("Extracted profile did not match schema, using heuristic parser: %s", e)
        return parse_resume_heuristically(text)

    return normalize_candidate_profile(profile)
