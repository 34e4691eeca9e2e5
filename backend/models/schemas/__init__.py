"""Pydantic contracts shared by the matching and rewrite pipeline."""

from models.schemas.candidate_profile import CandidateProfile, Contact, Project
from models.schemas.job_spec import JobSpec
from models.schemas.match_output import MatchOutput
from models.schemas.rewrite_resume import (
    RewriteContact,
    RewriteEducation,
    RewriteExperience,
    RewriteProject,
    RewriteResume,
)

__all__ = [
    "CandidateProfile",
    "Contact",
    "Project",
    "JobSpec",
    "MatchOutput",
    "RewriteContact",
    "RewriteEducation",
    "RewriteExperience",
    "RewriteProject",
    "RewriteResume",
]
