"""Schema validation of raw structured input, ahead of normalization."""

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from models.errors import FieldError, InputValidationError
from models.schemas import CandidateProfile, JobSpec, MatchOutput, RewriteResume

M = TypeVar("M", bound=BaseModel)


def field_errors(exc: ValidationError) -> list[FieldError]:
    """Flatten pydantic errors into dotted field paths."""
    return [
        FieldError(
            path=".".join(str(part) for part in err["loc"]),
            message=err["msg"],
            kind=err["type"],
        )
        for err in exc.errors()
    ]


def validate_model(model: type[M], raw: Any, subject: str) -> M:
    try:
        return model.model_validate(raw)
    except ValidationError as exc:
        raise InputValidationError(subject, field_errors(exc)) from exc


def validate_job_spec(raw: Any) -> JobSpec:
    return validate_model(JobSpec, raw, "job spec")


def validate_candidate_profile(raw: Any) -> CandidateProfile:
    return validate_model(CandidateProfile, raw, "candidate profile")


def validate_match_output(raw: Any) -> MatchOutput:
    return validate_model(MatchOutput, raw, "match output")


def validate_rewrite_resume(raw: Any) -> RewriteResume:
    return validate_model(RewriteResume, raw, "rewrite resume")
