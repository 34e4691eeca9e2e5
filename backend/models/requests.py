from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Structured payloads arrive as raw objects and are validated by
# services.validation, which reports dotted field paths.
RawObject = dict[str, Any]


class _CamelRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ParseRequest(_CamelRequest):
    resume_text: str = Field(..., max_length=50000, description="Plain text resume content")


class MatchRequest(_CamelRequest):
    job_spec: RawObject
    candidate_profile: RawObject


class RewriteRequest(_CamelRequest):
    job_spec: RawObject
    candidate_profile: RawObject
    match_output: RawObject


class ExportResumeRequest(_CamelRequest):
    candidate_profile: RawObject
    optimized_resume: RawObject


class ExportMatchRequest(_CamelRequest):
    candidate_profile: RawObject
    match_output: RawObject
