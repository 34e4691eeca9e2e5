"""Structured candidate profile extracted from a resume."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Contact(BaseModel):
    """Contact block. A blank name is filled with a placeholder on normalization."""
    model_config = _CAMEL

    name: str = ""
    email: str | None = None
    phone: str | None = None
    linkedin: str | None = None
    portfolio: str | None = None
    website: str | None = None
    behance: str | None = None
    location: str | None = None


class Project(BaseModel):
    """A project or experience entry with the evidence attached to it."""
    model_config = _CAMEL

    name: str = ""
    summary: str = ""
    skills: list[str] = []
    outcomes: list[str] = []


class CandidateProfile(BaseModel):
    model_config = _CAMEL

    contact: Contact
    title: str | None = None
    years: float | None = None
    location: str | None = None
    skills: list[str] = []
    tools: list[str] = []
    projects: list[Project] = []
    additional_context: str | None = None
