"""Rewritten resume handed to the document renderer."""

from pydantic import BaseModel


class RewriteContact(BaseModel):
    name: str = ""
    email: str | None = None
    phone: str | None = None
    linkedin: str | None = None
    website: str | None = None
    behance: str | None = None
    location: str | None = None


class RewriteExperience(BaseModel):
    company: str = ""
    role: str = ""
    dates: str | None = None
    bullets: list[str] | None = None


class RewriteProject(BaseModel):
    title: str = ""
    bullets: list[str] | None = None


class RewriteEducation(BaseModel):
    school: str = ""
    degree: str | None = None
    dates: str | None = None


class RewriteResume(BaseModel):
    """Output resume. Optional sections stay ``None`` when absent from input."""
    contact: RewriteContact
    headline: str = ""
    summary: str = ""
    skills: list[str] | None = None
    experience: list[RewriteExperience] | None = None
    projects: list[RewriteProject] | None = None
    education: list[RewriteEducation] | None = None
