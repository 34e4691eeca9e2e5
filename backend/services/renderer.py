"""Render-ready documents and the DOCX writer.

``build_resume_document`` and ``build_match_report`` produce plain records in
which every string is ASCII-safe and every list is capped; ``render_docx``
lays such a record out with python-docx.
"""

import io
import re

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Pt
from pydantic import BaseModel

from models.schemas import CandidateProfile, MatchOutput, RewriteResume
from services.fit_scorer import MAX_FEEDBACK_ITEMS, clamp_score
from services.normalizers import DEFAULT_CANDIDATE_NAME
from services.rewrite_sanitizer import MAX_EXPERIENCE_BULLETS, MAX_PROJECT_BULLETS
from services.text_sanitizer import ascii_safe
from services.title_normalizer import sanitize_project_title

_BEHANCE_PREFIX_RE = re.compile(r"^https?://(?:www\.)?behance\.net/?", re.IGNORECASE)


class ContactLines(BaseModel):
    top: str = ""
    bottom: str = ""


class RenderSection(BaseModel):
    title: str
    lines: list[str] = []
    bullets: list[str] = []


class RenderDocument(BaseModel):
    name: str
    headline: str = ""
    contact_top: str = ""
    contact_bottom: str = ""
    sections: list[RenderSection] = []


def compose_contact(
    email: str | None = None,
    phone: str | None = None,
    linkedin: str | None = None,
    website: str | None = None,
    behance: str | None = None,
    location: str | None = None,
) -> ContactLines:
    """Join the present contact fields with " | "; location goes on its own line."""
    parts = [p for p in (email, phone, linkedin, website, behance) if p]
    return ContactLines(top=" | ".join(parts), bottom=location or "")


def _join(parts: list[str | None], sep: str) -> str:
    cleaned = [ascii_safe(p) for p in parts if p]
    return sep.join(p for p in cleaned if p)


def _capped(items: list[str] | None, limit: int) -> list[str]:
    cleaned = [ascii_safe(item) for item in items or []]
    return [item for item in cleaned if item][:limit]


def _portfolio_line(behance: str) -> str:
    trimmed = behance.strip()
    slug = ascii_safe(_BEHANCE_PREFIX_RE.sub("", trimmed).lstrip("@").lstrip("/"))
    if slug:
        return f"For portfolio: https://behance.net/{slug}"
    return f"For portfolio: {ascii_safe(trimmed)}"


def build_resume_document(profile: CandidateProfile, optimized: RewriteResume) -> RenderDocument:
    """Lay out a rewritten resume, filling contact gaps from the profile."""
    contact = optimized.contact
    full_name = ascii_safe(contact.name or profile.contact.name or DEFAULT_CANDIDATE_NAME)
    lines = compose_contact(
        email=contact.email or profile.contact.email,
        phone=contact.phone or profile.contact.phone,
        linkedin=contact.linkedin or profile.contact.linkedin,
        website=contact.website or profile.contact.website or profile.contact.portfolio,
        behance=contact.behance or profile.contact.behance,
        location=contact.location or profile.location,
    )

    sections: list[RenderSection] = []
    if optimized.summary:
        sections.append(RenderSection(title="SUMMARY", lines=[ascii_safe(optimized.summary)]))

    if optimized.skills:
        sections.append(RenderSection(title="SKILLS", lines=[_join(optimized.skills, " | ")]))

    for index, entry in enumerate(optimized.experience or []):
        header = _join([sanitize_project_title(entry.company), entry.role, entry.dates], " - ")
        section = RenderSection(
            title="EXPERIENCE" if index == 0 else "",
            lines=[header] if header else [],
            bullets=_capped(entry.bullets, MAX_EXPERIENCE_BULLETS),
        )
        sections.append(section)

    if optimized.projects:
        for index, project in enumerate(optimized.projects):
            title = ascii_safe(sanitize_project_title(project.title))
            sections.append(RenderSection(
                title="PROJECTS" if index == 0 else "",
                lines=[title] if title else [],
                bullets=_capped(project.bullets, MAX_PROJECT_BULLETS),
            ))
        behance = contact.behance or profile.contact.behance
        if behance:
            sections.append(RenderSection(title="", lines=[_portfolio_line(behance)]))

    for index, entry in enumerate(optimized.education or []):
        line = _join([entry.school, entry.degree, entry.dates], " - ")
        if line:
            sections.append(RenderSection(
                title="EDUCATION" if index == 0 else "",
                lines=[line],
            ))

    return RenderDocument(
        name=full_name.upper(),
        headline=ascii_safe(optimized.headline),
        contact_top=ascii_safe(lines.top),
        contact_bottom=ascii_safe(lines.bottom),
        sections=sections,
    )


def build_match_report(profile: CandidateProfile, result: MatchOutput) -> RenderDocument:
    """Lay out a fit assessment for a candidate."""
    contact = profile.contact
    lines = compose_contact(
        email=contact.email,
        phone=contact.phone,
        linkedin=contact.linkedin,
        website=contact.website or contact.portfolio,
        behance=contact.behance,
        location=profile.location,
    )
    score_line = f"Fit score: {clamp_score(result.fit_score)}/100"
    return RenderDocument(
        name=ascii_safe(contact.name or DEFAULT_CANDIDATE_NAME).upper(),
        headline=ascii_safe(profile.title or ""),
        contact_top=ascii_safe(lines.top),
        contact_bottom=ascii_safe(lines.bottom),
        sections=[
            RenderSection(title="FIT ASSESSMENT", lines=[score_line, ascii_safe(result.verdict)]),
            RenderSection(title="HIGHLIGHTS", bullets=_capped(result.highlights, MAX_FEEDBACK_ITEMS)),
            RenderSection(title="GAPS", bullets=_capped(result.gaps, MAX_FEEDBACK_ITEMS)),
        ],
    )


def render_docx(document: RenderDocument) -> bytes:
    """Write a render document to DOCX bytes."""
    doc = Document()
    style = doc.styles["Normal"]
    style.font.size = Pt(10)

    name = doc.add_paragraph()
    name_run = name.add_run(document.name)
    name_run.bold = True
    name_run.font.size = Pt(18)
    name.alignment = WD_ALIGN_PARAGRAPH.LEFT

    for line in (document.headline, document.contact_top, document.contact_bottom):
        if line:
            doc.add_paragraph(line)

    for section in document.sections:
        if section.title:
            heading = doc.add_paragraph()
            heading_run = heading.add_run(section.title)
            heading_run.bold = True
            heading_run.font.size = Pt(11)
            heading.paragraph_format.space_before = Pt(10)
        for line in section.lines:
            if line:
                doc.add_paragraph(line)
        for bullet in section.bullets:
            doc.add_paragraph(f"- {bullet}")

    buffer = io.BytesIO()
    doc.save(buffer)
    return buffer.getvalue()
