import logging

from fastapi import APIRouter, Depends, File, HTTPException, Request, Response, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_narrative_source
from config import settings
from models.requests import (
    ExportMatchRequest,
    ExportResumeRequest,
    MatchRequest,
    ParseRequest,
    RewriteRequest,
)
from models.responses import HealthResponse, RewriteResponse
from models.schemas import CandidateProfile, MatchOutput
from services import matcher, pdf_parser, renderer
from services.narrative import NarrativeSource
from services.normalizers import normalize_candidate_profile
from services.rewrite_sanitizer import sanitize_rewrite
from services.validation import (
    validate_candidate_profile,
    validate_job_spec,
    validate_match_output,
    validate_rewrite_resume,
)

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)

DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


@router.get("/health", response_model=HealthResponse)
async def health(narrative: NarrativeSource | None = Depends(get_narrative_source)):
    return HealthResponse(narrative_source=narrative.name if narrative else "none")


@router.post("/parse", response_model=CandidateProfile, response_model_exclude_none=True)
@limiter.limit("10/minute")
async def parse(
    request: Request,
    body: ParseRequest,
    narrative: NarrativeSource | None = Depends(get_narrative_source),
):
    if not body.resume_text.strip():
        raise HTTPException(status_code=400, detail="Resume text is empty")
    return await matcher.parse_resume(body.resume_text, narrative)


@router.post("/parse/upload", response_model=CandidateProfile, response_model_exclude_none=True)
@limiter.limit("10/minute")
async def parse_upload(
    request: Request,
    resume_file: UploadFile = File(...),
    narrative: NarrativeSource | None = Depends(get_narrative_source),
):
    filename = (resume_file.filename or "").lower()
    if not filename.endswith((".pdf", ".docx")):
        raise HTTPException(status_code=400, detail="Only PDF and DOCX files are accepted")

    content = await resume_file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )

    try:
        if filename.endswith(".pdf"):
            text = pdf_parser.extract_text(content)
        else:
            text = pdf_parser.extract_text_docx(content)
    except Exception:
        logger.exception("Could not extract text from %s", filename)
        raise HTTPException(status_code=400, detail="Could not parse resume file")

    if not text.strip():
        raise HTTPException(status_code=422, detail="No extractable text detected in file")

    return await matcher.parse_resume(text[: settings.max_text_chars], narrative)


@router.post("/match", response_model=MatchOutput, response_model_exclude_none=True)
@limiter.limit("10/minute")
async def match(
    request: Request,
    body: MatchRequest,
    narrative: NarrativeSource | None = Depends(get_narrative_source),
):
    job = validate_job_spec(body.job_spec)
    profile = validate_candidate_profile(body.candidate_profile)
    return await matcher.match(job, profile, narrative)


@router.post("/rewrite", response_model=RewriteResponse, response_model_exclude_none=True)
@limiter.limit("10/minute")
async def rewrite(
    request: Request,
    body: RewriteRequest,
    narrative: NarrativeSource | None = Depends(get_narrative_source),
):
    job = validate_job_spec(body.job_spec)
    profile = validate_candidate_profile(body.candidate_profile)
    match_output = validate_match_output(body.match_output)
    result = await matcher.rewrite(job, profile, match_output, narrative)
    return RewriteResponse(rewrite=result)


@router.post("/export/resume")
@limiter.limit("10/minute")
async def export_resume(request: Request, body: ExportResumeRequest):
    profile = normalize_candidate_profile(validate_candidate_profile(body.candidate_profile))
    optimized = validate_rewrite_resume(body.optimized_resume)
    # Client-edited resumes are re-sanitized before they reach the renderer
    optimized = sanitize_rewrite(optimized, optimized.headline, profile.contact.name)
    document = renderer.build_resume_document(profile, optimized)
    return _docx_response(renderer.render_docx(document), "resume.docx")


@router.post("/export/match")
@limiter.limit("10/minute")
async def export_match(request: Request, body: ExportMatchRequest):
    profile = normalize_candidate_profile(validate_candidate_profile(body.candidate_profile))
    match_output = validate_match_output(body.match_output)
    document = renderer.build_match_report(profile, match_output)
    return _docx_response(renderer.render_docx(document), "match-report.docx")


def _docx_response(content: bytes, filename: str) -> Response:
    return Response(
        content=content,
        media_type=DOCX_MEDIA_TYPE,
        headers={
            "Content-Disposition": f'attachment; filename="{filename}"',
            "Cache-Control": "no-store",
        },
    )
