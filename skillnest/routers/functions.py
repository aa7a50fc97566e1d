"""
AI function endpoints.

Each handler is linear: validate presence, build the prompt, call the model,
repair/parse the JSON and return it. Nothing is persisted here; the caller
stores results through the record endpoints.
"""
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import StreamingResponse

from skillnest.core.config import settings
from skillnest.core.security import require_function_key
from skillnest.schemas.functions import (
    AnalyzeJobMatchRequest,
    AnalyzeResumeRequest,
    ExtractedText,
    GenerateRoadmapRequest,
    MentorChatRequest,
    RoastResumeRequest,
)
from skillnest.services import career_ai, pdf_text

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_function_key)])


@router.post("/analyze-resume")
def analyze_resume(request: AnalyzeResumeRequest) -> Dict[str, Any]:
    return career_ai.analyze_resume(request.resume_text, request.target_role, request.skills)


@router.post("/analyze-job-match")
def analyze_job_match(request: AnalyzeJobMatchRequest) -> Dict[str, Any]:
    return career_ai.analyze_job_match(request.resume_text, request.job_description)


@router.post("/generate-roadmap")
def generate_roadmap(request: GenerateRoadmapRequest) -> Dict[str, Any]:
    return career_ai.generate_roadmap(
        request.target_role,
        request.current_skills,
        request.experience_years,
        request.timeframe,
    )


@router.post("/roast-resume")
def roast_resume(request: RoastResumeRequest) -> Dict[str, Any]:
    return career_ai.roast_resume(request.resume_text, request.target_role)


@router.post(
    "/mentor-chat",
    response_class=StreamingResponse,
    responses={200: {"content": {"text/event-stream": {}}}},
)
def mentor_chat(request: MentorChatRequest):
    """
    Relay the upstream event stream byte-for-byte. Upstream errors are raised
    before the response starts, so they still map to JSON error bodies.
    """
    stream = career_ai.mentor_chat(request.history(), request.context())
    return StreamingResponse(
        stream.iter_bytes(),
        media_type=stream.media_type,
        headers={"Cache-Control": "no-cache", "X-Accel-Buffering": "no"},
    )


@router.post("/extract-pdf-text", response_model=ExtractedText)
def extract_pdf_text(file: Optional[UploadFile] = File(default=None)):
    filename = file.filename if file is not None else None
    pdf_text.validate_pdf(filename, 0)
    # Read at most one byte past the cap
    data = file.file.read(settings.max_pdf_bytes + 1)
    return pdf_text.extract_pdf_text(filename, data)
