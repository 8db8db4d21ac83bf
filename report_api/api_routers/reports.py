"""Report analysis endpoints.

Created: 2026-10-12
Version: 1.0.0
License: MIT
"""

import logging
from pathlib import PurePath

from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from agents.report_reviewer import (
    AnalysisError,
    can_submit,
    get_readiness_message,
    get_score_band,
)
from models.report_input import ReportInput
from ..api_utils import get_reviewer
from ..models import AnalyzeReportRequest, ReportAnalysisResponse

router = APIRouter(prefix="/api/reports", tags=["Reports"])
logger = logging.getLogger(__name__)


def _check_attachment_path(path: str) -> None:
    """Only stored file names under the uploads directory may be read."""
    pure = PurePath(path)
    if pure.is_absolute() or ".." in pure.parts:
        raise HTTPException(status_code=400, detail=f"Invalid attachment path: {path}")


@router.post(
    "/analyze",
    response_model=ReportAnalysisResponse,
    operation_id="analyze_report"
)
async def analyze_report(request: AnalyzeReportRequest):
    """Run an AI quality review of a progress report.

    The review is advisory: a failure here should not block saving or
    submitting the report.

    Args:
        request: Report fields, project context and attachment metadata

    Returns:
        ReportAnalysisResponse with scores, feedback and readiness
    """
    if not (request.title or "").strip() or not (request.content or "").strip():
        raise HTTPException(status_code=400, detail="Title and content are required")

    for path in request.attachment_paths:
        _check_attachment_path(path)

    try:
        report = ReportInput(**request.model_dump())
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=[err["msg"] for err in e.errors()])

    reviewer = get_reviewer()
    logger.info(
        f"Analysis requested: title='{report.title}', "
        f"content_length={len(report.content)}, attachments={len(report.attachment_paths)}"
    )

    try:
        analysis = await reviewer.analyze_report(report)
    except AnalysisError as e:
        logger.error(f"Report analysis failed: {e.upstream_message}")
        raise HTTPException(status_code=500, detail=str(e))

    return ReportAnalysisResponse(
        **analysis.model_dump(),
        readiness_message=get_readiness_message(analysis.readiness_level),
        score_band=get_score_band(analysis.overall_score),
        can_submit=can_submit(analysis)
    )
