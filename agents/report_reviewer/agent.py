"""Report Reviewer Agent for AI-assisted review of NGO progress reports.

This module contains the ReportReviewer class that orchestrates the review
of one report: attachment excerpts are extracted concurrently, combined
with the report into a prompt, sent to the analysis service, and the
response is normalized into a ReportAnalysis.

Created: 2026-10-12
Version: 1.0.0
License: MIT

Example:
    Basic usage of the Report Reviewer::

        from agents.report_reviewer import AnalysisClient, ReportReviewer
        from models.report_input import ReportInput

        reviewer = ReportReviewer(AnalysisClient.from_config())
        analysis = await reviewer.analyze_report(ReportInput(
            title="Q1 Update",
            content="We distributed 200 kits.",
            project_name="Water Access"
        ))

        print(f"Score: {analysis.overall_score}/100")
"""

import asyncio
import logging
import time
from typing import Optional

from models.report_analysis import ReadinessLevel, ReportAnalysis
from models.report_input import ReportInput
from utils.config import config
from utils.file_content_extractor import extract_file_content
from utils.logging_config import log_performance
from .llm_service import AnalysisClient
from .normalizer import normalize_analysis
from .prompts import get_analysis_prompt, join_attachment_excerpts

logger = logging.getLogger(__name__)

READINESS_MESSAGES = {
    ReadinessLevel.EXCELLENT: "Report is comprehensive and ready for submission!",
    ReadinessLevel.GOOD: "Report is solid with minor areas for enhancement.",
    ReadinessLevel.NEEDS_MINOR_IMPROVEMENTS: "Report needs some refinements before submission.",
    ReadinessLevel.NEEDS_MAJOR_IMPROVEMENTS: "Report requires significant improvements before submission.",
}
DEFAULT_READINESS_MESSAGE = "Report analysis completed."


def get_readiness_message(level) -> str:
    """Get the user-facing message for a readiness level.

    Args:
        level: A ReadinessLevel or its string value.

    Returns:
        str: Message shown next to the analysis result.
    """
    try:
        return READINESS_MESSAGES[ReadinessLevel(level)]
    except ValueError:
        return DEFAULT_READINESS_MESSAGE


def get_score_band(score: int) -> str:
    """Bucket a score into high/moderate/fair/low."""
    if score >= 85:
        return "high"
    if score >= 70:
        return "moderate"
    if score >= 50:
        return "fair"
    return "low"


def can_submit(analysis: ReportAnalysis, min_score: Optional[int] = None) -> bool:
    """Check the soft readiness threshold used before report submission.

    The review is advisory; callers decide whether to enforce this.
    """
    threshold = config.MIN_SUBMISSION_SCORE if min_score is None else min_score
    return analysis.overall_score >= threshold


class ReportReviewer:
    """Agent for AI review of progress reports.

    The agent holds no per-request state, so one instance can serve
    concurrent analyze_report() calls.

    The agent performs the following steps:
        1. Extracts attachment excerpts concurrently (unless pre-computed
           contents were supplied)
        2. Builds the analysis prompt
        3. Calls the analysis service once
        4. Normalizes the response into a ReportAnalysis

    Attributes:
        client: AnalysisClient used for the outbound call.
    """

    def __init__(self, client: AnalysisClient):
        self.client = client
        logger.info("Report Reviewer initialized")

    async def extract_attachments(self, report: ReportInput) -> str:
        """Extract and join excerpts for every attachment of a report.

        Files are read concurrently in worker threads. A failing file
        yields a placeholder excerpt and never cancels the others.

        Args:
            report: Report whose attachment_paths/attachment_types to read.

        Returns:
            str: Excerpts joined with horizontal rules, or "" if none.
        """
        attachments = report.attachments()
        if not attachments:
            return ""

        logger.info(f"Extracting content from {len(attachments)} attachment(s)")
        excerpts = await asyncio.gather(*[
            asyncio.to_thread(extract_file_content, path, declared_type)
            for path, declared_type in attachments
        ])
        return join_attachment_excerpts(list(excerpts))

    async def analyze_report(self, report: ReportInput) -> ReportAnalysis:
        """Analyze a progress report.

        Args:
            report: The report and its project context.

        Returns:
            ReportAnalysis: Always schema-complete.

        Raises:
            AnalysisError: If the analysis service call fails.
        """
        start_time = time.time()
        logger.info(f"Analyzing report '{report.title}' for project '{report.project_name}'")

        if report.attachment_contents:
            logger.debug("Using pre-computed attachment contents, skipping extraction")
            attachment_excerpts = report.attachment_contents
        else:
            attachment_excerpts = await self.extract_attachments(report)

        prompt = get_analysis_prompt(report, attachment_excerpts)
        raw = await self.client.request_analysis(prompt)
        analysis = normalize_analysis(raw)

        log_performance(
            logger, "Report analysis", start_time,
            attachments=len(report.attachments()),
            score=analysis.overall_score,
            readiness=analysis.readiness_level.value
        )
        return analysis
