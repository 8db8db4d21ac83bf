"""Report Reviewer package for AI-assisted review of NGO progress reports.

This package extracts attachment excerpts, builds the review prompt, calls
the analysis service and normalizes its response into a ReportAnalysis.

Created: 2026-10-12
Version: 1.0.0
License: MIT
"""

from agents.report_reviewer.agent import (
    ReportReviewer,
    can_submit,
    get_readiness_message,
    get_score_band,
)
from agents.report_reviewer.llm_service import (
    AnalysisClient,
    AnalysisError,
    ConfigurationError,
)
from agents.report_reviewer.normalizer import normalize_analysis
from agents.report_reviewer.prompts import get_analysis_prompt

__all__ = [
    'ReportReviewer',
    'AnalysisClient',
    'AnalysisError',
    'ConfigurationError',
    'normalize_analysis',
    'get_analysis_prompt',
    'get_readiness_message',
    'get_score_band',
    'can_submit',
]
