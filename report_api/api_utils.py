"""Shared utilities for API routers.

This module holds the shared ReportReviewer so routers and the app module
can reach it without circular imports.

Created: 2026-10-12
Version: 1.0.0
License: MIT
"""

import logging
from typing import Optional

from fastapi import HTTPException

from agents.report_reviewer import AnalysisClient, ReportReviewer

logger = logging.getLogger(__name__)

# Shared reviewer instance (set at startup)
_reviewer: Optional[ReportReviewer] = None


def initialize_reviewer(reviewer: Optional[ReportReviewer] = None) -> ReportReviewer:
    """Install the shared reviewer.

    Args:
        reviewer: Pre-built reviewer (tests inject one with a fake client).
            If None, one is built from configuration.

    Returns:
        The installed ReportReviewer.

    Raises:
        ConfigurationError: If no reviewer is given and OPENAI_API_KEY is
            not set.
    """
    global _reviewer
    _reviewer = reviewer or ReportReviewer(AnalysisClient.from_config())
    return _reviewer


def reset_reviewer() -> None:
    """Remove the shared reviewer."""
    global _reviewer
    _reviewer = None


def is_initialized() -> bool:
    return _reviewer is not None


def get_reviewer() -> ReportReviewer:
    """Get the shared reviewer.

    Raises:
        HTTPException: 503 if the reviewer has not been initialized.
    """
    if _reviewer is None:
        raise HTTPException(status_code=503, detail="Report reviewer not initialized")
    return _reviewer
