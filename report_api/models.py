"""Pydantic models for API requests and responses.

This module defines the data models used for API request/response validation.
JSON bodies use the camelCase keys of the web client.

Created: 2026-10-12
Version: 1.0.0
License: MIT
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from models.report_analysis import ReadinessLevel, SectionAnalysis


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AnalyzeReportRequest(_CamelModel):
    """Request body for report analysis.

    Title and content are optional here so the endpoint can answer with a
    400 and a readable message instead of a validation error listing.
    """
    title: Optional[str] = Field(None, description="Report title")
    content: Optional[str] = Field(None, description="Report narrative")
    project_name: str = Field("Unknown Project", description="Project name")
    project_description: Optional[str] = Field(None, description="Project description")
    project_goals: Optional[str] = Field(None, description="Project goals")
    project_budget: Optional[float] = Field(None, description="Project budget")
    project_status: Optional[str] = Field(None, description="Project status")
    progress: Optional[float] = Field(None, description="Progress percentage (0-100)")
    challenges_faced: Optional[str] = Field(None, description="Challenges faced")
    next_steps: Optional[str] = Field(None, description="Next steps")
    budget_notes: Optional[str] = Field(None, description="Budget notes")
    has_attachments: bool = Field(False, description="Whether files are attached")
    attachment_count: int = Field(0, description="Number of attached files")
    attachment_types: List[str] = Field(default_factory=list, description="Declared MIME types")
    attachment_paths: List[str] = Field(
        default_factory=list,
        description="Stored file names under the uploads directory"
    )
    attachment_contents: Optional[str] = Field(None, description="Pre-extracted attachment text")


class ReportAnalysisResponse(_CamelModel):
    """Response model for a report analysis."""
    overall_score: int = Field(..., description="Overall score (0-100)")
    readiness_level: ReadinessLevel = Field(..., description="Readiness level")
    overall_feedback: str = Field(..., description="Overall assessment")
    section_analysis: List[SectionAnalysis] = Field(..., description="Per-section analysis")
    strengths_identified: List[str] = Field(..., description="Strengths identified")
    priority_improvements: List[str] = Field(..., description="Priority improvements")
    readiness_message: str = Field(..., description="User-facing readiness message")
    score_band: str = Field(..., description="Score band (high, moderate, fair, low)")
    can_submit: bool = Field(..., description="Whether the soft submission threshold is met")
