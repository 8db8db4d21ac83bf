"""Report analysis data model.

This module defines the Pydantic models for the quality analysis returned
for a single NGO progress report. Field names are snake_case in Python and
serialize to the camelCase contract consumed by the web client.

Created: 2026-10-12
Version: 1.0.0
License: MIT
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ReadinessLevel(str, Enum):
    """Closed set of readiness levels a report can be assigned."""
    NEEDS_MAJOR_IMPROVEMENTS = "needs-major-improvements"
    NEEDS_MINOR_IMPROVEMENTS = "needs-minor-improvements"
    GOOD = "good"
    EXCELLENT = "excellent"


class SectionAnalysis(BaseModel):
    """Score and feedback for one section of a report.

    Attributes:
        section: Section name as chosen by the reviewer (e.g. "Impact").
        score: Section score (0-100).
        issues: Specific problems found in the section.
        suggestions: Actionable suggestions for the section.
    """
    model_config = ConfigDict(frozen=True)

    section: str = Field(..., description="Section name")
    score: int = Field(..., ge=0, le=100, description="Section score")
    issues: List[str] = Field(default_factory=list, description="Issues found")
    suggestions: List[str] = Field(default_factory=list, description="Suggested improvements")


class ReportAnalysis(BaseModel):
    """Complete quality analysis of a progress report.

    Instances are immutable and always schema-complete; they are produced by
    the response normalizer regardless of what the analysis service returned.

    Attributes:
        overall_score: Overall report quality score (0-100).
        readiness_level: One of the four readiness levels.
        overall_feedback: Free-text assessment of the report.
        section_analysis: Per-section scores and feedback, in reviewer order.
        strengths_identified: Strengths called out by the reviewer.
        priority_improvements: Highest priority improvements.

    Example:
        >>> analysis = ReportAnalysis(
        ...     overall_score=72,
        ...     readiness_level=ReadinessLevel.GOOD,
        ...     overall_feedback="Clear report with measurable outcomes."
        ... )
        >>> analysis.model_dump(by_alias=True, mode="json")["readinessLevel"]
        'good'
    """
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    overall_score: int = Field(..., ge=0, le=100, description="Overall report score")
    readiness_level: ReadinessLevel = Field(..., description="Submission readiness level")
    overall_feedback: str = Field(..., min_length=1, description="Overall assessment")
    section_analysis: List[SectionAnalysis] = Field(
        default_factory=list,
        description="Per-section analysis"
    )
    strengths_identified: List[str] = Field(default_factory=list, description="Report strengths")
    priority_improvements: List[str] = Field(
        default_factory=list,
        description="High priority improvements"
    )

    def to_response(self) -> dict:
        """Serialize to the camelCase JSON contract."""
        return self.model_dump(by_alias=True, mode="json")
