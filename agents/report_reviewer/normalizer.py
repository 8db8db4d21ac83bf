"""Validation and normalization of analysis service responses.

The analysis service is an untrusted collaborator: its JSON may be missing
fields, use the wrong types or put scores out of range. This module is the
single place that turns whatever came back into a schema-complete
ReportAnalysis.

Responses that already satisfy the schema are accepted unchanged. Anything
else is coerced field by field:

- overallScore: integers are clamped as-is. Numeric strings are parsed,
  non-finite or non-numeric values become 0, and the result is clamped
  to 0-100 and rounded.
- readinessLevel: only the four exact level strings are accepted,
  anything else becomes "needs-major-improvements".
- overallFeedback: non-empty strings pass, anything else becomes
  "Analysis unavailable".
- list fields: non-lists become [], null items are dropped and other
  items are converted with str(). Section entries that are not objects
  are dropped and their scores are coerced like overallScore.

Created: 2026-10-12
Version: 1.0.0
License: MIT
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, List, Union

from pydantic import ValidationError

from models.report_analysis import ReadinessLevel, ReportAnalysis, SectionAnalysis
from utils.schema_validator import REPORT_ANALYSIS_SCHEMA, validate_json

logger = logging.getLogger(__name__)

DEFAULT_FEEDBACK = "Analysis unavailable"
DEFAULT_SECTION_NAME = "General"


@dataclass(frozen=True)
class Valid:
    """Raw response satisfied the schema."""
    analysis: ReportAnalysis


@dataclass(frozen=True)
class Invalid:
    """Raw response violated the schema."""
    errors: List[str]


ValidationOutcome = Union[Valid, Invalid]


def validate_analysis(raw: Any) -> ValidationOutcome:
    """Check a raw response against the analysis schema without coercion."""
    is_valid, errors = validate_json(raw, REPORT_ANALYSIS_SCHEMA)
    if not is_valid:
        return Invalid(errors)
    try:
        return Valid(ReportAnalysis.model_validate(raw))
    except ValidationError as e:
        return Invalid([str(e)])


def coerce_score(value: Any) -> int:
    """Coerce any value into an integer score within 0-100."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        # JSON integers are unbounded and may not fit in a float
        return max(0, min(100, value))

    if isinstance(value, float):
        number = value
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            number = 0.0
    else:
        number = 0.0

    if not math.isfinite(number):
        number = 0.0
    return int(round(max(0.0, min(100.0, number))))


def coerce_readiness(value: Any) -> ReadinessLevel:
    """Accept only exact readiness level strings."""
    if isinstance(value, str):
        for level in ReadinessLevel:
            if level.value == value:
                return level
    return ReadinessLevel.NEEDS_MAJOR_IMPROVEMENTS


def _coerce_feedback(value: Any) -> str:
    if isinstance(value, str) and value:
        return value
    return DEFAULT_FEEDBACK


def _coerce_strings(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [item if isinstance(item, str) else str(item) for item in value if item is not None]


def _coerce_section(entry: dict) -> SectionAnalysis:
    section = entry.get("section")
    if not isinstance(section, str) or not section.strip():
        section = DEFAULT_SECTION_NAME
    return SectionAnalysis(
        section=section,
        score=coerce_score(entry.get("score")),
        issues=_coerce_strings(entry.get("issues")),
        suggestions=_coerce_strings(entry.get("suggestions")),
    )


def _coerce_sections(value: Any) -> List[SectionAnalysis]:
    if not isinstance(value, list):
        return []
    return [_coerce_section(entry) for entry in value if isinstance(entry, dict)]


def normalize_analysis(raw: Any) -> ReportAnalysis:
    """Turn a raw analysis response into a valid ReportAnalysis.

    Total function: never raises, whatever ``raw`` is.

    Args:
        raw: Parsed JSON returned by the analysis service (any type).

    Returns:
        A schema-complete ReportAnalysis.

    Example:
        >>> normalize_analysis({"overallScore": 140}).overall_score
        100
        >>> normalize_analysis(None).readiness_level.value
        'needs-major-improvements'
    """
    outcome = validate_analysis(raw)
    if isinstance(outcome, Valid):
        return outcome.analysis

    logger.info(f"Normalizing analysis response with {len(outcome.errors)} schema violations")
    data = raw if isinstance(raw, dict) else {}

    return ReportAnalysis(
        overall_score=coerce_score(data.get("overallScore")),
        readiness_level=coerce_readiness(data.get("readinessLevel")),
        overall_feedback=_coerce_feedback(data.get("overallFeedback")),
        section_analysis=_coerce_sections(data.get("sectionAnalysis")),
        strengths_identified=_coerce_strings(data.get("strengthsIdentified")),
        priority_improvements=_coerce_strings(data.get("priorityImprovements")),
    )
