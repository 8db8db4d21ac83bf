"""Utility for JSON schema validation of analysis responses.

This module holds the JSON schema of the report analysis contract and a
helper to validate arbitrary JSON data against a schema, collecting every
violation as a readable message.

Created: 2026-10-12
Version: 1.0.0
License: MIT
"""

import logging
from typing import Any

from jsonschema import Draft7Validator

logger = logging.getLogger(__name__)

READINESS_LEVELS = [
    "needs-major-improvements",
    "needs-minor-improvements",
    "good",
    "excellent",
]

SECTION_ANALYSIS_SCHEMA = {
    "type": "object",
    "required": ["section", "score", "issues", "suggestions"],
    "properties": {
        "section": {"type": "string"},
        "score": {"type": "integer", "minimum": 0, "maximum": 100},
        "issues": {"type": "array", "items": {"type": "string"}},
        "suggestions": {"type": "array", "items": {"type": "string"}},
    },
}

REPORT_ANALYSIS_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Report Analysis",
    "type": "object",
    "required": [
        "overallScore",
        "readinessLevel",
        "overallFeedback",
        "sectionAnalysis",
        "strengthsIdentified",
        "priorityImprovements",
    ],
    "properties": {
        "overallScore": {"type": "integer", "minimum": 0, "maximum": 100},
        "readinessLevel": {"type": "string", "enum": READINESS_LEVELS},
        "overallFeedback": {"type": "string", "minLength": 1},
        "sectionAnalysis": {"type": "array", "items": SECTION_ANALYSIS_SCHEMA},
        "strengthsIdentified": {"type": "array", "items": {"type": "string"}},
        "priorityImprovements": {"type": "array", "items": {"type": "string"}},
    },
}


def validate_json(data: Any, schema: dict) -> tuple[bool, list[str]]:
    """Validate JSON data against schema.

    Args:
        data: JSON data to validate.
        schema: JSON schema to validate against.

    Returns:
        Tuple of (is_valid, list_of_error_messages).

    Example:
        >>> is_valid, errors = validate_json({"overallScore": 150}, REPORT_ANALYSIS_SCHEMA)
        >>> is_valid
        False
    """
    validator = Draft7Validator(schema)
    errors = []

    for error in validator.iter_errors(data):
        error_path = ".".join(str(p) for p in error.path) if error.path else "root"
        error_msg = f"{error_path}: {error.message}"
        errors.append(error_msg)
        logger.debug(f"Validation error: {error_msg}")

    is_valid = len(errors) == 0
    if is_valid:
        logger.debug("JSON validation successful")
    else:
        logger.warning(f"JSON validation failed with {len(errors)} errors")

    return is_valid, errors
