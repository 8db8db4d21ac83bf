"""Prompts for AI review of NGO progress reports.

This module contains the system prompt and the prompt builder used to ask
the analysis service for a structured quality review of a progress report.

Created: 2026-10-12
Version: 1.0.0
License: MIT
"""

from typing import Optional

from models.report_input import ReportInput

# System prompt for report review
SYSTEM_PROMPT = """You are an expert NGO project management consultant specializing in progress report analysis. Provide constructive, specific feedback to help officers improve their reporting quality. Focus on clarity, completeness, actionable insights, and professional development.

Always respond with valid JSON in the exact format requested. Do not include explanations or text outside the JSON object."""

ATTACHMENT_SEPARATOR = "\n\n---\n\n"
NOT_PROVIDED = "Not provided"

EVALUATION_CRITERIA = [
    ("Clarity", "Is the language clear, professional, and easy to understand?"),
    ("Completeness", "Are all sections adequately detailed with specific information?"),
    ("Specificity", "Does it include concrete details, metrics, dates, and quantifiable outcomes?"),
    ("Evidence", "Are there supporting attachments and documentation?"),
    ("Alignment", "Does the report align with stated project goals and objectives?"),
    ("Actionability", "Are next steps and challenges clearly defined with solutions?"),
    ("Impact", "Does it demonstrate measurable project impact and outcomes?"),
    ("Professional Standards", "Does it meet NGO reporting best practices?"),
]

RESPONSE_FORMAT = """{
  "overallScore": <number 0-100>,
  "readinessLevel": "<needs-major-improvements|needs-minor-improvements|good|excellent>",
  "overallFeedback": "<detailed assessment including attachment evaluation>",
  "sectionAnalysis": [
    {
      "section": "<section name>",
      "score": <0-100>,
      "issues": ["<specific issue 1>", "<specific issue 2>"],
      "suggestions": ["<actionable suggestion 1>", "<actionable suggestion 2>"]
    }
  ],
  "strengthsIdentified": ["<strength 1>", "<strength 2>"],
  "priorityImprovements": ["<high priority improvement 1>", "<high priority improvement 2>"]
}"""


def join_attachment_excerpts(excerpts: list[str]) -> str:
    """Join per-attachment excerpts into one block separated by rules."""
    return ATTACHMENT_SEPARATOR.join(excerpt for excerpt in excerpts if excerpt)


def _or_not_provided(value: Optional[str]) -> str:
    return value if value else NOT_PROVIDED


def _format_budget(budget: Optional[float]) -> str:
    if budget is None:
        return "Not specified"
    return f"${budget:,.2f}"


def _format_progress(progress: Optional[float]) -> str:
    if progress is None:
        return NOT_PROVIDED
    return f"{progress:g}%"


def _attachment_summary(report: ReportInput) -> str:
    count = report.attachment_count or len(report.attachment_paths)
    types = ", ".join(report.attachment_types) if report.attachment_types else "various types"
    return f"{count} files ({types})"


def _attachment_block(report: ReportInput, attachment_excerpts: str) -> str:
    if attachment_excerpts:
        return (
            f"ATTACHMENTS: {_attachment_summary(report)}\n\n"
            f"ATTACHMENT CONTENTS:\n{attachment_excerpts}"
        )
    if report.has_attachments:
        return f"ATTACHMENTS: {_attachment_summary(report)}"
    return "ATTACHMENTS: None provided"


def _attachment_assessment(report: ReportInput, attachment_excerpts: str) -> str:
    if attachment_excerpts or report.has_attachments:
        return (
            "Consider whether the attachment(s) provide adequate supporting evidence. "
            "Use the attachment contents above where they were extracted. Visual "
            "documentation (images) and detailed documentation (PDFs) enhance "
            "credibility when appropriate for the content type."
        )
    return (
        "Note the absence of supporting attachments and suggest when visual evidence "
        "or documentation would strengthen the report."
    )


def get_analysis_prompt(report: ReportInput, attachment_excerpts: str = "") -> str:
    """Generate the review prompt for a progress report.

    The document always has the same shape: optional fields are rendered
    with an explicit "Not provided" marker instead of being omitted.

    Args:
        report: The report and its project context.
        attachment_excerpts: Attachment excerpts already joined with
            join_attachment_excerpts(). Empty when there are none.

    Returns:
        str: Formatted prompt for the analysis service.

    Example:
        >>> report = ReportInput(title="Q1 Update", content="We distributed 200 kits.",
        ...                      project_name="Water Access")
        >>> "ATTACHMENTS: None provided" in get_analysis_prompt(report)
        True
    """
    criteria = "\n".join(
        f"{i}. **{name}**: {question}"
        for i, (name, question) in enumerate(EVALUATION_CRITERIA, start=1)
    )

    return f"""Analyze this NGO progress report and provide detailed feedback in JSON format:

**Project Context:**
- Project Name: {report.project_name}
- Project Description: {_or_not_provided(report.project_description)}
- Project Goals: {_or_not_provided(report.project_goals)}
- Project Budget: {_format_budget(report.project_budget)}
- Project Status: {report.project_status or 'Active'}

**Report Details:**
- Title: {report.title}
- Content: {report.content}

{_attachment_block(report, attachment_excerpts)}

- Progress: {_format_progress(report.progress)}
- Challenges: {_or_not_provided(report.challenges_faced)}
- Next Steps: {_or_not_provided(report.next_steps)}
- Budget Notes: {_or_not_provided(report.budget_notes)}

**Analysis Requirements:**
Evaluate the report on these criteria:
{criteria}

**Attachment Assessment:**
{_attachment_assessment(report, attachment_excerpts)}

**Response Format (JSON):**
{RESPONSE_FORMAT}

**Guidelines:**
- Be constructive and encouraging
- Provide specific, actionable suggestions
- Identify at least 2-3 strengths
- Flag vague language and suggest concrete alternatives
- Recommend quantitative details where missing
- Consider project context and goals in evaluation
- Assess if attachments enhance or are needed for the report
"""
