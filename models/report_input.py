"""Report analysis request data model.

This module defines the Pydantic model describing one report submitted for
AI review: project context, the report narrative and optional attachment
metadata. Accepts either snake_case or the camelCase keys sent by the web
client.

Created: 2026-10-12
Version: 1.0.0
License: MIT
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class ReportInput(BaseModel):
    """Parameters for a single report analysis request.

    Attributes:
        title: Report title.
        content: Report narrative.
        project_name: Name of the project the report belongs to.
        project_description: Optional project description.
        project_goals: Optional project goals.
        project_budget: Optional project budget.
        project_status: Optional project status (e.g. "active").
        progress: Optional progress percentage (0-100).
        challenges_faced: Optional challenges narrative.
        next_steps: Optional next steps narrative.
        budget_notes: Optional budget notes.
        has_attachments: Whether files were attached to the report.
        attachment_count: Number of attached files.
        attachment_types: Declared MIME types, one per attachment.
        attachment_paths: Storage paths, one per attachment, same order as
            attachment_types.
        attachment_contents: Pre-computed attachment excerpts. When present,
            file extraction is skipped.
    """
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    title: str
    content: str
    project_name: str

    project_description: Optional[str] = None
    project_goals: Optional[str] = None
    project_budget: Optional[float] = None
    project_status: Optional[str] = None
    progress: Optional[float] = Field(default=None, ge=0, le=100)
    challenges_faced: Optional[str] = None
    next_steps: Optional[str] = None
    budget_notes: Optional[str] = None

    has_attachments: bool = False
    attachment_count: int = Field(default=0, ge=0)
    attachment_types: List[str] = Field(default_factory=list)
    attachment_paths: List[str] = Field(default_factory=list)
    attachment_contents: Optional[str] = None

    @model_validator(mode="after")
    def check_attachment_lists(self) -> "ReportInput":
        if self.attachment_paths and self.attachment_types:
            if len(self.attachment_paths) != len(self.attachment_types):
                raise ValueError(
                    "attachmentPaths and attachmentTypes must have the same length "
                    f"(got {len(self.attachment_paths)} and {len(self.attachment_types)})"
                )
        return self

    def attachments(self) -> List[tuple[str, str]]:
        """Pair each attachment path with its declared type.

        Paths without a declared type get an empty type, so extraction falls
        back to the filename extension or a generic text read.
        """
        types = self.attachment_types or [""] * len(self.attachment_paths)
        return list(zip(self.attachment_paths, types))
