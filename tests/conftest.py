"""Pytest configuration and fixtures for the report reviewer tests.

The analysis service is never contacted: tests inject a fake completion
coroutine into AnalysisClient.

Created: 2026-10-12
Version: 1.0.0
License: MIT
"""

import json
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from agents.report_reviewer import AnalysisClient, ReportReviewer
from models.report_input import ReportInput
from report_api.api import app
from report_api.api_utils import initialize_reviewer, reset_reviewer
from utils.config import Config


VALID_ANALYSIS = {
    "overallScore": 78,
    "readinessLevel": "good",
    "overallFeedback": "Clear report with measurable outcomes.",
    "sectionAnalysis": [
        {
            "section": "Impact",
            "score": 80,
            "issues": ["Beneficiary numbers are not broken down by village"],
            "suggestions": ["Add a per-village distribution table"]
        }
    ],
    "strengthsIdentified": ["Concrete distribution figures", "Clear next steps"],
    "priorityImprovements": ["Attach distribution records"]
}


def make_response(content):
    """Build an object shaped like a chat completion response."""
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))]
    )


class FakeCompletion:
    """Stand-in for litellm.acompletion that records its calls."""

    def __init__(self, content=None, error=None):
        self.content = json.dumps(VALID_ANALYSIS) if content is None else content
        self.error = error
        self.calls = []

    async def __call__(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return make_response(self.content)

    @property
    def last_prompt(self):
        return self.calls[-1]["messages"][1]["content"]


@pytest.fixture
def uploads_dir(tmp_path, monkeypatch):
    """Point the uploads directory at a temporary folder.

    Returns:
        Path: The temporary uploads directory
    """
    directory = tmp_path / "uploads"
    directory.mkdir()
    monkeypatch.setattr(Config, "UPLOADS_DIR", directory)
    return directory


@pytest.fixture
def fake_completion():
    """Provide a fake completion returning a valid analysis."""
    return FakeCompletion()


@pytest.fixture
def analysis_client(fake_completion):
    """Provide an AnalysisClient wired to the fake completion."""
    return AnalysisClient(api_key="test-key", completion=fake_completion)


@pytest.fixture
def reviewer(analysis_client):
    return ReportReviewer(analysis_client)


@pytest.fixture
def sample_report():
    """Provide the basic report used across tests."""
    return ReportInput(
        title="Q1 Update",
        content="We distributed 200 kits.",
        project_name="Water Access",
        has_attachments=False
    )


@pytest.fixture
def test_client(reviewer, uploads_dir):
    """Create a test client with an injected reviewer.

    Yields:
        TestClient: FastAPI test client
    """
    initialize_reviewer(reviewer)
    client = TestClient(app)

    yield client

    reset_reviewer()


@pytest.fixture
def valid_analysis():
    """Provide a copy of a schema-conforming analysis payload."""
    return json.loads(json.dumps(VALID_ANALYSIS))


@pytest.fixture
def completion_factory():
    """Provide the FakeCompletion class for custom responses or errors."""
    return FakeCompletion
