"""Tests for the analysis service client.

Created: 2026-10-12
Version: 1.0.0
License: MIT
"""

import asyncio
import json
import sys

import pytest

from agents.report_reviewer.llm_service import (
    AnalysisClient,
    AnalysisError,
    ConfigurationError,
    extract_json_from_response,
)
from agents.report_reviewer.prompts import SYSTEM_PROMPT
from utils.config import Config


def test_request_parameters(analysis_client, fake_completion):
    """Test that the request uses JSON mode and the fixed model parameters."""
    asyncio.run(analysis_client.request_analysis("Analyze this"))

    call = fake_completion.calls[0]
    assert call["model"] == "gpt-4o"
    assert call["response_format"] == {"type": "json_object"}
    assert call["temperature"] == 0.3
    assert call["max_tokens"] == 2000
    assert call["api_key"] == "test-key"
    assert call["messages"] == [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": "Analyze this"}
    ]


def test_system_prompt_requires_json():
    assert "expert NGO project management consultant" in SYSTEM_PROMPT
    assert "valid JSON" in SYSTEM_PROMPT


def test_returns_parsed_payload(analysis_client, valid_analysis):
    assert asyncio.run(analysis_client.request_analysis("prompt")) == valid_analysis


def test_upstream_failure_wrapped(completion_factory):
    client = AnalysisClient(
        api_key="test-key",
        completion=completion_factory(error=RuntimeError("429 rate limit exceeded"))
    )

    with pytest.raises(AnalysisError) as exc_info:
        asyncio.run(client.request_analysis("prompt"))

    assert "Failed to analyze report" in str(exc_info.value)
    assert exc_info.value.upstream_message == "429 rate limit exceeded"


def test_non_json_content(completion_factory):
    client = AnalysisClient(api_key="test-key", completion=completion_factory(content="I cannot help"))

    with pytest.raises(AnalysisError, match="not valid JSON"):
        asyncio.run(client.request_analysis("prompt"))


@pytest.mark.skipif(
    not hasattr(sys, "get_int_max_str_digits"),
    reason="interpreter has no integer string conversion limit"
)
def test_integer_over_digit_limit(completion_factory):
    """Test that JSON the decoder refuses with a plain ValueError is wrapped."""
    content = '{"overallScore": ' + "9" * 5000 + "}"
    client = AnalysisClient(api_key="test-key", completion=completion_factory(content=content))

    with pytest.raises(AnalysisError, match="Failed to analyze report"):
        asyncio.run(client.request_analysis("prompt"))


def test_empty_content(completion_factory):
    client = AnalysisClient(api_key="test-key", completion=completion_factory(content=""))

    with pytest.raises(AnalysisError, match="Empty response"):
        asyncio.run(client.request_analysis("prompt"))


def test_malformed_envelope():
    async def completion(**kwargs):
        return {"unexpected": "shape"}

    client = AnalysisClient(api_key="test-key", completion=completion)

    with pytest.raises(AnalysisError, match="Malformed response envelope"):
        asyncio.run(client.request_analysis("prompt"))


def test_timeout():
    async def slow_completion(**kwargs):
        await asyncio.sleep(5)

    client = AnalysisClient(api_key="test-key", timeout=0.05, completion=slow_completion)

    with pytest.raises(AnalysisError, match="timed out"):
        asyncio.run(client.request_analysis("prompt"))


def test_cancellation_propagates():
    """Test that cancelling the caller cancels the outstanding request."""
    started = asyncio.Event()
    cancelled = []

    async def hanging_completion(**kwargs):
        started.set()
        try:
            await asyncio.sleep(10)
        except asyncio.CancelledError:
            cancelled.append(True)
            raise

    client = AnalysisClient(api_key="test-key", completion=hanging_completion)

    async def run():
        task = asyncio.create_task(client.request_analysis("prompt"))
        await started.wait()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    asyncio.run(run())
    assert cancelled == [True]


def test_from_config_requires_credential(monkeypatch):
    monkeypatch.setattr(Config, "OPENAI_API_KEY", None)

    with pytest.raises(ConfigurationError, match="OPENAI_API_KEY"):
        AnalysisClient.from_config()


def test_from_config_uses_settings(monkeypatch, fake_completion):
    monkeypatch.setattr(Config, "OPENAI_API_KEY", "sk-test")
    monkeypatch.setattr(Config, "ANALYSIS_MODEL", "gpt-4o-mini")

    client = AnalysisClient.from_config(completion=fake_completion)

    assert client.api_key == "sk-test"
    assert client.model == "gpt-4o-mini"
    assert client.temperature == Config.ANALYSIS_TEMPERATURE
    assert client.max_tokens == Config.ANALYSIS_MAX_TOKENS


@pytest.mark.parametrize("text", [
    '{"overallScore": 70}',
    '```json\n{"overallScore": 70}\n```',
    'Here you go: {"overallScore": 70} hope it helps',
])
def test_extract_json_from_response(text):
    assert extract_json_from_response(text) == {"overallScore": 70}


def test_extract_json_gives_up():
    assert extract_json_from_response("no json here") is None


def test_non_object_json_returned_as_is(completion_factory):
    client = AnalysisClient(api_key="test-key", completion=completion_factory(content=json.dumps([1, 2])))
    assert asyncio.run(client.request_analysis("prompt")) == [1, 2]
