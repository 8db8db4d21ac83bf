"""LLM service for report analysis.

This module handles the single outbound call to the analysis service: it
sends the built prompt through LiteLLM in JSON mode and returns the parsed
JSON payload. Schema checking is left to the normalizer.

Created: 2026-10-12
Version: 1.0.0
License: MIT
"""

import asyncio
import json
import logging
import os
import re
from typing import Any, Awaitable, Callable, Optional

from litellm import acompletion

from utils.config import config
from .prompts import SYSTEM_PROMPT

logger = logging.getLogger(__name__)

CompletionFn = Callable[..., Awaitable[Any]]

_litellm_configured = False


class ConfigurationError(RuntimeError):
    """Raised at startup when the analysis service cannot be configured."""


class AnalysisError(Exception):
    """Raised when the analysis service call fails.

    Attributes:
        upstream_message: The original error message from the service or
            transport.
    """

    def __init__(self, upstream_message: str):
        self.upstream_message = upstream_message
        super().__init__(f"Failed to analyze report: {upstream_message}")


def configure_litellm() -> None:
    """Suppress LiteLLM verbose logging. Safe to call multiple times."""
    global _litellm_configured
    if _litellm_configured:
        return

    os.environ["LITELLM_LOG"] = "ERROR"

    import litellm
    litellm.suppress_debug_info = True

    _litellm_configured = True


def extract_json_from_response(response_text: str) -> Optional[Any]:
    """Extract a JSON value from the message content.

    JSON mode should return a bare object, but some providers still wrap
    it in markdown code fences, so fences are stripped before giving up.

    Args:
        response_text: Message content returned by the service.

    Returns:
        Parsed JSON value, or None if no JSON could be found.
    """
    try:
        return json.loads(response_text)
    except ValueError:
        pass

    cleaned_text = response_text.strip()
    if cleaned_text.startswith('```'):
        cleaned_text = re.sub(r'^```(?:json)?\s*\n?', '', cleaned_text)
        cleaned_text = re.sub(r'\n?```\s*$', '', cleaned_text)
        try:
            return json.loads(cleaned_text)
        except ValueError:
            pass

    json_match = re.search(r'\{.*\}', cleaned_text, re.DOTALL)
    if json_match:
        try:
            return json.loads(json_match.group())
        except ValueError:
            pass

    logger.error(f"Could not extract JSON from response: {response_text[:200]}")
    return None


class AnalysisClient:
    """Client for the external analysis service.

    Model parameters are fixed per deployment (from configuration), not per
    call. Build instances with from_config() at application startup so that
    a missing credential fails immediately; tests construct the client
    directly with a fake completion coroutine.

    Example:
        >>> client = AnalysisClient.from_config()
        >>> raw = await client.request_analysis(prompt)
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = "gpt-4o",
        temperature: float = 0.3,
        max_tokens: int = 2000,
        timeout: float = 60.0,
        completion: Optional[CompletionFn] = None
    ):
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout = timeout
        self._completion = completion or acompletion

    @classmethod
    def from_config(cls, completion: Optional[CompletionFn] = None) -> "AnalysisClient":
        """Create the client from configuration.

        Raises:
            ConfigurationError: If OPENAI_API_KEY is not set.
        """
        if not config.OPENAI_API_KEY:
            raise ConfigurationError("OPENAI_API_KEY environment variable is required")

        configure_litellm()
        logger.info(f"Analysis client initialized with model: {config.ANALYSIS_MODEL}")
        return cls(
            api_key=config.OPENAI_API_KEY,
            model=config.ANALYSIS_MODEL,
            temperature=config.ANALYSIS_TEMPERATURE,
            max_tokens=config.ANALYSIS_MAX_TOKENS,
            timeout=config.ANALYSIS_TIMEOUT,
            completion=completion
        )

    def build_messages(self, prompt: str) -> list[dict]:
        return [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": prompt}
        ]

    async def request_analysis(self, prompt: str) -> Any:
        """Send the prompt and return the parsed JSON payload.

        Args:
            prompt: Full analysis prompt from get_analysis_prompt().

        Returns:
            The parsed JSON value. Its shape is not checked here.

        Raises:
            AnalysisError: On transport errors, timeouts, an empty or
                malformed response envelope, or non-JSON content.
        """
        try:
            response = await asyncio.wait_for(
                self._completion(
                    model=self.model,
                    messages=self.build_messages(prompt),
                    response_format={"type": "json_object"},
                    temperature=self.temperature,
                    max_tokens=self.max_tokens,
                    api_key=self.api_key,
                    timeout=self.timeout
                ),
                timeout=self.timeout
            )
        except asyncio.TimeoutError:
            logger.error(f"Analysis request timed out after {self.timeout}s")
            raise AnalysisError(f"Request timed out after {self.timeout}s")
        except Exception as e:
            logger.exception("Analysis request failed")
            raise AnalysisError(str(e)) from e

        try:
            response_text = response.choices[0].message.content or ""
        except (AttributeError, IndexError, TypeError) as e:
            logger.error(f"Malformed response envelope: {e}")
            raise AnalysisError(f"Malformed response envelope: {e}") from e

        if not response_text.strip():
            raise AnalysisError("Empty response from analysis service")

        data = extract_json_from_response(response_text)
        if data is None:
            raise AnalysisError("Response was not valid JSON")

        logger.debug(f"Received analysis payload with {len(response_text)} characters")
        return data
