"""
Anthropic Claude verification provider.

This module provides the concrete implementation of the VerificationProvider
protocol on top of Anthropic's official Python SDK. Each call is a single
request/response round trip: SDK retries are disabled and no client-side
timeout is set unless configured, so cancellation is left to the caller's
asyncio task.
"""

import logging
from collections.abc import Mapping

import anthropic
import httpx
from pydantic import BaseModel, ValidationError

from specmatch.domain.exceptions import (
    ConfigurationError,
    EmptyResponseError,
    MalformedResponseError,
    ProtocolError,
    RemoteError,
    TransportError,
)
from specmatch.domain.models import VerificationResult
from specmatch.infrastructure.llm.constants import (
    ANTHROPIC_BASE_URL,
    ANTHROPIC_VERSION,
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL,
    PROVIDER_NAME,
)
from specmatch.infrastructure.llm.parsing import parse_verification_result
from specmatch.infrastructure.llm.prompts import build_verification_prompt
from specmatch.shared.config import Settings

logger = logging.getLogger(__name__)


class _ContentBlock(BaseModel):
    type: str = ""
    text: str = ""


class _APIErrorBody(BaseModel):
    type: str = ""
    message: str = ""


class _MessagesEnvelope(BaseModel):
    """Subset of the Messages API response the provider relies on."""

    content: list[_ContentBlock] | None = None
    error: _APIErrorBody | None = None


class ClaudeProvider:
    """
    Claude-backed provider implementing the VerificationProvider protocol.

    The provider renders the verification prompt, sends it to the Messages
    API and decodes the verdict from the first content block of the reply.

    Attributes:
        _client: Anthropic async client instance
        _model: Claude model identifier
        _max_tokens: Token ceiling sent with every request
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        base_url: str = ANTHROPIC_BASE_URL,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize the provider.

        Args:
            api_key: Anthropic API key (must be non-empty)
            model: Claude model identifier
            base_url: API base URL, overridable for fixtures
            max_tokens: Token ceiling for the reply
            timeout: Request timeout in seconds (None disables it)
            http_client: Optional preconfigured httpx client (e.g. a mock transport)

        Raises:
            ConfigurationError: If api_key is empty
        """
        if not api_key:
            raise ConfigurationError("API key is required")

        self._model = model
        self._max_tokens = max_tokens
        self._client = anthropic.AsyncAnthropic(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
            # Only x-api-key authenticates; drop the Bearer header the SDK
            # derives from ANTHROPIC_AUTH_TOKEN
            default_headers={
                "anthropic-version": ANTHROPIC_VERSION,
                "Authorization": anthropic.Omit(),
            },
            http_client=http_client,
        )

        logger.info(f"Initialized ClaudeProvider - model: {self._model}")

    @classmethod
    def from_settings(cls, settings: Settings) -> "ClaudeProvider":
        """Build a provider from application settings."""
        return cls(
            api_key=settings.anthropic_api_key,
            model=settings.anthropic_model,
            base_url=settings.anthropic_base_url,
            max_tokens=settings.anthropic_max_tokens,
            timeout=settings.anthropic_timeout,
        )

    @property
    def model(self) -> str:
        return self._model

    def name(self) -> str:
        """Return the provider tag."""
        return PROVIDER_NAME

    async def verify(
        self, spec_content: str, code_contents: Mapping[str, str]
    ) -> VerificationResult:
        """
        Ask Claude how well the code implements the spec.

        Args:
            spec_content: Full text of the specification document
            code_contents: Mapping of file path to file content

        Returns:
            Verdict decoded from the reply

        Raises:
            TransportError: If the request could not be sent
            ProtocolError: If the API returned a non-success status
            MalformedResponseError: If the response body is not a message envelope
            RemoteError: If the envelope carries a provider error
            EmptyResponseError: If the reply has no content blocks
            ExtractionError: If the reply text does not decode to a verdict
        """
        prompt = build_verification_prompt(spec_content, code_contents)

        logger.debug(
            f"Calling verify with model={self._model}, "
            f"files={len(code_contents)}, prompt_length={len(prompt)}"
        )

        try:
            raw = await self._client.messages.with_raw_response.create(
                model=self._model,
                max_tokens=self._max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.APIStatusError as e:
            body = e.response.text
            logger.error(f"Anthropic API returned status {e.status_code}: {body[:200]}")
            raise ProtocolError(e.status_code, body) from e
        except anthropic.APIConnectionError as e:
            logger.error(f"Failed to send request to Anthropic API: {e}")
            raise TransportError(f"failed to send request: {e}") from e

        result = self._decode(raw.http_response.text)

        logger.info(
            f"Verification complete: "
            f"match_percentage={result.match_percentage}, "
            f"matched={len(result.matched_items)}, "
            f"unmatched={len(result.unmatched_items)}"
        )

        return result

    def _decode(self, body: str) -> VerificationResult:
        """Check the response envelope and decode the first content block."""
        try:
            envelope = _MessagesEnvelope.model_validate_json(body)
        except ValidationError as e:
            logger.error(f"Unparseable response body: {body[:200]}")
            raise MalformedResponseError(f"failed to parse response: {e}") from e

        if envelope.error is not None:
            logger.error(
                f"Anthropic API reported {envelope.error.type or 'error'}: "
                f"{envelope.error.message}"
            )
            raise RemoteError(envelope.error.message, error_type=envelope.error.type)

        if not envelope.content:
            logger.error("Anthropic API returned no content blocks")
            raise EmptyResponseError()

        return parse_verification_result(envelope.content[0].text)

    async def close(self) -> None:
        """
        Close the Anthropic client and release its connection pool.

        Should be called when the provider is no longer needed, typically at
        application shutdown.
        """
        await self._client.close()
        logger.info("ClaudeProvider closed")
