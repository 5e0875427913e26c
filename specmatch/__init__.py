"""
specmatch: grade source code against a specification document with Claude.

Typical use:

    provider = ClaudeProvider(api_key="...")
    result = await provider.verify(spec_text, {"src/app.py": source})
"""

from specmatch.domain.exceptions import (
    ConfigurationError,
    EmptyResponseError,
    ExtractionError,
    MalformedResponseError,
    ProtocolError,
    RemoteError,
    TransportError,
    VerificationError,
)
from specmatch.domain.models import VerificationResult
from specmatch.infrastructure.llm.client import ClaudeProvider

__all__ = [
    "ClaudeProvider",
    "VerificationResult",
    "VerificationError",
    "ConfigurationError",
    "TransportError",
    "ProtocolError",
    "MalformedResponseError",
    "RemoteError",
    "EmptyResponseError",
    "ExtractionError",
]
