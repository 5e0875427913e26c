"""Shared fixtures for unit tests.

Provides:
- Sample spec text and source files
- Canned Messages API payloads
- A mock verification provider
"""

import json
from collections.abc import Callable
from unittest.mock import AsyncMock, Mock

import pytest

from specmatch.domain.models import VerificationResult

# ============================================================================
# Sample Data
# ============================================================================


@pytest.fixture
def sample_spec() -> str:
    """Sample specification document."""
    return (
        "# Login screen\n"
        "- Email and password inputs\n"
        "- Submit button disabled until both fields are filled\n"
        "- Show an error banner when login fails"
    )


@pytest.fixture
def sample_code_contents() -> dict[str, str]:
    """Sample source files keyed by path (deliberately unsorted)."""
    return {
        "src/pages/Login.tsx": "export function Login() {\n  const [email, setEmail] = useState('');\n}",
        "src/api/auth.ts": "export async function login(email: string, password: string) {}",
    }


@pytest.fixture
def sample_result_payload() -> dict:
    """Verdict JSON as the model is asked to produce it."""
    return {
        "matchPercentage": 80,
        "matchedItems": ["Email and password inputs", "Submit button state"],
        "unmatchedItems": ["Error banner on failure"],
        "notes": "Error handling is not implemented.",
    }


@pytest.fixture
def messages_body() -> Callable[[str], dict]:
    """Factory for a Messages API response with a single text block."""

    def build(text: str) -> dict:
        return {
            "id": "msg_test",
            "type": "message",
            "role": "assistant",
            "model": "claude-sonnet-4-20250514",
            "content": [{"type": "text", "text": text}],
            "stop_reason": "end_turn",
            "stop_sequence": None,
            "usage": {"input_tokens": 120, "output_tokens": 60},
        }

    return build


@pytest.fixture
def fenced() -> Callable[[dict], str]:
    """Wrap a payload in a ```json fence the way the model usually does."""

    def wrap(payload: dict) -> str:
        return f"```json\n{json.dumps(payload, indent=2)}\n```"

    return wrap


# ============================================================================
# Mock Providers
# ============================================================================


@pytest.fixture
def mock_verification_provider(sample_result_payload: dict) -> Mock:
    """Create mock verification provider returning a fixed verdict."""
    mock = Mock()
    mock.name = Mock(return_value="claude")
    mock.verify = AsyncMock(return_value=VerificationResult.model_validate(sample_result_payload))
    mock.close = AsyncMock()
    return mock
