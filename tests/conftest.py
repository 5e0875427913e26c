"""Test configuration and fixtures.

Provides:
- Python path setup for imports
- Isolation from ambient Anthropic environment variables
"""

import sys
from pathlib import Path

import pytest

# Add project root to Python path for imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(autouse=True)
def _clean_anthropic_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's real credentials and overrides out of the tests."""
    for var in (
        "ANTHROPIC_API_KEY",
        "ANTHROPIC_AUTH_TOKEN",
        "ANTHROPIC_MODEL",
        "ANTHROPIC_BASE_URL",
        "ANTHROPIC_MAX_TOKENS",
        "ANTHROPIC_TIMEOUT",
        "MAX_FILES",
        "MAX_FILE_CHARS",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
