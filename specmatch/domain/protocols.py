"""Protocol definitions for dependency inversion.

Infrastructure providers satisfy these protocols; the application layer only
depends on them.
"""

from collections.abc import Mapping
from typing import Protocol

from specmatch.domain.models import VerificationResult


class VerificationProvider(Protocol):
    """Protocol for an LLM backend that grades code against a spec."""

    def name(self) -> str:
        """Return the provider tag (e.g. ``"claude"``)."""
        ...

    async def verify(
        self, spec_content: str, code_contents: Mapping[str, str]
    ) -> VerificationResult:
        """Compare a specification with source files.

        Args:
            spec_content: Full text of the specification document
            code_contents: Mapping of file path to file content

        Returns:
            Verdict decoded from the model reply

        Raises:
            VerificationError: If the call or the decoding fails
        """
        ...

    async def close(self) -> None:
        """Release network resources held by the provider."""
        ...
