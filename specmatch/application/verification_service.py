"""Verification service wrapping a provider call.

This is the application layer that coordinates domain logic.
"""

import logging
import time
from collections.abc import Mapping
from typing import TYPE_CHECKING

from specmatch.domain.exceptions import VerificationError
from specmatch.domain.models import VerificationReport
from specmatch.shared.result import Err, Ok, Result

if TYPE_CHECKING:
    from specmatch.domain.protocols import VerificationProvider

logger = logging.getLogger(__name__)


class VerificationService:
    """Runs one spec-to-code verification and reports the outcome as a Result."""

    def __init__(self, provider: "VerificationProvider"):
        """Initialize verification service.

        Args:
            provider: Backend that grades code against a spec
        """
        self.provider = provider

    async def verify(
        self, spec_content: str, code_contents: Mapping[str, str]
    ) -> Result[VerificationReport, VerificationError]:
        """Verify source files against a specification.

        Args:
            spec_content: Full text of the specification document
            code_contents: Mapping of file path to file content

        Returns:
            Ok(VerificationReport) if the provider produced a verdict
            Err(VerificationError) if the call or decoding failed
        """
        provider_name = self.provider.name()
        logger.info(
            f"Starting verification (provider={provider_name}, files={len(code_contents)}, "
            f"spec_length={len(spec_content)})"
        )
        start = time.time()

        try:
            result = await self.provider.verify(spec_content, code_contents)
        except VerificationError as e:
            elapsed = time.time() - start
            logger.warning(
                f"Verification failed after {elapsed:.2f}s: {type(e).__name__}: {e}"
            )
            return Err(e)

        elapsed = time.time() - start
        logger.info(
            f"Verification succeeded in {elapsed:.2f}s "
            f"(match_percentage={result.match_percentage})"
        )

        return Ok(
            VerificationReport(
                provider=provider_name,
                result=result,
                file_count=len(code_contents),
                elapsed_seconds=elapsed,
            )
        )
