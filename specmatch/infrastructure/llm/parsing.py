"""Recovery of structured verdicts from free-text model replies."""

import logging
import re

from pydantic import ValidationError

from specmatch.domain.exceptions import ExtractionError
from specmatch.domain.models import VerificationResult

logger = logging.getLogger(__name__)

# Non-greedy: the first ```json block wins when the reply contains several
JSON_BLOCK_PATTERN = re.compile(r"```json\s*([\s\S]*?)\s*```")


def extract_json_payload(text: str) -> str:
    """Return the interior of the first ```json fence, or the whole text if none."""
    match = JSON_BLOCK_PATTERN.search(text)
    if match:
        return match.group(1)
    logger.debug("No fenced JSON block in reply, decoding the full text")
    return text


def parse_verification_result(text: str) -> VerificationResult:
    """
    Decode a model reply into a VerificationResult.

    Decoding is strict about types: booleans and numeric strings are rejected
    rather than coerced, while integers still decode into float fields.

    Args:
        text: Text of the first content block of the reply

    Returns:
        Decoded verdict (match_percentage is not clamped)

    Raises:
        ExtractionError: If the payload is not a JSON object of the expected shape
    """
    payload = extract_json_payload(text)
    try:
        return VerificationResult.model_validate_json(payload, strict=True)
    except ValidationError as e:
        raise ExtractionError(
            f"failed to parse verification result: {e}", payload=payload
        ) from e
