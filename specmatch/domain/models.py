"""Domain models for spec-to-code verification.

All models use Pydantic for validation, serialization, and type safety.
"""

from pydantic import BaseModel, ConfigDict, Field


class VerificationResult(BaseModel):
    """Structured verdict recovered from the model's reply.

    Field names on the wire are camelCase (``matchPercentage`` etc.); both the
    alias and the Python name are accepted on input. Decoding is lenient:
    unknown keys are ignored, missing keys take defaults, and
    ``match_percentage`` is not range-checked.
    """

    match_percentage: float = Field(
        default=0.0,
        alias="matchPercentage",
        description="How much of the spec the code implements (nominally 0-100, not clamped)",
    )
    matched_items: list[str] = Field(
        default_factory=list,
        alias="matchedItems",
        description="Spec items found in the code",
    )
    unmatched_items: list[str] = Field(
        default_factory=list,
        alias="unmatchedItems",
        description="Spec items missing from or contradicted by the code",
    )
    notes: str = Field(default="", description="Free-form reviewer notes")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class VerificationReport(BaseModel):
    """A verification result together with call metadata."""

    provider: str = Field(description="Name of the provider that produced the result")
    result: VerificationResult
    file_count: int = Field(ge=0, description="Number of files sent for comparison")
    elapsed_seconds: float = Field(ge=0.0, description="Wall-clock duration of the call")

    model_config = ConfigDict(frozen=True)
