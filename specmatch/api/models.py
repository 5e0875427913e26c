"""API request/response models.

Separate from domain models to allow different validation rules.
"""

from pydantic import BaseModel, Field

from specmatch.domain.models import VerificationReport


class VerifyRequest(BaseModel):
    """Request model for comparing source files against a specification."""

    spec_content: str = Field(
        min_length=1,
        description="Full text of the specification document",
        examples=["# Login screen\n- Email and password fields\n- Submit disabled until valid"],
    )
    code_contents: dict[str, str] = Field(
        min_length=1,
        description="Mapping of file path to file content",
        examples=[{"src/Login.tsx": "export function Login() { /* ... */ }"}],
    )


class VerifyResponse(BaseModel):
    """Verdict returned by the provider, with call metadata."""

    provider: str = Field(description="Provider that produced the verdict", examples=["claude"])
    match_percentage: float = Field(
        description="How much of the spec the code implements (nominally 0-100)",
        examples=[80],
    )
    matched_items: list[str] = Field(description="Spec items found in the code")
    unmatched_items: list[str] = Field(description="Spec items missing from the code")
    notes: str = Field(description="Reviewer notes")
    file_count: int = Field(description="Number of files compared")
    elapsed_seconds: float = Field(description="Duration of the provider call in seconds")

    @classmethod
    def from_domain(cls, report: VerificationReport) -> "VerifyResponse":
        """Flatten a VerificationReport into the response shape."""
        return cls(
            provider=report.provider,
            match_percentage=report.result.match_percentage,
            matched_items=list(report.result.matched_items),
            unmatched_items=list(report.result.unmatched_items),
            notes=report.result.notes,
            file_count=report.file_count,
            elapsed_seconds=report.elapsed_seconds,
        )
