"""
Verification exception hierarchy.

Every failure of a verification call maps to exactly one subclass of
VerificationError. Lower-level causes (SDK exceptions, pydantic validation
errors) are chained via ``raise ... from``.
"""


class VerificationError(Exception):
    """Base exception for all verification errors."""

    pass


class ConfigurationError(VerificationError):
    """Raised when a provider cannot be built from the given configuration."""

    pass


class TransportError(VerificationError):
    """Raised when the request could not be delivered or the connection failed."""

    pass


class ProtocolError(VerificationError):
    """
    Raised when the API answers with a non-success HTTP status.

    Attributes:
        status_code: HTTP status returned by the API
        body: Raw response body, kept verbatim for diagnosis
    """

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"API error (status {status_code}): {body}")
        self.status_code = status_code
        self.body = body


class MalformedResponseError(VerificationError):
    """Raised when a success response body is not a valid message envelope."""

    pass


class RemoteError(VerificationError):
    """
    Raised when the response envelope carries a provider-reported error.

    Attributes:
        error_type: Provider error type (e.g. ``rate_limit_error``), may be empty
        provider_message: Message reported by the provider
    """

    def __init__(self, provider_message: str, error_type: str = "") -> None:
        super().__init__(f"API error: {provider_message}")
        self.provider_message = provider_message
        self.error_type = error_type


class EmptyResponseError(VerificationError):
    """Raised when the API returns no content blocks."""

    def __init__(self, message: str = "empty response from API") -> None:
        super().__init__(message)


class ExtractionError(VerificationError):
    """
    Raised when the reply text does not decode to a VerificationResult.

    Attributes:
        payload: The text that failed to decode
    """

    def __init__(self, message: str, payload: str) -> None:
        super().__init__(message)
        self.payload = payload
