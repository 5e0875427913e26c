"""Verification API routes.

Endpoints for grading source files against a specification document.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from specmatch.api.dependencies import get_settings, get_verification_service
from specmatch.api.models import VerifyRequest, VerifyResponse
from specmatch.application.verification_service import VerificationService
from specmatch.domain.exceptions import TransportError
from specmatch.shared.config import Settings
from specmatch.shared.result import Err, Ok

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/verification", tags=["verification"])


@router.post(
    "/verify",
    response_model=VerifyResponse,
    status_code=200,
    summary="Compare source files against a specification",
    description="""
    Send a specification and a set of source files to the LLM provider and
    return its match verdict.

    ## Error Scenarios

    - **422 Unprocessable Entity**: Invalid request, too many files, or a file over the size limit
    - **500 Internal Server Error**: Provider is not configured (no API key when the service is resolved)
    - **502 Bad Gateway**: Provider returned an error status, an error payload, or an undecodable reply
    - **503 Service Unavailable**: Provider could not be reached
    """,
    tags=["Verification"],
)
async def verify_spec(
    request: VerifyRequest,
    service: VerificationService = Depends(get_verification_service),
    settings: Settings = Depends(get_settings),
) -> VerifyResponse:
    """Run one verification.

    Args:
        request: Spec text and file contents
        service: Injected VerificationService instance
        settings: Application settings (request limits)

    Returns:
        VerifyResponse with the provider verdict

    Raises:
        HTTPException: 422, 502 or 503 as documented above
    """
    if len(request.code_contents) > settings.max_files:
        raise HTTPException(
            status_code=422,
            detail=f"Too many files: {len(request.code_contents)} (max {settings.max_files})",
        )

    oversized = sorted(
        path
        for path, content in request.code_contents.items()
        if len(content) > settings.max_file_chars
    )
    if oversized:
        raise HTTPException(
            status_code=422,
            detail=f"Files exceed {settings.max_file_chars} characters: {', '.join(oversized)}",
        )

    logger.info(f"Verification request (files={len(request.code_contents)})")

    result = await service.verify(request.spec_content, request.code_contents)

    match result:
        case Ok(report):
            return VerifyResponse.from_domain(report)

        case Err(TransportError() as error):
            raise HTTPException(status_code=503, detail=str(error))

        case Err(error):
            raise HTTPException(status_code=502, detail=str(error))
