"""Email validation API endpoints.

Implements checks against the email pattern:
- POST /api/emails/validate - Validate one address
- POST /api/emails/validate/batch - Validate several addresses
- GET /api/emails/parts - Split a matching address into its parts
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.core.config import Settings, get_settings
from app.email_regex.application.dto.email_dto import (
    BatchValidateRequest,
    BatchValidationDTO,
    EmailPartsDTO,
    EmailValidationDTO,
    ValidateEmailRequest,
)
from app.email_regex.application.exceptions import (
    BatchTooLargeError,
    EmptyBatchError,
    InvalidEmailError,
)
from app.email_regex.application.use_cases.validate_email import (
    ParseEmailUseCase,
    ValidateEmailBatchUseCase,
    ValidateEmailUseCase,
)

router = APIRouter()


@router.post("/emails/validate", response_model=EmailValidationDTO)
async def validate_email(request: ValidateEmailRequest) -> EmailValidationDTO:
    """Check one string against the email pattern.

    A non-matching address is a normal result: the response is 200 with
    is_valid set to false and the reason filled in.

    Args:
        request: The text to check.

    Returns:
        EmailValidationDTO with captures or the non-match reason.
    """
    return ValidateEmailUseCase().execute(request.email)


@router.post("/emails/validate/batch", response_model=BatchValidationDTO)
async def validate_email_batch(
    request: BatchValidateRequest,
    settings: Settings = Depends(get_settings),
) -> BatchValidationDTO:
    """Check several strings against the email pattern.

    Args:
        request: The texts to check.
        settings: Application settings (injected).

    Returns:
        BatchValidationDTO with one result per input, in input order.

    Raises:
        HTTPException: 400 if the batch is empty.
        HTTPException: 413 if the batch exceeds max_batch_size.
    """
    use_case = ValidateEmailBatchUseCase(max_batch_size=settings.max_batch_size)

    try:
        return use_case.execute(request.emails)
    except EmptyBatchError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        ) from e
    except BatchTooLargeError as e:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=e.message,
        ) from e


@router.get("/emails/parts", response_model=EmailPartsDTO)
async def get_email_parts(
    email: Annotated[str, Query(description="Address to split into its parts")],
) -> EmailPartsDTO:
    """Split a matching address into local part, domain and top-level domain.

    Args:
        email: The address to split.

    Returns:
        EmailPartsDTO with the captured components.

    Raises:
        HTTPException: 400 if the address does not match the pattern.
    """
    try:
        return ParseEmailUseCase().execute(email)
    except InvalidEmailError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        ) from e
