"""Application layer - use cases and orchestration.

This layer contains:
- DTOs: Data Transfer Objects for API input/output
- Use Cases: Application services that orchestrate domain logic
- Interfaces: Ports for the tutorial document source
- Exceptions: Application-level error types
"""

from app.email_regex.application.dto import (
    BatchValidateRequest,
    BatchValidationDTO,
    EmailPartsDTO,
    EmailValidationDTO,
    PatternDTO,
    SyntaxCategoryDTO,
    SyntaxReferenceDTO,
    TutorialDTO,
    TutorialSectionDTO,
    ValidateEmailRequest,
)
from app.email_regex.application.exceptions import (
    ApplicationError,
    BatchTooLargeError,
    EmptyBatchError,
    InvalidEmailError,
    SectionNotFoundError,
    TutorialNotFoundError,
    TutorialUnavailableError,
    UnknownSyntaxCategoryError,
)
from app.email_regex.application.use_cases import (
    GetPatternUseCase,
    GetSyntaxReferenceUseCase,
    GetTutorialUseCase,
    ParseEmailUseCase,
    ValidateEmailBatchUseCase,
    ValidateEmailUseCase,
)

__all__ = [
    # DTOs
    "ValidateEmailRequest",
    "BatchValidateRequest",
    "EmailValidationDTO",
    "BatchValidationDTO",
    "EmailPartsDTO",
    "PatternDTO",
    "SyntaxCategoryDTO",
    "SyntaxReferenceDTO",
    "TutorialDTO",
    "TutorialSectionDTO",
    # Use Cases
    "ValidateEmailUseCase",
    "ValidateEmailBatchUseCase",
    "ParseEmailUseCase",
    "GetPatternUseCase",
    "GetSyntaxReferenceUseCase",
    "GetTutorialUseCase",
    # Exceptions
    "ApplicationError",
    "InvalidEmailError",
    "EmptyBatchError",
    "BatchTooLargeError",
    "UnknownSyntaxCategoryError",
    "TutorialNotFoundError",
    "TutorialUnavailableError",
    "SectionNotFoundError",
]
