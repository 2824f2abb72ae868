"""Data transfer objects for application layer."""

from app.email_regex.application.dto.email_dto import (
    BatchValidateRequest,
    BatchValidationDTO,
    EmailPartsDTO,
    EmailValidationDTO,
    ValidateEmailRequest,
)
from app.email_regex.application.dto.pattern_dto import (
    CaptureGroupDTO,
    PatternComponentDTO,
    PatternDTO,
    SyntaxCategoryDTO,
    SyntaxReferenceDTO,
)
from app.email_regex.application.dto.tutorial_dto import (
    SegmentDTO,
    TableOfContentsEntryDTO,
    TutorialDTO,
    TutorialSectionDTO,
)

__all__ = [
    # Email DTOs
    "ValidateEmailRequest",
    "BatchValidateRequest",
    "EmailValidationDTO",
    "BatchValidationDTO",
    "EmailPartsDTO",
    # Pattern DTOs
    "CaptureGroupDTO",
    "PatternComponentDTO",
    "PatternDTO",
    "SyntaxCategoryDTO",
    "SyntaxReferenceDTO",
    # Tutorial DTOs
    "SegmentDTO",
    "TableOfContentsEntryDTO",
    "TutorialDTO",
    "TutorialSectionDTO",
]
