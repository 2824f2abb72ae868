"""Application use cases for orchestrating domain logic."""

from app.email_regex.application.use_cases.explain_pattern import (
    GetPatternUseCase,
    GetSyntaxReferenceUseCase,
)
from app.email_regex.application.use_cases.get_tutorial import GetTutorialUseCase
from app.email_regex.application.use_cases.validate_email import (
    ParseEmailUseCase,
    ValidateEmailBatchUseCase,
    ValidateEmailUseCase,
)

__all__ = [
    "ValidateEmailUseCase",
    "ValidateEmailBatchUseCase",
    "ParseEmailUseCase",
    "GetPatternUseCase",
    "GetSyntaxReferenceUseCase",
    "GetTutorialUseCase",
]
