"""Application-layer exceptions for use case error handling.

These exceptions represent errors that can occur during use case
execution. They are designed to be caught and mapped to appropriate
HTTP responses by the presentation layer.
"""

from typing import Optional


class ApplicationError(Exception):
    """Base class for all application-layer exceptions."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class InvalidEmailError(ApplicationError):
    """Raised when an email address does not match the pattern."""

    def __init__(self, email: str, reason: Optional[str] = None) -> None:
        message = f"Invalid email address: {email}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message=message, code="INVALID_EMAIL")
        self.email = email
        self.reason = reason


class EmptyBatchError(ApplicationError):
    """Raised when a batch validation request contains no addresses."""

    def __init__(self) -> None:
        super().__init__(
            message="Batch must contain at least one email address",
            code="EMPTY_BATCH"
        )


class BatchTooLargeError(ApplicationError):
    """Raised when a batch validation request exceeds the configured limit."""

    def __init__(self, size: int, max_size: int) -> None:
        super().__init__(
            message=f"Batch of {size} addresses exceeds the limit of {max_size}",
            code="BATCH_TOO_LARGE"
        )
        self.size = size
        self.max_size = max_size


class UnknownSyntaxCategoryError(ApplicationError):
    """Raised when a regex syntax category does not exist."""

    def __init__(self, category: str) -> None:
        super().__init__(
            message=f"Syntax category '{category}' not found",
            code="SYNTAX_CATEGORY_NOT_FOUND"
        )
        self.category = category


class TutorialUnavailableError(ApplicationError):
    """Raised when the tutorial document cannot be read or parsed."""

    def __init__(self, path: str, reason: str, code: str = "TUTORIAL_UNAVAILABLE") -> None:
        super().__init__(
            message=f"Tutorial document at '{path}' is unavailable: {reason}",
            code=code
        )
        self.path = path
        self.reason = reason


class TutorialNotFoundError(TutorialUnavailableError):
    """Raised when the tutorial document does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(path, reason="not found", code="TUTORIAL_NOT_FOUND")


class SectionNotFoundError(ApplicationError):
    """Raised when a tutorial section anchor does not exist."""

    def __init__(self, anchor: str) -> None:
        super().__init__(
            message=f"Tutorial section '{anchor}' not found",
            code="SECTION_NOT_FOUND"
        )
        self.anchor = anchor
