"""Use cases for checking strings against the email pattern.

Implements validation by delegating to the EmailPatternMatcher domain
service and the EmailAddress value object:
- ValidateEmailUseCase: one string, never raises on a non-match
- ValidateEmailBatchUseCase: several strings, bounded batch size
- ParseEmailUseCase: split a matching address into its parts
"""

from app.core.logging import get_logger
from app.email_regex.application.dto.email_dto import (
    BatchValidationDTO,
    EmailPartsDTO,
    EmailValidationDTO,
)
from app.email_regex.application.exceptions import (
    BatchTooLargeError,
    EmptyBatchError,
    InvalidEmailError,
)
from app.email_regex.domain.services.pattern_matcher import EmailPatternMatcher
from app.email_regex.domain.value_objects.email_address import EmailAddress

logger = get_logger(__name__)


class ValidateEmailUseCase:
    """Application service checking a single string against the pattern.

    A non-match is the expected negative result, not an error, so this
    use case always returns a result DTO.
    """

    def __init__(self, matcher: EmailPatternMatcher | None = None) -> None:
        """Initialize the use case.

        Args:
            matcher: Pattern matcher to use (defaults to the email pattern).
        """
        self._matcher = matcher or EmailPatternMatcher()

    def execute(self, email: str) -> EmailValidationDTO:
        """Execute the validation.

        Args:
            email: Arbitrary input text.

        Returns:
            EmailValidationDTO with captures on a match, or the failure
            reason on a non-match.
        """
        match = self._matcher.match(email)
        if match is not None:
            logger.debug(f"Matched {email!r}")
            return EmailValidationDTO(
                email=email,
                is_valid=True,
                local_part=match.local_part,
                domain=match.domain,
                top_level_domain=match.top_level_domain,
            )

        reason = self._matcher.diagnose(email)
        logger.debug(f"Rejected {email!r}: {reason}")
        return EmailValidationDTO(
            email=email,
            is_valid=False,
            reason=reason,
            message=reason.message if reason else None,
        )


class ValidateEmailBatchUseCase:
    """Application service checking a list of strings against the pattern."""

    def __init__(
        self,
        max_batch_size: int,
        matcher: EmailPatternMatcher | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            max_batch_size: Largest number of addresses accepted per call.
            matcher: Pattern matcher to use (defaults to the email pattern).
        """
        self._max_batch_size = max_batch_size
        self._single = ValidateEmailUseCase(matcher)

    def execute(self, emails: list[str]) -> BatchValidationDTO:
        """Execute the batch validation.

        Args:
            emails: Input strings, checked independently.

        Returns:
            BatchValidationDTO with one result per input, in input order.

        Raises:
            EmptyBatchError: If no addresses were given.
            BatchTooLargeError: If more than max_batch_size were given.
        """
        if not emails:
            raise EmptyBatchError()
        if len(emails) > self._max_batch_size:
            raise BatchTooLargeError(len(emails), self._max_batch_size)

        results = [self._single.execute(email) for email in emails]
        valid_count = sum(1 for r in results if r.is_valid)

        logger.info(f"Validated batch of {len(results)}: {valid_count} valid")
        return BatchValidationDTO(
            results=results,
            total=len(results),
            valid_count=valid_count,
            invalid_count=len(results) - valid_count,
        )


class ParseEmailUseCase:
    """Application service splitting a matching address into its parts."""

    def execute(self, email: str) -> EmailPartsDTO:
        """Execute the parse.

        Args:
            email: Address to split.

        Returns:
            EmailPartsDTO with the captured components.

        Raises:
            InvalidEmailError: If the address does not match the pattern.
        """
        try:
            address = EmailAddress(email)
        except ValueError as e:
            reason = EmailPatternMatcher().diagnose(email)
            raise InvalidEmailError(email, reason.message if reason else None) from e

        return EmailPartsDTO(
            email=address.value,
            normalized=address.normalized().value,
            local_part=address.local_part,
            domain=address.domain,
            top_level_domain=address.top_level_domain,
            hostname=address.hostname,
        )
