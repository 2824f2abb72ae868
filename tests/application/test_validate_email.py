"""Unit tests for the email validation use cases."""

import pytest

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
from app.email_regex.domain.services.pattern_matcher import MatchFailure


@pytest.fixture
def validate_use_case() -> ValidateEmailUseCase:
    """Create the ValidateEmailUseCase with the default matcher."""
    return ValidateEmailUseCase()


@pytest.fixture
def batch_use_case() -> ValidateEmailBatchUseCase:
    """Create the ValidateEmailBatchUseCase with a small limit."""
    return ValidateEmailBatchUseCase(max_batch_size=3)


class TestValidateEmailUseCase:
    """Tests for ValidateEmailUseCase."""

    def test_execute_valid_address(self, validate_use_case: ValidateEmailUseCase) -> None:
        """Test that a match returns the three captures."""
        result = validate_use_case.execute("rene.malingre@gmail.com")

        assert result.is_valid is True
        assert result.local_part == "rene.malingre"
        assert result.domain == "gmail"
        assert result.top_level_domain == "com"
        assert result.reason is None
        assert result.message is None

    def test_execute_invalid_address(self, validate_use_case: ValidateEmailUseCase) -> None:
        """Test that a non-match is reported, not raised."""
        result = validate_use_case.execute("@example.com")

        assert result.is_valid is False
        assert result.reason == MatchFailure.EMPTY_LOCAL_PART
        assert result.message == MatchFailure.EMPTY_LOCAL_PART.message
        assert result.local_part is None

    def test_execute_preserves_input(self, validate_use_case: ValidateEmailUseCase) -> None:
        result = validate_use_case.execute("RENE.MALINGRE@GMAIL.COM")

        assert result.email == "RENE.MALINGRE@GMAIL.COM"
        assert result.is_valid is True


class TestValidateEmailBatchUseCase:
    """Tests for ValidateEmailBatchUseCase."""

    def test_execute_keeps_order_and_counts(self, batch_use_case: ValidateEmailBatchUseCase) -> None:
        """Test that results follow input order and counts add up."""
        emails = ["rene.malingre@gmail.com", "not-an-email", "rene@bootcamp.example.com.au"]

        result = batch_use_case.execute(emails)

        assert [r.email for r in result.results] == emails
        assert [r.is_valid for r in result.results] == [True, False, True]
        assert result.total == 3
        assert result.valid_count == 2
        assert result.invalid_count == 1

    def test_execute_empty_batch_raises(self, batch_use_case: ValidateEmailBatchUseCase) -> None:
        with pytest.raises(EmptyBatchError) as exc_info:
            batch_use_case.execute([])

        assert exc_info.value.code == "EMPTY_BATCH"

    def test_execute_too_large_raises(self, batch_use_case: ValidateEmailBatchUseCase) -> None:
        with pytest.raises(BatchTooLargeError) as exc_info:
            batch_use_case.execute(["a@b.com"] * 4)

        assert exc_info.value.size == 4
        assert exc_info.value.max_size == 3

    def test_execute_at_limit_succeeds(self, batch_use_case: ValidateEmailBatchUseCase) -> None:
        result = batch_use_case.execute(["a@b.com"] * 3)

        assert result.valid_count == 3


class TestParseEmailUseCase:
    """Tests for ParseEmailUseCase."""

    def test_execute_returns_parts(self) -> None:
        result = ParseEmailUseCase().execute("RENE.MALINGRE@Bootcamp.Example.com.au")

        assert result.email == "RENE.MALINGRE@Bootcamp.Example.com.au"
        assert result.normalized == "rene.malingre@bootcamp.example.com.au"
        assert result.local_part == "RENE.MALINGRE"
        assert result.domain == "Bootcamp.Example.com"
        assert result.top_level_domain == "au"
        assert result.hostname == "Bootcamp.Example.com.au"

    def test_execute_invalid_raises(self) -> None:
        with pytest.raises(InvalidEmailError) as exc_info:
            ParseEmailUseCase().execute("rene@gmail.c")

        assert exc_info.value.email == "rene@gmail.c"
        assert exc_info.value.reason == MatchFailure.INVALID_TOP_LEVEL_DOMAIN.message
        assert exc_info.value.code == "INVALID_EMAIL"
