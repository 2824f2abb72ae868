"""EmailAddress value object for addresses accepted by the email pattern."""

from dataclasses import dataclass, field
from typing import Self

from app.email_regex.domain.services.pattern_matcher import EmailMatch, EmailPatternMatcher

_MATCHER = EmailPatternMatcher()


@dataclass(frozen=True)
class EmailAddress:
    """Immutable value object representing a pattern-validated email address.

    Attributes:
        value: The validated email address string, as given.
    """

    value: str
    _match: EmailMatch = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate the address against the pattern after initialization."""
        match = _MATCHER.match(self.value)
        if match is None:
            reason = _MATCHER.diagnose(self.value)
            detail = f" ({reason.message})" if reason else ""
            raise ValueError(f"Invalid email address: {self.value!r}{detail}")
        object.__setattr__(self, "_match", match)

    @property
    def local_part(self) -> str:
        return self._match.local_part

    @property
    def domain(self) -> str:
        """Domain name including subdomains, without the top-level domain."""
        return self._match.domain

    @property
    def top_level_domain(self) -> str:
        return self._match.top_level_domain

    @property
    def hostname(self) -> str:
        return self._match.hostname

    def normalized(self) -> Self:
        """Return a lowercase copy of this address.

        Matching ignores case, so the lowercase form is always valid too.
        """
        return type(self)(self.value.lower())

    def __str__(self) -> str:
        return self.value
