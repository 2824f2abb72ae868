"""Pattern matcher domain service for the illustrative email regex.

Implements the whole-string, case-insensitive evaluation of:

    ^([a-z0-9_.-]+)@([\\da-z.-]+)\\.([a-z.]{2,6})$

Group 1 captures the local part, group 2 the domain name (including any
subdomains) and group 3 the top-level domain. Addresses that are valid
under RFC 5322 but use quoted local parts, comments, domain literals or
non-ASCII characters are rejected on purpose.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

EMAIL_PATTERN_SOURCE = r"^([a-z0-9_.-]+)@([\da-z.-]+)\.([a-z.]{2,6})$"

# re.ASCII keeps \d to [0-9] and stops IGNORECASE folding e.g. U+212A (Kelvin) onto "k"
EMAIL_PATTERN = re.compile(EMAIL_PATTERN_SOURCE, re.IGNORECASE | re.ASCII)

_LOCAL_PART = re.compile(r"[a-z0-9_.-]+", re.IGNORECASE | re.ASCII)
_DOMAIN_CHARS = re.compile(r"[\da-z.-]+", re.IGNORECASE | re.ASCII)
_DOMAIN_PART = re.compile(r"([\da-z.-]+)\.([a-z.]{2,6})", re.IGNORECASE | re.ASCII)


class MatchFailure(str, Enum):
    """Reason an input string does not match the email pattern."""

    EMPTY = "empty"
    MISSING_AT = "missing_at"
    MULTIPLE_AT = "multiple_at"
    EMPTY_LOCAL_PART = "empty_local_part"
    INVALID_LOCAL_PART = "invalid_local_part"
    EMPTY_DOMAIN = "empty_domain"
    MISSING_TLD = "missing_tld"
    INVALID_DOMAIN = "invalid_domain"
    INVALID_TOP_LEVEL_DOMAIN = "invalid_top_level_domain"

    @property
    def message(self) -> str:
        return _FAILURE_MESSAGES[self]


_FAILURE_MESSAGES = {
    MatchFailure.EMPTY: "Address is empty",
    MatchFailure.MISSING_AT: "Address must contain an '@' symbol",
    MatchFailure.MULTIPLE_AT: "Address must contain exactly one '@' symbol",
    MatchFailure.EMPTY_LOCAL_PART: "Local part before '@' is empty",
    MatchFailure.INVALID_LOCAL_PART: (
        "Local part may only contain letters, digits, '_', '.' and '-'"
    ),
    MatchFailure.EMPTY_DOMAIN: "Domain part after '@' is empty",
    MatchFailure.MISSING_TLD: "Domain part must contain a '.' before the top-level domain",
    MatchFailure.INVALID_DOMAIN: (
        "Domain part may only contain letters, digits, '.' and '-'"
    ),
    MatchFailure.INVALID_TOP_LEVEL_DOMAIN: (
        "Domain must end with a '.' followed by a 2-6 character top-level domain"
    ),
}


@dataclass(frozen=True)
class EmailMatch:
    """Captures produced by a successful match.

    Attributes:
        email: The matched input string, unchanged.
        local_part: Capture group 1, the text before '@'.
        domain: Capture group 2, the domain name plus subdomains.
        top_level_domain: Capture group 3, the final label.
    """

    email: str
    local_part: str
    domain: str
    top_level_domain: str

    @property
    def hostname(self) -> str:
        """Full domain part after the '@'."""
        return f"{self.domain}.{self.top_level_domain}"


class EmailPatternMatcher:
    """Domain service evaluating strings against the email pattern.

    Evaluation is pure and stateless, so a single instance can be shared
    freely between callers. The pattern is fixed: the failure reasons
    reported by ``diagnose`` are written against it.
    """

    def match(self, text: str) -> Optional[EmailMatch]:
        """Match the whole of ``text`` against the pattern.

        ``fullmatch`` is used rather than ``match`` because ``$`` also
        matches just before a trailing newline.

        Args:
            text: Arbitrary input string.

        Returns:
            EmailMatch with the three captures, or None on a non-match.
        """
        result = EMAIL_PATTERN.fullmatch(text)
        if result is None:
            return None

        local_part, domain, top_level_domain = result.groups()
        return EmailMatch(
            email=text,
            local_part=local_part,
            domain=domain,
            top_level_domain=top_level_domain,
        )

    def is_match(self, text: str) -> bool:
        return self.match(text) is not None

    def diagnose(self, text: str) -> Optional[MatchFailure]:
        """Explain why ``text`` does not match.

        Rules are checked in order: emptiness, the '@' count, the local
        part, then the domain part. The local and domain parts cannot
        contain '@' themselves, so they are checked independently.

        Args:
            text: Arbitrary input string.

        Returns:
            The first failing rule, or None if the string matches.
        """
        if self.is_match(text):
            return None

        if not text:
            return MatchFailure.EMPTY

        at_count = text.count("@")
        if at_count == 0:
            return MatchFailure.MISSING_AT
        if at_count > 1:
            return MatchFailure.MULTIPLE_AT

        local_part, domain_part = text.split("@")

        if not local_part:
            return MatchFailure.EMPTY_LOCAL_PART
        if not _LOCAL_PART.fullmatch(local_part):
            return MatchFailure.INVALID_LOCAL_PART

        if not domain_part:
            return MatchFailure.EMPTY_DOMAIN
        if "." not in domain_part:
            return MatchFailure.MISSING_TLD
        if not _DOMAIN_CHARS.fullmatch(domain_part):
            return MatchFailure.INVALID_DOMAIN
        if not _DOMAIN_PART.fullmatch(domain_part):
            return MatchFailure.INVALID_TOP_LEVEL_DOMAIN

        # Only reachable if the pattern and the rule set above disagree
        raise AssertionError(f"Undiagnosed non-match for {text!r}")
