"""Domain services implementing the pattern-matching rules.

These are pure domain services with no infrastructure dependencies:
- EmailPatternMatcher: Whole-string, case-insensitive email pattern evaluation
"""

from app.email_regex.domain.services.pattern_matcher import (
    EMAIL_PATTERN,
    EMAIL_PATTERN_SOURCE,
    EmailMatch,
    EmailPatternMatcher,
    MatchFailure,
)

__all__ = [
    "EMAIL_PATTERN",
    "EMAIL_PATTERN_SOURCE",
    "EmailMatch",
    "EmailPatternMatcher",
    "MatchFailure",
]
