# Domain layer - pure pattern-matching rules and tutorial model, no framework dependencies

from app.email_regex.domain.services.pattern_matcher import (
    EMAIL_PATTERN,
    EMAIL_PATTERN_SOURCE,
    EmailMatch,
    EmailPatternMatcher,
    MatchFailure,
)
from app.email_regex.domain.syntax_reference import (
    EMAIL_PATTERN_BREAKDOWN,
    EMAIL_PATTERN_FLAGS,
    REGEX_SYNTAX,
    PatternComponent,
)
from app.email_regex.domain.tutorial import (
    TutorialDocument,
    TutorialSection,
    parse_tutorial,
    slugify,
)
from app.email_regex.domain.value_objects.email_address import EmailAddress

__all__ = [
    # Pattern matching
    "EMAIL_PATTERN",
    "EMAIL_PATTERN_SOURCE",
    "EmailMatch",
    "EmailPatternMatcher",
    "MatchFailure",
    "EmailAddress",
    # Syntax reference
    "REGEX_SYNTAX",
    "PatternComponent",
    "EMAIL_PATTERN_BREAKDOWN",
    "EMAIL_PATTERN_FLAGS",
    # Tutorial document
    "TutorialDocument",
    "TutorialSection",
    "parse_tutorial",
    "slugify",
]
