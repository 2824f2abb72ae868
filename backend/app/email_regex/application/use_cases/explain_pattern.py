"""Use cases describing the email pattern and the regex syntax it uses."""

from app.email_regex.application.dto.pattern_dto import (
    CaptureGroupDTO,
    PatternComponentDTO,
    PatternDTO,
    SyntaxCategoryDTO,
    SyntaxReferenceDTO,
)
from app.email_regex.application.exceptions import UnknownSyntaxCategoryError
from app.email_regex.domain.services.pattern_matcher import EMAIL_PATTERN_SOURCE
from app.email_regex.domain.syntax_reference import (
    EMAIL_PATTERN_BREAKDOWN,
    EMAIL_PATTERN_FLAGS,
    REGEX_SYNTAX,
    lookup,
)

_CAPTURE_GROUPS = (
    CaptureGroupDTO(index=1, name="local_part", pattern="[a-z0-9_.-]+"),
    CaptureGroupDTO(index=2, name="domain", pattern="[\\da-z.-]+"),
    CaptureGroupDTO(index=3, name="top_level_domain", pattern="[a-z.]{2,6}"),
)


class GetPatternUseCase:
    """Application service returning the email pattern and its breakdown."""

    def execute(self) -> PatternDTO:
        return PatternDTO(
            pattern=EMAIL_PATTERN_SOURCE,
            flags=dict(EMAIL_PATTERN_FLAGS),
            groups=list(_CAPTURE_GROUPS),
            components=[
                PatternComponentDTO(
                    token=c.token,
                    category=c.category,
                    description=c.description,
                )
                for c in EMAIL_PATTERN_BREAKDOWN
            ],
        )


class GetSyntaxReferenceUseCase:
    """Application service returning the regex syntax reference."""

    def execute(self) -> SyntaxReferenceDTO:
        """Return every category, in tutorial order."""
        return SyntaxReferenceDTO(
            categories=[
                SyntaxCategoryDTO(category=name, entries=dict(entries))
                for name, entries in REGEX_SYNTAX.items()
            ]
        )

    def execute_for_category(self, category: str) -> SyntaxCategoryDTO:
        """Return one category.

        Args:
            category: Category name, matched case-insensitively.

        Raises:
            UnknownSyntaxCategoryError: If the category does not exist.
        """
        try:
            name, entries = lookup(category)
        except KeyError as e:
            raise UnknownSyntaxCategoryError(category) from e
        return SyntaxCategoryDTO(category=name, entries=dict(entries))
