"""Pattern explanation API endpoints.

Implements read-only views of the email pattern:
- GET /api/pattern - Pattern text, flags, capture groups and breakdown
- GET /api/pattern/syntax - Regex syntax reference
- GET /api/pattern/syntax/{category} - One syntax category
"""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Path, status

from app.email_regex.application.dto.pattern_dto import (
    PatternDTO,
    SyntaxCategoryDTO,
    SyntaxReferenceDTO,
)
from app.email_regex.application.exceptions import UnknownSyntaxCategoryError
from app.email_regex.application.use_cases.explain_pattern import (
    GetPatternUseCase,
    GetSyntaxReferenceUseCase,
)

router = APIRouter()


@router.get("/pattern", response_model=PatternDTO)
async def get_pattern() -> PatternDTO:
    """Get the email pattern with its component-by-component breakdown."""
    return GetPatternUseCase().execute()


@router.get("/pattern/syntax", response_model=SyntaxReferenceDTO)
async def get_syntax_reference() -> SyntaxReferenceDTO:
    """Get the regex syntax reference covered by the tutorial."""
    return GetSyntaxReferenceUseCase().execute()


@router.get("/pattern/syntax/{category}", response_model=SyntaxCategoryDTO)
async def get_syntax_category(
    category: Annotated[str, Path(description="Category name, e.g. 'anchors'")],
) -> SyntaxCategoryDTO:
    """Get one category of the regex syntax reference.

    Args:
        category: Category name (case-insensitive).

    Returns:
        SyntaxCategoryDTO with the category's tokens.

    Raises:
        HTTPException: 404 if the category does not exist.
    """
    try:
        return GetSyntaxReferenceUseCase().execute_for_category(category)
    except UnknownSyntaxCategoryError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        ) from e
