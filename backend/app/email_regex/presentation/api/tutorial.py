"""Tutorial document API endpoints.

Implements read access to the tutorial:
- GET /api/tutorial - Parsed document with table of contents
- GET /api/tutorial/sections/{anchor} - One section
- GET /api/tutorial/markdown - Raw Markdown source
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status
from fastapi.responses import PlainTextResponse

from app.email_regex.application.dto.tutorial_dto import TutorialDTO, TutorialSectionDTO
from app.email_regex.application.exceptions import SectionNotFoundError, TutorialUnavailableError
from app.email_regex.application.use_cases.get_tutorial import GetTutorialUseCase
from app.email_regex.infrastructure.content.tutorial_loader import (
    FileTutorialLoader,
    get_tutorial_loader,
)

router = APIRouter()


def _tutorial_unavailable(e: TutorialUnavailableError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail=e.message,
    )


@router.get("/tutorial", response_model=TutorialDTO)
async def get_tutorial(
    loader: FileTutorialLoader = Depends(get_tutorial_loader),
) -> TutorialDTO:
    """Get the parsed tutorial document.

    Args:
        loader: Tutorial source (injected).

    Returns:
        TutorialDTO with title, summary, table of contents and sections.

    Raises:
        HTTPException: 503 if the document cannot be read or parsed.
    """
    try:
        return GetTutorialUseCase(loader).execute()
    except TutorialUnavailableError as e:
        raise _tutorial_unavailable(e) from e


@router.get("/tutorial/sections/{anchor}", response_model=TutorialSectionDTO)
async def get_tutorial_section(
    anchor: Annotated[str, Path(description="Section anchor, e.g. 'quantifiers'")],
    loader: FileTutorialLoader = Depends(get_tutorial_loader),
) -> TutorialSectionDTO:
    """Get one tutorial section by its anchor.

    Args:
        anchor: The section anchor used by table of contents links.
        loader: Tutorial source (injected).

    Returns:
        TutorialSectionDTO for the section.

    Raises:
        HTTPException: 404 if no section has that anchor.
        HTTPException: 503 if the document cannot be read or parsed.
    """
    try:
        return GetTutorialUseCase(loader).get_section(anchor)
    except SectionNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        ) from e
    except TutorialUnavailableError as e:
        raise _tutorial_unavailable(e) from e


@router.get("/tutorial/markdown", response_class=PlainTextResponse)
async def get_tutorial_markdown(
    loader: FileTutorialLoader = Depends(get_tutorial_loader),
) -> PlainTextResponse:
    """Get the tutorial's raw Markdown source.

    Raises:
        HTTPException: 503 if the document cannot be read or parsed.
    """
    try:
        markdown = GetTutorialUseCase(loader).raw_markdown()
    except TutorialUnavailableError as e:
        raise _tutorial_unavailable(e) from e
    return PlainTextResponse(markdown, media_type="text/markdown; charset=utf-8")
