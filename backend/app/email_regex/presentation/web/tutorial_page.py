"""Server-rendered tutorial page.

Renders the tutorial with a table of contents and an inline address
checker that submits back to the same page.
"""

import os
import re
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from markupsafe import Markup, escape

from app.email_regex.application.dto.email_dto import EmailValidationDTO
from app.email_regex.application.dto.tutorial_dto import TutorialDTO
from app.email_regex.application.exceptions import TutorialUnavailableError
from app.email_regex.application.use_cases.explain_pattern import GetPatternUseCase
from app.email_regex.application.use_cases.get_tutorial import GetTutorialUseCase
from app.email_regex.application.use_cases.validate_email import ValidateEmailUseCase
from app.email_regex.infrastructure.content.tutorial_loader import (
    FileTutorialLoader,
    get_tutorial_loader,
)

router = APIRouter()

# Templates directory - relative to the presentation package
_TEMPLATES_DIR = os.path.join(
    os.path.dirname(os.path.dirname(__file__)),  # presentation/
    "templates",
)
templates = Jinja2Templates(directory=_TEMPLATES_DIR)

_INLINE_CODE = re.compile(r"`([^`]+)`")


def inline_code(text: str) -> Markup:
    """Escape prose and turn its `backtick` spans into <code> elements."""
    parts: list[Markup] = []
    last = 0
    for match in _INLINE_CODE.finditer(text):
        parts.append(escape(text[last : match.start()]))
        parts.append(Markup("<code>{}</code>").format(match.group(1)))
        last = match.end()
    parts.append(escape(text[last:]))
    return Markup("").join(parts)


templates.env.filters["inline_code"] = inline_code


@router.get("/", response_class=HTMLResponse)
async def tutorial_page(
    request: Request,
    email: Annotated[Optional[str], Query(description="Address to check inline")] = None,
    loader: FileTutorialLoader = Depends(get_tutorial_loader),
) -> HTMLResponse:
    """Render the tutorial page.

    The page displays:
    - The tutorial title, summary and table of contents
    - Every section with its anchor
    - An address checker showing the result for ?email=

    Args:
        request: FastAPI request object.
        email: Optional address to check.
        loader: Tutorial source (injected).

    Returns:
        Rendered tutorial HTML page.
    """
    tutorial: Optional[TutorialDTO] = None
    error_message: Optional[str] = None
    try:
        tutorial = GetTutorialUseCase(loader).execute()
    except TutorialUnavailableError as e:
        error_message = e.message

    result: Optional[EmailValidationDTO] = None
    if email is not None:
        result = ValidateEmailUseCase().execute(email)

    return templates.TemplateResponse(
        request,
        "tutorial.html",
        {
            "tutorial": tutorial,
            "pattern": GetPatternUseCase().execute(),
            "email": email,
            "result": result,
            "error_message": error_message,
        },
    )
