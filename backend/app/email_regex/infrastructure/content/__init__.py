# Tutorial document adapters

from app.email_regex.infrastructure.content.tutorial_loader import (
    DEFAULT_TUTORIAL_PATH,
    FileTutorialLoader,
    get_tutorial_loader,
)

__all__ = [
    "DEFAULT_TUTORIAL_PATH",
    "FileTutorialLoader",
    "get_tutorial_loader",
]
