"""File-backed tutorial source.

Reads the tutorial Markdown from disk, parses it once and serves the
cached document afterwards.
"""

import os
from typing import Optional

from app.core.config import get_settings
from app.core.logging import get_logger
from app.email_regex.application.exceptions import (
    TutorialNotFoundError,
    TutorialUnavailableError,
)
from app.email_regex.application.interfaces.tutorial_source import TutorialSource
from app.email_regex.domain.tutorial import TutorialDocument, parse_tutorial

logger = get_logger(__name__)

# Packaged copy - relative to the email_regex package
DEFAULT_TUTORIAL_PATH = os.path.join(
    os.path.dirname(os.path.dirname(os.path.dirname(__file__))),  # email_regex/
    "content",
    "email_regex_tutorial.md",
)


class FileTutorialLoader(TutorialSource):
    """TutorialSource reading a Markdown file from the filesystem."""

    def __init__(self, path: Optional[str] = None) -> None:
        """Initialize the loader.

        Args:
            path: Markdown file to read (defaults to the packaged tutorial).
        """
        self._path = path or DEFAULT_TUTORIAL_PATH
        self._markdown: Optional[str] = None
        self._document: Optional[TutorialDocument] = None

    @property
    def path(self) -> str:
        return self._path

    def raw_markdown(self) -> str:
        if self._markdown is None:
            try:
                with open(self._path, encoding="utf-8") as f:
                    self._markdown = f.read()
            except FileNotFoundError as e:
                raise TutorialNotFoundError(self._path) from e
            except OSError as e:
                raise TutorialUnavailableError(self._path, e.strerror or str(e)) from e
            except UnicodeDecodeError as e:
                raise TutorialUnavailableError(self._path, "not valid UTF-8") from e
        return self._markdown

    def load(self) -> TutorialDocument:
        if self._document is None:
            markdown = self.raw_markdown()
            try:
                self._document = parse_tutorial(markdown)
            except ValueError as e:
                raise TutorialUnavailableError(self._path, str(e)) from e
            logger.info(
                f"Loaded tutorial '{self._document.title}' "
                f"({len(self._document.sections)} sections) from {self._path}"
            )
        return self._document


_default_loader: Optional[FileTutorialLoader] = None


def get_tutorial_loader() -> FileTutorialLoader:
    """Get the shared loader configured from settings.

    Used as a FastAPI dependency so routers can be tested with an override.
    """
    global _default_loader
    if _default_loader is None:
        _default_loader = FileTutorialLoader(get_settings().tutorial_path)
    return _default_loader
