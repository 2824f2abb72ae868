"""Tutorial source interface for loading the tutorial document."""

from abc import ABC, abstractmethod

from app.email_regex.domain.tutorial import TutorialDocument


class TutorialSource(ABC):
    """Abstract base class for tutorial document sources.

    Implementations decide where the Markdown lives; use cases only see
    the parsed TutorialDocument.
    """

    @abstractmethod
    def load(self) -> TutorialDocument:
        """Load and parse the tutorial.

        Returns:
            The parsed tutorial document.

        Raises:
            TutorialUnavailableError: If the document cannot be read or parsed.
        """

    @abstractmethod
    def raw_markdown(self) -> str:
        """Return the unparsed Markdown source."""
