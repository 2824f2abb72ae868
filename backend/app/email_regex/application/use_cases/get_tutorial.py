"""Use case for reading the tutorial document."""

from app.email_regex.application.dto.tutorial_dto import (
    SegmentDTO,
    TableOfContentsEntryDTO,
    TutorialDTO,
    TutorialSectionDTO,
)
from app.email_regex.application.exceptions import SectionNotFoundError
from app.email_regex.application.interfaces.tutorial_source import TutorialSource


class GetTutorialUseCase:
    """Application service exposing the tutorial document.

    Reads the document through a TutorialSource and maps it to DTOs,
    either whole or one section at a time.
    """

    def __init__(self, source: TutorialSource) -> None:
        """Initialize the use case with its document source.

        Args:
            source: Where the tutorial Markdown is loaded from.
        """
        self._source = source

    def execute(self) -> TutorialDTO:
        """Return the full parsed tutorial.

        Raises:
            TutorialUnavailableError: If the document cannot be read or parsed.
        """
        document = self._source.load()
        return TutorialDTO(
            title=document.title,
            summary=document.summary,
            summary_segments=[
                SegmentDTO.model_validate(segment)
                for segment in document.summary_segments()
            ],
            summary_code_blocks=list(document.summary_code_blocks),
            table_of_contents=[
                TableOfContentsEntryDTO(title=title, anchor=anchor)
                for title, anchor in document.table_of_contents()
            ],
            sections=[
                TutorialSectionDTO.model_validate(section)
                for section in document.sections
            ],
        )

    def get_section(self, anchor: str) -> TutorialSectionDTO:
        """Return the section with the given anchor.

        Args:
            anchor: Section anchor, e.g. 'quantifiers'.

        Raises:
            SectionNotFoundError: If no section has that anchor.
            TutorialUnavailableError: If the document cannot be read or parsed.
        """
        section = self._source.load().get_section(anchor.lower())
        if section is None:
            raise SectionNotFoundError(anchor)
        return TutorialSectionDTO.model_validate(section)

    def raw_markdown(self) -> str:
        return self._source.raw_markdown()
