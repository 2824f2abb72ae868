"""Unit tests for GetTutorialUseCase."""

from unittest.mock import MagicMock

import pytest

from app.email_regex.application.exceptions import (
    SectionNotFoundError,
    TutorialNotFoundError,
    TutorialUnavailableError,
)
from app.email_regex.application.use_cases.get_tutorial import GetTutorialUseCase
from app.email_regex.domain.tutorial import TutorialDocument, parse_tutorial

MARKDOWN = """\
# Regex Tutorial

Intro.

## Table of Contents

- [Anchors](#anchors)

## Anchors

Use `^` and `$`.

```
^...$
```
"""


@pytest.fixture
def document() -> TutorialDocument:
    """Create a parsed sample tutorial."""
    return parse_tutorial(MARKDOWN)


@pytest.fixture
def mock_source(document: TutorialDocument) -> MagicMock:
    """Create a mock tutorial source."""
    source = MagicMock()
    source.load.return_value = document
    source.raw_markdown.return_value = MARKDOWN
    return source


class TestGetTutorialUseCase:
    """Tests for GetTutorialUseCase."""

    def test_execute_maps_document(self, mock_source: MagicMock) -> None:
        result = GetTutorialUseCase(mock_source).execute()

        assert result.title == "Regex Tutorial"
        assert result.summary == "Intro."
        assert [(e.title, e.anchor) for e in result.table_of_contents] == [
            ("Table of Contents", "table-of-contents"),
            ("Anchors", "anchors"),
        ]
        assert result.sections[1].code_blocks == ["^...$"]
        assert [(s.kind, s.content) for s in result.sections[1].segments] == [
            ("text", "Use `^` and `$`."),
            ("code", "^...$"),
        ]
        assert result.summary_segments[0].content == "Intro."
        assert result.summary_code_blocks == []
        mock_source.load.assert_called_once()

    def test_get_section(self, mock_source: MagicMock) -> None:
        result = GetTutorialUseCase(mock_source).get_section("Anchors")

        assert result.anchor == "anchors"
        assert result.level == 2
        assert "Use `^` and `$`." in result.body

    def test_get_section_not_found(self, mock_source: MagicMock) -> None:
        with pytest.raises(SectionNotFoundError) as exc_info:
            GetTutorialUseCase(mock_source).get_section("flags")

        assert exc_info.value.anchor == "flags"

    def test_missing_document_propagates(self, mock_source: MagicMock) -> None:
        mock_source.load.side_effect = TutorialNotFoundError("/nowhere.md")

        with pytest.raises(TutorialNotFoundError):
            GetTutorialUseCase(mock_source).execute()

    def test_unparseable_document_propagates(self, mock_source: MagicMock) -> None:
        mock_source.load.side_effect = TutorialUnavailableError("/untitled.md", "no title")

        with pytest.raises(TutorialUnavailableError) as exc_info:
            GetTutorialUseCase(mock_source).get_section("anchors")

        assert exc_info.value.reason == "no title"

    def test_raw_markdown(self, mock_source: MagicMock) -> None:
        assert GetTutorialUseCase(mock_source).raw_markdown() == MARKDOWN
