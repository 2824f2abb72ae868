"""Tests for FileTutorialLoader and the packaged tutorial document."""

from pathlib import Path

import pytest

from app.email_regex.application.exceptions import (
    TutorialNotFoundError,
    TutorialUnavailableError,
)
from app.email_regex.domain.services.pattern_matcher import EMAIL_PATTERN_SOURCE
from app.email_regex.infrastructure.content.tutorial_loader import (
    DEFAULT_TUTORIAL_PATH,
    FileTutorialLoader,
)


@pytest.fixture
def loader() -> FileTutorialLoader:
    """Create a loader for the packaged tutorial."""
    return FileTutorialLoader()


class TestFileTutorialLoader:
    """Tests for FileTutorialLoader."""

    def test_defaults_to_packaged_document(self, loader: FileTutorialLoader) -> None:
        assert loader.path == DEFAULT_TUTORIAL_PATH
        assert Path(DEFAULT_TUTORIAL_PATH).is_file()

    def test_load_caches_document(self, loader: FileTutorialLoader) -> None:
        assert loader.load() is loader.load()

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        loader = FileTutorialLoader(str(tmp_path / "missing.md"))

        with pytest.raises(TutorialNotFoundError) as exc_info:
            loader.load()

        assert exc_info.value.code == "TUTORIAL_NOT_FOUND"

    def test_missing_file_is_unavailable(self, tmp_path: Path) -> None:
        with pytest.raises(TutorialUnavailableError):
            FileTutorialLoader(str(tmp_path / "missing.md")).load()

    def test_untitled_document_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "untitled.md"
        path.write_text("## Part\n\nNo title heading.\n", encoding="utf-8")

        with pytest.raises(TutorialUnavailableError) as exc_info:
            FileTutorialLoader(str(path)).load()

        assert exc_info.value.code == "TUTORIAL_UNAVAILABLE"
        assert "level-1" in exc_info.value.reason

    def test_directory_path_raises(self, tmp_path: Path) -> None:
        with pytest.raises(TutorialUnavailableError) as exc_info:
            FileTutorialLoader(str(tmp_path)).load()

        assert exc_info.value.code == "TUTORIAL_UNAVAILABLE"

    def test_non_utf8_file_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "latin1.md"
        path.write_bytes("# Caf\xe9\n".encode("latin-1"))

        with pytest.raises(TutorialUnavailableError) as exc_info:
            FileTutorialLoader(str(path)).raw_markdown()

        assert exc_info.value.reason == "not valid UTF-8"

    def test_custom_path(self, tmp_path: Path) -> None:
        path = tmp_path / "custom.md"
        path.write_text("# Custom\n\nIntro.\n\n## Part\n\nBody.\n", encoding="utf-8")

        document = FileTutorialLoader(str(path)).load()

        assert document.title == "Custom"
        assert document.table_of_contents() == [("Part", "part")]


class TestPackagedTutorial:
    """Content checks for the shipped tutorial document."""

    def test_has_title_and_summary_section(self, loader: FileTutorialLoader) -> None:
        document = loader.load()

        assert "Email" in document.title
        assert document.get_section("summary") is not None
        assert document.get_section("table-of-contents") is not None

    def test_table_of_contents_links_resolve(self, loader: FileTutorialLoader) -> None:
        document = loader.load()
        anchors = {anchor for _, anchor in document.table_of_contents()}

        targets = document.link_targets()

        assert targets
        assert set(targets) <= anchors

    def test_quotes_pattern_verbatim(self, loader: FileTutorialLoader) -> None:
        assert EMAIL_PATTERN_SOURCE in loader.load().code_blocks()

    def test_quotes_rfc_5322_example(self, loader: FileTutorialLoader) -> None:
        blocks = loader.load().code_blocks()

        assert any("@bootcamp.[127.0.0.1].com.au" in block for block in blocks)

    @pytest.mark.parametrize(
        "anchor",
        [
            "anchors",
            "quantifiers",
            "character-classes",
            "flags",
            "grouping-and-capturing",
            "bracket-expressions",
            "greedy-and-lazy-match",
            "boundaries",
            "back-references",
            "look-ahead-and-look-behind",
        ],
    )
    def test_covers_regex_components(self, loader: FileTutorialLoader, anchor: str) -> None:
        section = loader.load().get_section(anchor)

        assert section is not None
        assert section.level == 3
