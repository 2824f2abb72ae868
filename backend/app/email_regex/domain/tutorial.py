"""Tutorial document model and Markdown structure parsing.

The tutorial is plain Markdown. Only its structure is interpreted here:
ATX headings (``#`` through ``######``), fenced code blocks, and the
GitHub-style anchors that table of contents links point at.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

_HEADING = re.compile(r"^(#{1,6})\s+(.+?)(?:\s+#+)?\s*$")
_FENCE = re.compile(r"^\s*(```|~~~)")
_ANCHOR_STRIP = re.compile(r"[^\w\- ]")


def slugify(heading: str) -> str:
    """Convert a heading into its GitHub-style anchor.

    Example: "Look-ahead and Look-behind" -> "look-ahead-and-look-behind"
    """
    text = heading.strip().lower()
    text = text.replace("`", "")
    text = _ANCHOR_STRIP.sub("", text)
    return text.replace(" ", "-")


class SegmentKind(str, Enum):
    """Kind of a run of lines within a section body."""

    TEXT = "text"
    CODE = "code"


@dataclass(frozen=True)
class BodySegment:
    """A run of prose, or the contents of one fenced code block."""

    kind: SegmentKind
    content: str


def _append_segment(segments: list[BodySegment], kind: SegmentKind, lines: list[str]) -> None:
    if kind is SegmentKind.CODE:
        segments.append(BodySegment(kind, "\n".join(lines)))
        return
    text = "\n".join(lines).strip()
    if text:
        segments.append(BodySegment(kind, text))


def split_segments(markdown: str) -> list[BodySegment]:
    """Split Markdown into prose and fenced code segments, in order.

    The fence lines themselves are dropped and blank prose between blocks
    is skipped. A fence that is never closed runs to the end of the text.
    """
    segments: list[BodySegment] = []
    lines: list[str] = []
    fence_marker: Optional[str] = None

    for line in markdown.splitlines():
        fence = _FENCE.match(line)
        if fence and (fence_marker is None or fence.group(1) == fence_marker):
            _append_segment(segments, SegmentKind.CODE if fence_marker else SegmentKind.TEXT, lines)
            lines = []
            fence_marker = None if fence_marker else fence.group(1)
        else:
            lines.append(line)

    _append_segment(segments, SegmentKind.CODE if fence_marker else SegmentKind.TEXT, lines)
    return segments


@dataclass(frozen=True)
class TutorialSection:
    """A headed section of the tutorial.

    Attributes:
        level: Heading depth (2 for ``##``, 3 for ``###``, ...).
        title: Heading text.
        anchor: Unique anchor used by table of contents links.
        body: Raw Markdown between this heading and the next one.
        code_blocks: Contents of the fenced code blocks in the body.
        segments: The body split into prose and code, for rendering.
    """

    level: int
    title: str
    anchor: str
    body: str
    code_blocks: tuple[str, ...] = ()
    segments: tuple[BodySegment, ...] = ()


@dataclass(frozen=True)
class TutorialDocument:
    """Parsed tutorial document.

    Code blocks that appear in the summary, before the first section, are
    kept in ``summary_code_blocks``.
    """

    title: str
    summary: str
    summary_code_blocks: tuple[str, ...] = ()
    sections: tuple[TutorialSection, ...] = field(default_factory=tuple)
    source: str = ""

    def table_of_contents(self) -> list[tuple[str, str]]:
        """Return (title, anchor) pairs for every section below the title."""
        return [(s.title, s.anchor) for s in self.sections if s.level >= 2]

    def get_section(self, anchor: str) -> Optional[TutorialSection]:
        for section in self.sections:
            if section.anchor == anchor:
                return section
        return None

    def code_blocks(self) -> list[str]:
        """All fenced code blocks, in document order."""
        blocks = list(self.summary_code_blocks)
        blocks.extend(block for section in self.sections for block in section.code_blocks)
        return blocks

    def summary_segments(self) -> list[BodySegment]:
        return split_segments(self.summary)

    def link_targets(self) -> list[str]:
        """Anchors referenced by in-document links such as ``[x](#anchor)``."""
        return re.findall(r"\]\(#([^)\s]+)\)", self.source)


class _SectionBuilder:
    """Accumulates the lines of one section while parsing."""

    def __init__(self, level: int, title: str, anchor: str) -> None:
        self.level = level
        self.title = title
        self.anchor = anchor
        self.lines: list[str] = []
        self.code_blocks: list[str] = []

    def build(self) -> TutorialSection:
        body = "\n".join(self.lines).strip()
        return TutorialSection(
            level=self.level,
            title=self.title,
            anchor=self.anchor,
            body=body,
            code_blocks=tuple(self.code_blocks),
            segments=tuple(split_segments(body)),
        )


def _code_block_owner(
    sections: list[_SectionBuilder],
    title: Optional[str],
    summary_code_blocks: list[str],
) -> Optional[list[str]]:
    if sections:
        return sections[-1].code_blocks
    if title is not None:
        return summary_code_blocks
    return None


def parse_tutorial(markdown: str) -> TutorialDocument:
    """Parse the tutorial Markdown into a TutorialDocument.

    The first level-1 heading becomes the title and the text before the
    first section heading becomes the summary. Lines inside fenced code
    blocks are never treated as headings, and a fence that is never closed
    runs to the end of the document. Repeated headings get ``-1``, ``-2``...
    appended to their anchor, as GitHub does.

    Args:
        markdown: Full Markdown source.

    Returns:
        The parsed document.

    Raises:
        ValueError: If the document has no level-1 heading.
    """
    title: Optional[str] = None
    summary_lines: list[str] = []
    summary_code_blocks: list[str] = []
    sections: list[_SectionBuilder] = []
    seen_anchors: dict[str, int] = {}

    in_fence = False
    fence_marker = ""
    fence_lines: list[str] = []

    for line in markdown.splitlines():
        current = sections[-1] if sections else None

        fence = _FENCE.match(line)
        if fence and (not in_fence or fence.group(1) == fence_marker):
            if in_fence:
                owner = _code_block_owner(sections, title, summary_code_blocks)
                if owner is not None:
                    owner.append("\n".join(fence_lines))
                fence_lines = []
            else:
                fence_marker = fence.group(1)
            in_fence = not in_fence
        elif in_fence:
            fence_lines.append(line)
        else:
            heading = _HEADING.match(line)
            if heading:
                level = len(heading.group(1))
                text = heading.group(2)
                if level == 1 and title is None:
                    title = text
                    continue

                anchor = slugify(text)
                count = seen_anchors.get(anchor, 0)
                seen_anchors[anchor] = count + 1
                if count:
                    anchor = f"{anchor}-{count}"

                sections.append(_SectionBuilder(level, text, anchor))
                continue

        if current is not None:
            current.lines.append(line)
        elif title is not None:
            summary_lines.append(line)

    if in_fence:
        owner = _code_block_owner(sections, title, summary_code_blocks)
        if owner is not None:
            owner.append("\n".join(fence_lines))

    if title is None:
        raise ValueError("Tutorial has no level-1 title heading")

    return TutorialDocument(
        title=title,
        summary="\n".join(summary_lines).strip(),
        summary_code_blocks=tuple(summary_code_blocks),
        sections=tuple(builder.build() for builder in sections),
        source=markdown,
    )
