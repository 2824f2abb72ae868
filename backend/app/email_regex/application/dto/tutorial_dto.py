"""Data Transfer Objects for the tutorial document."""

from pydantic import BaseModel, ConfigDict, Field

from app.email_regex.domain.tutorial import SegmentKind


class TableOfContentsEntryDTO(BaseModel):
    """A table of contents entry."""

    title: str = Field(description="Section heading")
    anchor: str = Field(description="Anchor the entry links to")


class SegmentDTO(BaseModel):
    """A run of prose or one fenced code block."""

    model_config = ConfigDict(from_attributes=True)

    kind: SegmentKind = Field(description="'text' or 'code'")
    content: str = Field(description="Markdown prose, or the code block contents")


class TutorialSectionDTO(BaseModel):
    """A headed section of the tutorial."""

    model_config = ConfigDict(from_attributes=True)

    level: int = Field(ge=1, le=6, description="Heading depth")
    title: str = Field(description="Section heading")
    anchor: str = Field(description="Section anchor")
    body: str = Field(description="Raw Markdown body")
    code_blocks: list[str] = Field(default_factory=list, description="Fenced code block contents")
    segments: list[SegmentDTO] = Field(default_factory=list, description="Body split into prose and code")


class TutorialDTO(BaseModel):
    """The parsed tutorial document."""

    title: str = Field(description="Document title")
    summary: str = Field(description="Text before the first section")
    summary_segments: list[SegmentDTO] = Field(default_factory=list, description="Summary split into prose and code")
    summary_code_blocks: list[str] = Field(default_factory=list, description="Code blocks in the summary")
    table_of_contents: list[TableOfContentsEntryDTO] = Field(default_factory=list)
    sections: list[TutorialSectionDTO] = Field(default_factory=list)
