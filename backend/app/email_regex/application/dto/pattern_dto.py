"""Data Transfer Objects describing the email pattern and regex syntax."""

from pydantic import BaseModel, Field


class PatternComponentDTO(BaseModel):
    """One token of the email pattern."""

    token: str = Field(description="Pattern text, e.g. '{2,6}'")
    category: str = Field(description="Syntax category the token belongs to")
    description: str = Field(description="What the token matches")


class CaptureGroupDTO(BaseModel):
    """A capturing group of the email pattern."""

    index: int = Field(ge=1, description="Group number")
    name: str = Field(description="What the group captures")
    pattern: str = Field(description="Group sub-pattern")


class PatternDTO(BaseModel):
    """The email pattern with its flags, groups and component breakdown."""

    pattern: str = Field(description="Pattern source text")
    flags: dict[str, str] = Field(description="Flags applied when matching")
    groups: list[CaptureGroupDTO] = Field(default_factory=list, description="Capturing groups")
    components: list[PatternComponentDTO] = Field(
        default_factory=list,
        description="Ordered tokens that reassemble the pattern"
    )


class SyntaxCategoryDTO(BaseModel):
    """One category of the regex syntax reference."""

    category: str = Field(description="Category name, e.g. 'Anchors'")
    entries: dict[str, str] = Field(description="Token to description")


class SyntaxReferenceDTO(BaseModel):
    """The full regex syntax reference."""

    categories: list[SyntaxCategoryDTO] = Field(default_factory=list)
