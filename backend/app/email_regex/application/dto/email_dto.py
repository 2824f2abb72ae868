"""Data Transfer Objects for email validation requests and responses.

These DTOs represent the external contract for validation operations
exposed through the API layer. Addresses are plain strings on the way
in, since a non-matching address is a normal result rather than a
request error.
"""

from typing import Optional

from pydantic import BaseModel, Field

from app.email_regex.domain.services.pattern_matcher import MatchFailure


class ValidateEmailRequest(BaseModel):
    """Request payload for validating a single address."""

    email: str = Field(description="Text to check against the email pattern")


class BatchValidateRequest(BaseModel):
    """Request payload for validating several addresses at once."""

    emails: list[str] = Field(description="Texts to check, validated in order")


class EmailValidationDTO(BaseModel):
    """Result of checking one string against the email pattern.

    Captures are only populated when the string matches; reason and
    message are only populated when it does not.
    """

    email: str = Field(description="The input string, unchanged")
    is_valid: bool = Field(description="Whether the whole string matches the pattern")
    local_part: Optional[str] = Field(default=None, description="Capture group 1")
    domain: Optional[str] = Field(default=None, description="Capture group 2, domain name and subdomains")
    top_level_domain: Optional[str] = Field(default=None, description="Capture group 3")
    reason: Optional[MatchFailure] = Field(default=None, description="Machine-readable non-match reason")
    message: Optional[str] = Field(default=None, description="Human-readable non-match reason")


class BatchValidationDTO(BaseModel):
    """Results for a batch of strings, in request order."""

    results: list[EmailValidationDTO] = Field(default_factory=list, description="Per-address results")
    total: int = Field(description="Number of addresses checked")
    valid_count: int = Field(description="Number of matching addresses")
    invalid_count: int = Field(description="Number of non-matching addresses")


class EmailPartsDTO(BaseModel):
    """Components of a matching email address."""

    email: str = Field(description="The address as given")
    normalized: str = Field(description="Lowercase form of the address")
    local_part: str = Field(description="Text before '@'")
    domain: str = Field(description="Domain name including subdomains")
    top_level_domain: str = Field(description="Final label, e.g. 'com'")
    hostname: str = Field(description="Everything after '@'")
