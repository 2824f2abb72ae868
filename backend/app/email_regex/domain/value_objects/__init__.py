"""Domain value objects for the email regex guide.

This module exports immutable value objects used throughout the domain layer:
- EmailAddress: Addresses accepted by the illustrative email pattern
"""

from app.email_regex.domain.value_objects.email_address import EmailAddress

__all__ = ["EmailAddress"]
