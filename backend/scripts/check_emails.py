#!/usr/bin/env python3
"""Check email addresses against the tutorial's email pattern.

Run from the backend directory:
    python -m scripts.check_emails rene.malingre@gmail.com @example.com

Or read one address per line from stdin:
    cat addresses.txt | python -m scripts.check_emails

Exits 0 when every address matches, 1 otherwise.
"""

import argparse
import logging
import sys
from typing import Optional, TextIO

# Add parent to path for imports
sys.path.insert(0, ".")

from app.core.logging import setup_logging
from app.email_regex.application.use_cases.validate_email import ValidateEmailUseCase

logger = logging.getLogger(__name__)


def format_result(email: str, is_valid: bool, reason: Optional[str]) -> str:
    verdict = "VALID" if is_valid else f"INVALID ({reason})"
    return f"{verdict:<40} {email}"


def check(emails: list[str], out: TextIO) -> bool:
    """Print one verdict line per address; return True if all are valid."""
    use_case = ValidateEmailUseCase()
    all_valid = True

    for email in emails:
        result = use_case.execute(email)
        reason = result.reason.value if result.reason else None
        print(format_result(email, result.is_valid, reason), file=out)
        all_valid = all_valid and result.is_valid

    return all_valid


def main(argv: Optional[list[str]] = None, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> int:
    parser = argparse.ArgumentParser(description="Check email addresses against the email pattern")
    parser.add_argument("emails", nargs="*", help="Addresses to check (default: read stdin)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    setup_logging(level="DEBUG" if args.verbose else "WARNING")

    emails = args.emails or [line.rstrip("\r\n") for line in stdin if line.strip()]
    if not emails:
        logger.warning("No addresses given")
        return 1

    return 0 if check(emails, stdout) else 1


if __name__ == "__main__":
    sys.exit(main())
