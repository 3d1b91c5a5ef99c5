"""
Submission Form Validation

Field-presence checks and email format check for incoming application forms.

Business Rules:
    - Every field is trimmed; missing fields are treated as empty strings
    - name: required, non-empty after trimming
    - email: required, non-empty after trimming, must match EMAIL_PATTERN
    - mobile, message: optional, default ""
    - name is checked before email (first failure wins)
"""

import re
from dataclasses import dataclass
from typing import Final, Optional

from src.domain.shared.exceptions import SubmissionValidationError

# local@domain.tld, no whitespace anywhere, single "@"
EMAIL_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s]+$")

NAME_REQUIRED_MESSAGE: Final[str] = "Name is required and cannot be empty"
EMAIL_REQUIRED_MESSAGE: Final[str] = "Email is required and cannot be empty"
EMAIL_INVALID_MESSAGE: Final[str] = "Please provide a valid email address"


@dataclass(frozen=True)
class SubmissionForm:
    """Trimmed, validated form fields."""

    name: str
    email: str
    mobile: str = ""
    message: str = ""


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


def is_valid_email(value: str) -> bool:
    """
    Check email against the basic local@domain.tld shape.

    Examples:
        >>> is_valid_email("jane@example.com")
        True
        >>> is_valid_email("not-an-email")
        False
    """
    return EMAIL_PATTERN.match(value) is not None


def validate_submission_form(
    name: Optional[str],
    email: Optional[str],
    mobile: Optional[str] = None,
    message: Optional[str] = None,
) -> SubmissionForm:
    """
    Validate and normalize raw form fields.

    Args:
        name: Applicant name (required)
        email: Applicant email (required)
        mobile: Phone number (optional)
        message: Free-text message (optional)

    Returns:
        SubmissionForm with every field trimmed

    Raises:
        SubmissionValidationError: If name or email is missing/empty,
            or email is malformed. ``field`` names the offending field.

    Examples:
        >>> form = validate_submission_form("  Jane Doe ", "jane@example.com")
        >>> form.name
        'Jane Doe'
        >>> validate_submission_form("", "jane@example.com")
        # Raises SubmissionValidationError(field="name")
    """
    clean_name = _clean(name)
    if not clean_name:
        raise SubmissionValidationError(NAME_REQUIRED_MESSAGE, field="name")

    clean_email = _clean(email)
    if not clean_email:
        raise SubmissionValidationError(EMAIL_REQUIRED_MESSAGE, field="email")

    if not is_valid_email(clean_email):
        raise SubmissionValidationError(EMAIL_INVALID_MESSAGE, field="email")

    return SubmissionForm(
        name=clean_name,
        email=clean_email,
        mobile=_clean(mobile),
        message=_clean(message),
    )
