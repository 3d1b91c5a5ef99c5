"""
Submission Subdomain Module

Business logic for job-application submissions: the Submission entity,
resume attachment value objects, form validation and the repository contract.

Usage:
    >>> from src.domain.submission import Submission, validate_submission_form
    >>> form = validate_submission_form("Jane Doe", "jane@example.com")
    >>> submission = Submission.from_form(form)
"""

# Entities
from .entities import Submission

# Value Objects
from .value_objects import (
    Attachment,
    InlineAttachment,
    StoredFileAttachment,
    attachment_from_document,
)

# Validation
from .validation import SubmissionForm, is_valid_email, validate_submission_form

# Repository Interfaces
from .repositories import SubmissionRepositoryProtocol

__all__ = [
    # Entities
    "Submission",
    # Value Objects
    "Attachment",
    "InlineAttachment",
    "StoredFileAttachment",
    "attachment_from_document",
    # Validation
    "SubmissionForm",
    "is_valid_email",
    "validate_submission_form",
    # Repository Interfaces
    "SubmissionRepositoryProtocol",
]
