"""
Submission Value Objects.

Available Value Objects:
    - StoredFileAttachment: Resume written to disk, referenced by path
    - InlineAttachment: Resume bytes embedded in the document
"""

from src.domain.submission.value_objects.attachment import (
    Attachment,
    InlineAttachment,
    StoredFileAttachment,
    attachment_from_document,
)

__all__ = [
    "Attachment",
    "InlineAttachment",
    "StoredFileAttachment",
    "attachment_from_document",
]
