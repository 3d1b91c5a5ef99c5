"""
Tests for Attachment value objects.

Covers:
- Disk and inline sub-document layout
- Immutability and field validation
- Rebuilding from stored sub-documents
"""

import pytest
from pydantic import ValidationError

from src.domain.submission.value_objects.attachment import (
    InlineAttachment,
    StoredFileAttachment,
    attachment_from_document,
)


def test_stored_file_attachment_document():
    attachment = StoredFileAttachment(
        path="uploads/1_cv.pdf",
        original_name="cv.pdf",
        content_type="application/pdf",
        size=10,
    )

    assert attachment.to_document() == {
        "storage": "disk",
        "path": "uploads/1_cv.pdf",
        "originalName": "cv.pdf",
        "contentType": "application/pdf",
        "size": 10,
    }


def test_inline_attachment_document_keeps_bytes():
    attachment = InlineAttachment(
        data=b"\x00\x01binary", original_name="cv.doc", size=8
    )

    document = attachment.to_document()

    assert document["storage"] == "inline"
    assert document["data"] == b"\x00\x01binary"
    assert document["contentType"] == "application/octet-stream"


def test_inline_attachment_repr_hides_bytes():
    attachment = InlineAttachment(data=b"secret-bytes", original_name="cv.pdf", size=12)

    assert "secret-bytes" not in repr(attachment)
    assert "size=12" in repr(attachment)


def test_attachments_are_frozen():
    attachment = StoredFileAttachment(path="uploads/1_cv.pdf", original_name="cv.pdf", size=1)

    with pytest.raises(ValidationError):
        attachment.size = 2


def test_negative_size_rejected():
    with pytest.raises(ValidationError):
        StoredFileAttachment(path="uploads/1_cv.pdf", original_name="cv.pdf", size=-1)


def test_from_document_disk():
    attachment = attachment_from_document(
        {
            "storage": "disk",
            "path": "uploads/1_cv.pdf",
            "originalName": "cv.pdf",
            "contentType": "application/pdf",
            "size": 10,
        }
    )

    assert isinstance(attachment, StoredFileAttachment)
    assert attachment.original_name == "cv.pdf"


def test_from_document_inline_computes_missing_size():
    attachment = attachment_from_document(
        {"storage": "inline", "data": bytearray(b"abc"), "originalName": "a.txt"}
    )

    assert isinstance(attachment, InlineAttachment)
    assert attachment.data == b"abc"
    assert attachment.size == 3


@pytest.mark.parametrize("data", [None, {}])
def test_from_document_empty(data):
    assert attachment_from_document(data) is None


def test_from_document_unknown_storage():
    with pytest.raises(ValueError, match="Unknown attachment storage"):
        attachment_from_document({"storage": "s3", "path": "x"})
