"""
Attachment Value Objects

Represents a resume file attached to a submission.

Two storage strategies exist and each produces its own value object:
    - StoredFileAttachment: file written to local disk, document keeps the path
    - InlineAttachment: raw bytes embedded in the submission document

Both expose the same metadata (original_name, content_type, size, storage)
and serialize to the same sub-document shape, so the Submission entity and
repository never branch on the strategy.

Architecture Notes:
    - Value Objects (immutable, defined by values)
    - Uses Pydantic for validation
    - No external dependencies (bytes are encoded by the Mongo driver)
"""

from typing import Any, Literal, Union

from pydantic import BaseModel, Field


class StoredFileAttachment(BaseModel):
    """
    Resume stored on local disk, referenced by path.

    Attributes:
        path: Relative path of the stored file, e.g. "uploads/1700000000000_cv.pdf"
        original_name: Filename as sent by the client
        content_type: MIME type as sent by the client
        size: File size in bytes
    """

    storage: Literal["disk"] = "disk"
    path: str = Field(min_length=1)
    original_name: str
    content_type: str = "application/octet-stream"
    size: int = Field(ge=0)

    model_config = {"frozen": True}

    def to_document(self) -> dict[str, Any]:
        """
        Convert to the stored sub-document.

        Examples:
            >>> StoredFileAttachment(
            ...     path="uploads/1_cv.pdf", original_name="cv.pdf",
            ...     content_type="application/pdf", size=10,
            ... ).to_document()["path"]
            'uploads/1_cv.pdf'
        """
        return {
            "storage": self.storage,
            "path": self.path,
            "originalName": self.original_name,
            "contentType": self.content_type,
            "size": self.size,
        }


class InlineAttachment(BaseModel):
    """
    Resume embedded in the submission document.

    Attributes:
        data: Raw file bytes
        original_name: Filename as sent by the client
        content_type: MIME type as sent by the client
        size: File size in bytes (len(data))
    """

    storage: Literal["inline"] = "inline"
    data: bytes
    original_name: str
    content_type: str = "application/octet-stream"
    size: int = Field(ge=0)

    model_config = {"frozen": True}

    def to_document(self) -> dict[str, Any]:
        """Convert to the stored sub-document (bytes become BSON binary)."""
        return {
            "storage": self.storage,
            "data": self.data,
            "originalName": self.original_name,
            "contentType": self.content_type,
            "size": self.size,
        }

    def __repr__(self) -> str:
        # Keep raw bytes out of logs
        return (
            f"InlineAttachment(original_name={self.original_name!r}, "
            f"content_type={self.content_type!r}, size={self.size})"
        )


Attachment = Union[StoredFileAttachment, InlineAttachment]


def attachment_from_document(data: dict[str, Any] | None) -> Attachment | None:
    """
    Rebuild an attachment value object from its stored sub-document.

    Args:
        data: Sub-document produced by to_document(), or None

    Returns:
        StoredFileAttachment, InlineAttachment, or None when no file was attached

    Raises:
        ValueError: If the storage marker is unknown
    """
    if not data:
        return None

    storage = data.get("storage")
    if storage == "disk":
        return StoredFileAttachment(
            path=data["path"],
            original_name=data.get("originalName", ""),
            content_type=data.get("contentType", "application/octet-stream"),
            size=data.get("size", 0),
        )
    if storage == "inline":
        raw = bytes(data["data"])
        return InlineAttachment(
            data=raw,
            original_name=data.get("originalName", ""),
            content_type=data.get("contentType", "application/octet-stream"),
            size=data.get("size", len(raw)),
        )

    raise ValueError(f"Unknown attachment storage: {storage!r}")
