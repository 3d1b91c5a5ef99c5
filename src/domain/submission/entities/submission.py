"""
Submission Entity.

Core domain entity representing one applicant record with an optional resume.

A Submission is created exactly once per successful POST and never changes
afterwards: there is no update or delete path. Its identity is assigned by
the persistence layer (MongoDB ObjectId), so `id` is None until saved.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

from src.domain.submission.validation import SubmissionForm
from src.domain.submission.value_objects.attachment import (
    Attachment,
    attachment_from_document,
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Submission:
    """
    Immutable entity for a job-application submission.

    Attributes:
        name: Applicant name (trimmed, non-empty)
        email: Applicant email (trimmed, valid format)
        mobile: Phone number, "" when not given
        message: Free-text message, "" when not given
        resume: Attached resume (disk reference or inline bytes), None if absent
        created_at: Creation timestamp (UTC), set once
        id: Identifier assigned by the store, None before persistence

    Examples:
        >>> sub = Submission(name="Jane Doe", email="jane@example.com")
        >>> sub.mobile
        ''
        >>> sub.id is None
        True
    """

    name: str
    email: str
    mobile: str = ""
    message: str = ""
    resume: Optional[Attachment] = None
    created_at: datetime = field(default_factory=_utcnow)
    id: Optional[str] = None

    @classmethod
    def from_form(
        cls, form: SubmissionForm, resume: Optional[Attachment] = None
    ) -> "Submission":
        """Create a new, not yet persisted Submission from a validated form."""
        return cls(
            name=form.name,
            email=form.email,
            mobile=form.mobile,
            message=form.message,
            resume=resume,
        )

    @property
    def has_resume(self) -> bool:
        return self.resume is not None

    def to_document(self) -> dict[str, Any]:
        """
        Serialize to the stored document layout (without "_id").

        Returns:
            Dictionary with camelCase keys as stored in the submissions collection
        """
        return {
            "name": self.name,
            "email": self.email,
            "mobile": self.mobile,
            "message": self.message,
            "resume": self.resume.to_document() if self.resume else None,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_document(cls, data: dict[str, Any]) -> "Submission":
        """
        Rebuild a Submission from a stored document.

        Args:
            data: Document as returned by the store ("_id" may be an ObjectId)

        Returns:
            Submission with id set from "_id"

        Raises:
            KeyError: If name or email is missing
        """
        created_at = data.get("createdAt") or _utcnow()
        # BSON datetimes come back naive (UTC) unless tz_aware is set
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)

        raw_id = data.get("_id")

        return cls(
            name=data["name"],
            email=data["email"],
            mobile=data.get("mobile") or "",
            message=data.get("message") or "",
            resume=attachment_from_document(data.get("resume")),
            created_at=created_at,
            id=str(raw_id) if raw_id is not None else None,
        )

    def __str__(self) -> str:
        resume = self.resume.original_name if self.resume else "none"
        return f"Submission(id={self.id}, email={self.email}, resume={resume})"
