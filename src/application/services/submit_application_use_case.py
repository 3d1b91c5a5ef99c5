"""
Submit Application Use Case

Responsibility:
    Orchestrates one job-application submission: form validation, resume
    storage and persistence. Coordinates between API Layer and
    Infrastructure Layer.

Architecture Notes:
    - Part of Application Layer (Services)
    - Uses AttachmentStorageProtocol and SubmissionRepositoryProtocol (injected)
    - Called by API Layer (submissions.py router)
    - Returns SubmissionResult DTO

Contains:
    - SubmitApplicationUseCase: Main use case
    - SubmissionResult: DTO for the result

Does NOT contain:
    - HTTP concerns (belongs to API Layer)
    - File system or database operations (delegated to Infrastructure Layer)
"""

import logging
from typing import Optional

from pydantic import BaseModel, Field

from src.application.ports.attachment_storage import AttachmentStorageProtocol
from src.domain.submission.entities.submission import Submission
from src.domain.submission.repositories.submission_repository import (
    SubmissionRepositoryProtocol,
)
from src.domain.submission.validation import validate_submission_form

logger = logging.getLogger(__name__)


# ============================================================================
# DATA TRANSFER OBJECTS (DTOs)
# ============================================================================


class SubmissionResult(BaseModel):
    """
    Result of a successful submission.

    Attributes:
        submission_id: Identifier assigned by the store
    """

    submission_id: str = Field(description="Identifier assigned by the store")


# ============================================================================
# USE CASE
# ============================================================================


class SubmitApplicationUseCase:
    """
    Use case for saving one job-application submission.

    Process Flow:
        User posts form (multipart or urlencoded)
        → API Layer reads fields and optional resume
        → SubmitApplicationUseCase.execute(...)
        → validate_submission_form() (fails before anything is stored)
        → AttachmentStorageProtocol.store() (only when a resume was sent)
        → Submission.from_form()
        → SubmissionRepositoryProtocol.save()
        → Return SubmissionResult
        → API Layer converts to HTTP 201 response

    Attributes:
        repository: Submission store (injected)
        attachment_storage: Resume storage strategy (injected)

    Examples:
        >>> use_case = SubmitApplicationUseCase(
        ...     repository=repository, attachment_storage=storage
        ... )
        >>> result = await use_case.execute(name="Jane Doe", email="jane@example.com")
        >>> result.submission_id
        '65a1f0c2e4b0a1b2c3d4e5f6'
    """

    def __init__(
        self,
        repository: SubmissionRepositoryProtocol,
        attachment_storage: AttachmentStorageProtocol,
    ) -> None:
        self.repository = repository
        self.attachment_storage = attachment_storage

    async def execute(
        self,
        name: Optional[str],
        email: Optional[str],
        mobile: Optional[str] = None,
        message: Optional[str] = None,
        resume_data: Optional[bytes] = None,
        resume_filename: Optional[str] = None,
        resume_content_type: Optional[str] = None,
    ) -> SubmissionResult:
        """
        Validate and persist one submission.

        Args:
            name: Applicant name (required)
            email: Applicant email (required)
            mobile: Phone number (optional)
            message: Free-text message (optional)
            resume_data: Raw resume bytes, None when no file was sent
            resume_filename: Original resume filename
            resume_content_type: Resume MIME type

        Returns:
            SubmissionResult with the new identifier

        Raises:
            SubmissionValidationError: Missing/empty name or email, malformed email
            AttachmentTooLargeError: Resume exceeds the configured bound
            SubmissionStoreValidationError: Store rejected the document
            SubmissionPersistenceError: Store write failed

        Error Handling:
            Exceptions propagate to the API Layer, which maps them to HTTP
            responses. A resume stored before a failed save is discarded
            first, so no file is left without a document.
        """
        # 1. Validate form fields (nothing is stored on failure)
        form = validate_submission_form(name, email, mobile, message)

        # 2. Store resume, if one was sent
        resume = None
        if resume_data is not None and resume_filename:
            resume = await self.attachment_storage.store(
                file_data=resume_data,
                filename=resume_filename,
                content_type=resume_content_type,
            )
            logger.info(
                f"Stored resume {resume.original_name!r} ({resume.size} bytes, "
                f"storage={resume.storage})"
            )

        # 3. Build entity and persist (a stored resume is removed on failure)
        submission = Submission.from_form(form, resume=resume)
        try:
            submission_id = await self.repository.save(submission)
        except Exception:
            if resume is not None:
                await self.attachment_storage.discard(resume)
            raise

        logger.info(
            f"Submission saved: id={submission_id}, email={form.email}, "
            f"resume={submission.has_resume}"
        )

        return SubmissionResult(submission_id=submission_id)
