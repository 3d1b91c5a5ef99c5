"""
API Router for Application Submissions

Responsibility:
    HTTP interface for submitting a job-application form with an optional
    resume. Thin layer that delegates to the Application Layer use case via
    dependency injection.

Architecture Notes:
    - Part of API Layer (Presentation)
    - Depends on Application Layer (SubmitApplicationUseCase)
    - Returns 201 Created for saved submissions
    - Validation and persistence errors are raised as domain exceptions and
      converted by the global handlers in src/api/main.py

Contains:
    - POST /submit - Validate and persist one submission

Does NOT contain:
    - Validation rules (Domain Layer)
    - File system or database access (Infrastructure Layer)
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile, status

from src.api.schemas.common import ErrorResponse
from src.api.schemas.submission import SubmitResponse
from src.application.services.submit_application_use_case import (
    SubmitApplicationUseCase,
)
from src.domain.shared.exceptions import AttachmentTooLargeError

# Configure logger
logger = logging.getLogger(__name__)


# ============================================================================
# ROUTER CONFIGURATION
# ============================================================================


router = APIRouter(
    tags=["submissions"],
    responses={
        400: {
            "model": ErrorResponse,
            "description": "Bad Request - Missing/invalid field or oversized resume",
        },
        500: {"model": ErrorResponse, "description": "Internal Server Error"},
    },
)


# ============================================================================
# DEPENDENCY INJECTION
# ============================================================================


def get_submit_use_case(request: Request) -> SubmitApplicationUseCase:
    """
    Dependency injection for SubmitApplicationUseCase.

    Builds the use case from the service context attached to app.state by
    create_app() and the startup lifespan:
        - app.state.repository: SubmissionRepositoryProtocol
        - app.state.attachment_storage: AttachmentStorageProtocol
    """
    return SubmitApplicationUseCase(
        repository=request.app.state.repository,
        attachment_storage=request.app.state.attachment_storage,
    )


async def read_resume_upload(
    resume: UploadFile, max_size_bytes: Optional[int]
) -> bytes:
    """
    Read an uploaded resume into memory, never more than max_size_bytes + 1.

    The declared size is checked first; when it is unknown, at most one byte
    past the bound is read so an oversized file is rejected without
    buffering the rest.

    Raises:
        AttachmentTooLargeError: If the upload exceeds max_size_bytes
    """
    if max_size_bytes is None:
        return await resume.read()

    if resume.size is not None and resume.size > max_size_bytes:
        raise AttachmentTooLargeError(
            "Resume file is too large",
            file_size_bytes=resume.size,
            max_size_bytes=max_size_bytes,
        )

    data = await resume.read(max_size_bytes + 1)
    if len(data) > max_size_bytes:
        raise AttachmentTooLargeError(
            "Resume file is too large",
            file_size_bytes=resume.size,
            max_size_bytes=max_size_bytes,
        )
    return data


# ============================================================================
# ENDPOINTS
# ============================================================================


@router.post(
    "/submit",
    status_code=status.HTTP_201_CREATED,
    response_model=SubmitResponse,
    summary="Submit a job application",
    description=(
        "Accepts multipart/form-data or application/x-www-form-urlencoded with "
        "fields name, email, mobile, message and an optional resume file. "
        "name and email are required; email must look like local@domain.tld."
    ),
)
async def submit_application(
    name: Optional[str] = Form(default=None),
    email: Optional[str] = Form(default=None),
    mobile: Optional[str] = Form(default=None),
    message: Optional[str] = Form(default=None),
    resume: Optional[UploadFile] = File(default=None),
    use_case: SubmitApplicationUseCase = Depends(get_submit_use_case),
) -> SubmitResponse:
    """
    Validate and persist one submission.

    Process Flow:
        1. Receive form fields and optional resume
        2. Read resume bytes, bounded by the size limit (an empty filename
           means no file was chosen)
        3. Delegate to SubmitApplicationUseCase
        4. Return 201 Created with the new identifier

    Raises:
        SubmissionValidationError: -> 400 (handled globally)
        SubmissionStoreValidationError: -> 400 (handled globally)
        SubmissionPersistenceError: -> 500 (handled globally)

    Examples:
        >>> curl -X POST "http://localhost:5000/api/submit" \\
        ...      -F "name=Jane Doe" -F "email=jane@example.com" \\
        ...      -F "resume=@cv.pdf"
        {
            "success": true,
            "message": "Submission saved successfully",
            "submissionId": "65a1f0c2e4b0a1b2c3d4e5f6"
        }
    """
    resume_data: Optional[bytes] = None
    resume_filename: Optional[str] = None
    resume_content_type: Optional[str] = None

    if resume is not None and resume.filename:
        resume_data = await read_resume_upload(
            resume, use_case.attachment_storage.max_size_bytes
        )
        resume_filename = resume.filename
        resume_content_type = resume.content_type

    logger.info(
        f"Submission received: email={(email or '').strip()!r}, "
        f"resume={resume_filename!r}"
    )

    result = await use_case.execute(
        name=name,
        email=email,
        mobile=mobile,
        message=message,
        resume_data=resume_data,
        resume_filename=resume_filename,
        resume_content_type=resume_content_type,
    )

    return SubmitResponse(submission_id=result.submission_id)
