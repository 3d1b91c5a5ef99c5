"""
Attachment Storage Service

Stores uploaded resumes. Two strategies implement AttachmentStorageProtocol:

    - DiskAttachmentStorage: writes {upload_dir}/{epoch_millis}_{filename}
      and returns a StoredFileAttachment holding "uploads/{stored_name}",
      which the API serves back under /uploads/*
    - InlineAttachmentStorage: keeps bytes in memory and returns an
      InlineAttachment embedded in the submission document

Responsibility:
    - Size validation (optional bound, shared by both strategies)
    - Filename sanitization (basename only, no directory components)
    - Directory creation and file permissions for disk storage

Architecture Notes:
    - Infrastructure Layer (file system operations)
    - Implements Application Layer Protocol interface
    - Strategy selected by build_attachment_storage(settings)
    - No file-type enforcement: any content type is accepted
"""

import logging
import os
import time
from pathlib import Path
from typing import Final, Optional, Union

from src.domain.shared.exceptions import AttachmentTooLargeError
from src.domain.submission.value_objects.attachment import (
    Attachment,
    InlineAttachment,
    StoredFileAttachment,
)
from src.shared.config import Settings

# Configure logger for file storage operations
logger = logging.getLogger(__name__)

# URL prefix under which disk attachments are served (see src/api/main.py)
UPLOADS_URL_PREFIX: Final[str] = "uploads"
DEFAULT_CONTENT_TYPE: Final[str] = "application/octet-stream"
FALLBACK_FILENAME: Final[str] = "resume"


def sanitize_filename(filename: str) -> str:
    """
    Reduce a client-supplied filename to its final path component.

    Examples:
        >>> sanitize_filename("../../etc/passwd")
        'passwd'
        >>> sanitize_filename("C:\\\\Users\\\\jane\\\\cv.pdf")
        'cv.pdf'
        >>> sanitize_filename("")
        'resume'
    """
    name = Path(filename.replace("\\", "/")).name.strip()
    if name in ("", ".", ".."):
        return FALLBACK_FILENAME
    return name


class _SizeLimitedStorage:
    """Size validation shared by both strategies."""

    def __init__(self, max_size_bytes: Optional[int] = None) -> None:
        self.max_size_bytes = max_size_bytes

    def _validate_size(self, file_data: bytes) -> None:
        """
        Raise AttachmentTooLargeError when file_data exceeds max_size_bytes.

        No bound is applied when max_size_bytes is None.
        """
        if self.max_size_bytes is None:
            return
        if len(file_data) > self.max_size_bytes:
            raise AttachmentTooLargeError(
                "Resume file is too large",
                file_size_bytes=len(file_data),
                max_size_bytes=self.max_size_bytes,
            )


class DiskAttachmentStorage(_SizeLimitedStorage):
    """
    Resume storage on the local file system.

    Storage Structure:
        {upload_dir}/{epoch_millis}_{original_filename}

    The stored document holds "uploads/{epoch_millis}_{original_filename}".

    Examples:
        >>> storage = DiskAttachmentStorage(upload_dir="uploads")
        >>> attachment = await storage.store(b"%PDF-1.4", "cv.pdf", "application/pdf")
        >>> attachment.path
        'uploads/1700000000000_cv.pdf'
    """

    def __init__(
        self,
        upload_dir: Union[str, Path] = "uploads",
        max_size_bytes: Optional[int] = None,
    ) -> None:
        """
        Initialize disk storage. Nothing touches the file system until
        prepare() or store() is called.

        Args:
            upload_dir: Directory receiving uploaded files (created on demand)
            max_size_bytes: Size bound, None for unlimited
        """
        super().__init__(max_size_bytes)
        self.upload_dir = Path(upload_dir)

    def prepare(self) -> None:
        """
        Create the upload directory (mkdir -p, permissions 755).

        Called at application startup, before /uploads is served.

        Raises:
            OSError: If the directory cannot be created
        """
        self._ensure_directory_exists(self.upload_dir)

    async def store(
        self, file_data: bytes, filename: str, content_type: Optional[str] = None
    ) -> StoredFileAttachment:
        """
        Validate and write the file to disk.

        Process Flow:
            1. Validate size, create the upload directory if missing
            2. Build stored name: {epoch_millis}_{sanitized filename}
            3. Write bytes (direct write) and set permissions 644
            4. Return StoredFileAttachment

        Raises:
            AttachmentTooLargeError: If file_data exceeds max_size_bytes
            OSError: If file cannot be written to disk
        """
        self._validate_size(file_data)
        self._ensure_directory_exists(self.upload_dir)

        original_name = sanitize_filename(filename)
        file_path = self._build_file_path(original_name)

        file_path.write_bytes(file_data)
        self._set_permissions(file_path, 0o644)

        logger.info(
            f"Saved uploaded file: {original_name} ({len(file_data)} bytes) "
            f"to {file_path}"
        )

        return StoredFileAttachment(
            path=f"{UPLOADS_URL_PREFIX}/{file_path.name}",
            original_name=original_name,
            content_type=content_type or DEFAULT_CONTENT_TYPE,
            size=len(file_data),
        )

    def resolve(self, stored_path: str) -> Path:
        """
        Map a stored "uploads/..." path back to the file on disk.

        Examples:
            >>> storage.resolve("uploads/1700000000000_cv.pdf")
            PosixPath('uploads/1700000000000_cv.pdf')
        """
        return self.upload_dir / Path(stored_path).name

    async def discard(self, attachment: Attachment) -> None:
        """
        Delete a stored file whose submission was not persisted.

        Missing files are ignored; inline attachments have nothing to delete.
        """
        if not isinstance(attachment, StoredFileAttachment):
            return

        file_path = self.resolve(attachment.path)
        try:
            file_path.unlink(missing_ok=True)
            logger.info(f"Discarded unreferenced upload: {file_path}")
        except OSError as e:
            logger.warning(f"Could not delete unreferenced upload {file_path}: {e}")

    def _build_file_path(self, original_name: str) -> Path:
        timestamp = int(time.time() * 1000)
        file_path = self.upload_dir / f"{timestamp}_{original_name}"

        # Same millisecond, same filename: keep both files
        counter = 1
        while file_path.exists():
            file_path = self.upload_dir / f"{timestamp}_{counter}_{original_name}"
            counter += 1

        return file_path

    def _ensure_directory_exists(self, dir_path: Path) -> None:
        """Create directory (mkdir -p) with permissions 755."""
        if dir_path.exists():
            return
        dir_path.mkdir(parents=True, exist_ok=True)
        self._set_permissions(dir_path, 0o755)
        logger.debug(f"Created directory: {dir_path}")

    def _set_permissions(self, path: Path, mode: int) -> None:
        try:
            os.chmod(path, mode)
        except (OSError, NotImplementedError):
            # Windows and some filesystems do not support chmod
            logger.debug(f"Could not set permissions on {path}")


class InlineAttachmentStorage(_SizeLimitedStorage):
    """
    Resume storage inside the submission document.

    Nothing touches the file system; the bytes are held in memory for the
    request and written with the document.
    """

    async def store(
        self, file_data: bytes, filename: str, content_type: Optional[str] = None
    ) -> InlineAttachment:
        """
        Validate size and wrap the bytes.

        Raises:
            AttachmentTooLargeError: If file_data exceeds max_size_bytes
        """
        self._validate_size(file_data)

        return InlineAttachment(
            data=file_data,
            original_name=sanitize_filename(filename),
            content_type=content_type or DEFAULT_CONTENT_TYPE,
            size=len(file_data),
        )

    async def discard(self, attachment: Attachment) -> None:
        """Nothing to clean up: the bytes only live in the request."""


def build_attachment_storage(
    settings: Settings,
) -> Union[DiskAttachmentStorage, InlineAttachmentStorage]:
    """
    Select the attachment strategy configured by RESUME_STORAGE.

    Args:
        settings: Application settings

    Returns:
        DiskAttachmentStorage for "disk", InlineAttachmentStorage for "inline"
    """
    if settings.resume_storage == "inline":
        logger.info(
            f"Resume storage: inline (max {settings.max_resume_size_bytes or 'unlimited'} bytes)"
        )
        return InlineAttachmentStorage(max_size_bytes=settings.max_resume_size_bytes)

    logger.info(
        f"Resume storage: disk at {settings.upload_dir} "
        f"(max {settings.max_resume_size_bytes or 'unlimited'} bytes)"
    )
    return DiskAttachmentStorage(
        upload_dir=settings.upload_dir,
        max_size_bytes=settings.max_resume_size_bytes,
    )
