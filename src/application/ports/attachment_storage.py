"""
Attachment Storage Port

Protocol implemented by the resume storage strategies in
src/infrastructure/file_storage (disk path reference, inline blob).
The use case depends only on this interface; the concrete strategy is
selected from configuration when the app is created.
"""

from typing import Optional, Protocol

from src.domain.submission.value_objects.attachment import Attachment


class AttachmentStorageProtocol(Protocol):
    """
    Stores an uploaded resume and describes where it went.

    Attributes:
        max_size_bytes: Upper bound for accepted files, None for unlimited
    """

    max_size_bytes: Optional[int]

    async def store(
        self, file_data: bytes, filename: str, content_type: Optional[str] = None
    ) -> Attachment:
        """
        Store an uploaded file.

        Args:
            file_data: Raw bytes from the multipart upload
            filename: Original filename from the client
            content_type: MIME type from the client (optional)

        Returns:
            Attachment value object to embed in the Submission

        Raises:
            AttachmentTooLargeError: If file_data exceeds max_size_bytes
            OSError: If a disk strategy cannot write the file
        """
        ...

    async def discard(self, attachment: Attachment) -> None:
        """
        Remove a stored attachment whose submission was not persisted.

        Never raises; a disk strategy deletes the file, an inline strategy
        has nothing to remove.
        """
        ...
