"""
File Storage Infrastructure Module

Resume attachment storage strategies.

Exports:
    - DiskAttachmentStorage: Writes files to disk, stores path reference
    - InlineAttachmentStorage: Embeds file bytes in the document
    - build_attachment_storage: Select strategy from Settings
"""

from .attachment_storage import (
    DiskAttachmentStorage,
    InlineAttachmentStorage,
    build_attachment_storage,
    sanitize_filename,
)

__all__ = [
    "DiskAttachmentStorage",
    "InlineAttachmentStorage",
    "build_attachment_storage",
    "sanitize_filename",
]
