"""
Infrastructure Layer - External Dependencies

Implements technical capabilities that support the Domain Layer.
Handles all external dependencies: MongoDB and the local file system.

Architecture:
    - Implements Domain repository interfaces (Dependency Inversion)
    - Implements Application Layer protocols (AttachmentStorageProtocol)
    - Depends on external libraries (motor/pymongo)

Modules:
    - persistence: MongoDB connection and repository
    - file_storage: Resume attachment storage strategies

Exports:
    From persistence:
        - MongoConnection
        - MongoSubmissionRepository

    From file_storage:
        - DiskAttachmentStorage
        - InlineAttachmentStorage
        - build_attachment_storage
"""

# Persistence
from .persistence import MongoConnection, MongoSubmissionRepository

# File Storage
from .file_storage import (
    DiskAttachmentStorage,
    InlineAttachmentStorage,
    build_attachment_storage,
)

__all__ = [
    # Persistence
    "MongoConnection",
    "MongoSubmissionRepository",
    # File Storage
    "DiskAttachmentStorage",
    "InlineAttachmentStorage",
    "build_attachment_storage",
]
