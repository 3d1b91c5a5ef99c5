"""
Pytest Configuration and Shared Fixtures

This module contains pytest configuration and shared fixtures used across
all test suites.

Fixtures:
    - in_memory_repository: SubmissionRepositoryProtocol backed by a dict
    - disk_settings / inline_settings: Settings for each resume storage mode
    - upload_dir: Temporary directory for disk attachments

Architecture Notes:
    - No MongoDB needed: API tests inject InMemorySubmissionRepository
    - Infrastructure tests mock motor collections with AsyncMock
"""

import logging
from typing import Optional

import pytest
from bson import ObjectId

from src.domain.shared.exceptions import SubmissionPersistenceError
from src.domain.submission.entities.submission import Submission
from src.shared.config import Settings

# Configure logger for tests
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# ============================================================================
# IN-MEMORY REPOSITORY
# ============================================================================


class InMemorySubmissionRepository:
    """
    Dict-backed implementation of SubmissionRepositoryProtocol.

    Stores documents exactly as MongoSubmissionRepository would
    (Submission.to_document() + "_id"), so reading back goes through
    Submission.from_document().

    Attributes:
        documents: Stored documents keyed by id string
        connected: Value returned by ping()
        fail_with: Exception raised by save() when set
    """

    def __init__(self) -> None:
        self.documents: dict[str, dict] = {}
        self.connected = True
        self.fail_with: Optional[Exception] = None

    async def save(self, submission: Submission) -> str:
        if self.fail_with is not None:
            raise self.fail_with
        if not self.connected:
            raise SubmissionPersistenceError("Failed to save submission")

        object_id = ObjectId()
        document = submission.to_document()
        document["_id"] = object_id
        self.documents[str(object_id)] = document
        return str(object_id)

    async def get_by_id(self, submission_id: str) -> Optional[Submission]:
        document = self.documents.get(submission_id)
        if document is None:
            return None
        return Submission.from_document(document)

    async def ping(self) -> bool:
        return self.connected

    def count(self) -> int:
        return len(self.documents)


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def in_memory_repository():
    """Fresh in-memory repository for each test."""
    return InMemorySubmissionRepository()


@pytest.fixture
def upload_dir(tmp_path):
    """Temporary directory for disk attachments."""
    return tmp_path / "uploads"


@pytest.fixture
def disk_settings(upload_dir):
    """Settings for disk resume storage with the default 5MB bound."""
    return Settings(
        mongo_uri="mongodb://localhost:27017/test_db",
        resume_storage="disk",
        upload_dir=str(upload_dir),
        max_resume_size_mb=5,
    )


@pytest.fixture
def inline_settings():
    """Settings for inline resume storage with the default 5MB bound."""
    return Settings(
        mongo_uri="mongodb://localhost:27017/test_db",
        resume_storage="inline",
        max_resume_size_mb=5,
    )
