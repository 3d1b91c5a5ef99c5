"""
Submission Repository Implementation

Concrete implementation of SubmissionRepositoryProtocol from Domain Layer.
Uses MongoDB (motor) for durable storage of submissions.

Responsibility:
    - Implement Domain repository interface
    - Insert submissions as documents, look them up by ObjectId
    - Translate pymongo errors into domain exceptions

Architecture Notes:
    - Infrastructure Layer (implements Domain interface)
    - Collection handle is injected (from MongoConnection)
    - Write-once storage: no update or delete
"""

import logging
from typing import Any, Final, Optional

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import DESCENDING
from pymongo.errors import PyMongoError, WriteError

from src.domain.shared.exceptions import (
    SubmissionPersistenceError,
    SubmissionStoreValidationError,
)
from src.domain.submission.entities.submission import Submission

logger = logging.getLogger(__name__)

# MongoDB "Document failed validation" (collection $jsonSchema validator)
DOCUMENT_VALIDATION_FAILURE_CODE: Final[int] = 121


def extract_invalid_fields(error_details: Optional[dict[str, Any]]) -> list[str]:
    """
    Collect offending property names from a code 121 WriteError.

    MongoDB reports schema failures under errInfo.details.schemaRulesNotSatisfied,
    with "propertiesNotSatisfied" (wrong type/pattern) and "missingProperties"
    (required field absent).

    Args:
        error_details: WriteError.details (the server's write error document)

    Returns:
        Field names in report order, without duplicates

    Examples:
        >>> extract_invalid_fields({
        ...     "errInfo": {"details": {"schemaRulesNotSatisfied": [
        ...         {"operatorName": "required", "missingProperties": ["email"]},
        ...     ]}}
        ... })
        ['email']
    """
    if not error_details:
        return []

    rules = (
        (error_details.get("errInfo") or {})
        .get("details", {})
        .get("schemaRulesNotSatisfied", [])
    )

    fields: list[str] = []
    for rule in rules:
        for prop in rule.get("propertiesNotSatisfied", []):
            name = prop.get("propertyName")
            if name and name not in fields:
                fields.append(name)
        for name in rule.get("missingProperties", []):
            if name not in fields:
                fields.append(name)

    return fields


class MongoSubmissionRepository:
    """
    MongoDB-based implementation of SubmissionRepositoryProtocol.

    Storage Strategy:
        - Collection: "submissions"
        - Document: Submission.to_document() + "_id" (ObjectId)
        - Index: createdAt descending

    Examples:
        >>> repo = MongoSubmissionRepository(connection.collection)
        >>> submission_id = await repo.save(submission)
        >>> stored = await repo.get_by_id(submission_id)
        >>> stored.email
        'jane@example.com'
    """

    def __init__(self, collection: AsyncIOMotorCollection) -> None:
        self.collection = collection

    async def save(self, submission: Submission) -> str:
        """
        Insert a new submission document.

        Returns:
            Hex string of the inserted ObjectId

        Raises:
            SubmissionStoreValidationError: WriteError code 121
            SubmissionPersistenceError: Any other PyMongoError
        """
        try:
            result = await self.collection.insert_one(submission.to_document())

        except WriteError as e:
            if e.code == DOCUMENT_VALIDATION_FAILURE_CODE:
                fields = extract_invalid_fields(e.details)
                logger.warning(f"Submission rejected by store validator: fields={fields}")
                raise SubmissionStoreValidationError(
                    "Submission failed store validation", fields=fields
                ) from e
            logger.error(f"Submission write failed: {e}")
            raise SubmissionPersistenceError("Failed to save submission", e) from e

        except PyMongoError as e:
            logger.error(f"Submission write failed: {e}")
            raise SubmissionPersistenceError("Failed to save submission", e) from e

        return str(result.inserted_id)

    async def get_by_id(self, submission_id: str) -> Optional[Submission]:
        """
        Retrieve a submission by ObjectId hex string.

        Returns:
            Submission, or None for unknown or malformed identifiers

        Raises:
            SubmissionPersistenceError: If the query fails
        """
        try:
            object_id = ObjectId(submission_id)
        except (InvalidId, TypeError):
            return None

        try:
            document = await self.collection.find_one({"_id": object_id})
        except PyMongoError as e:
            raise SubmissionPersistenceError("Failed to load submission", e) from e

        if document is None:
            return None
        return Submission.from_document(document)

    async def ping(self) -> bool:
        """Return True if the database answers a PING, False otherwise."""
        try:
            await self.collection.database.command("ping")
            return True
        except PyMongoError as e:
            logger.warning(f"Submission store ping failed: {e}")
            return False

    async def ensure_indexes(self) -> None:
        """Create the createdAt index (no-op if it already exists)."""
        await self.collection.create_index([("createdAt", DESCENDING)])
