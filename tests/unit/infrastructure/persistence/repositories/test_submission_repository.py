"""
Tests for MongoSubmissionRepository.

Covers:
- Insert and read back
- Store validation errors (WriteError code 121) with field extraction
- Other driver errors mapped to SubmissionPersistenceError
- Ping and index creation
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo import DESCENDING
from pymongo.errors import AutoReconnect, OperationFailure, WriteError

from src.domain.shared.exceptions import (
    SubmissionPersistenceError,
    SubmissionStoreValidationError,
)
from src.domain.submission.entities.submission import Submission
from src.infrastructure.persistence.repositories.submission_repository import (
    MongoSubmissionRepository,
    extract_invalid_fields,
)


VALIDATION_DETAILS = {
    "index": 0,
    "code": 121,
    "errmsg": "Document failed validation",
    "errInfo": {
        "failingDocumentId": "x",
        "details": {
            "operatorName": "$jsonSchema",
            "schemaRulesNotSatisfied": [
                {
                    "operatorName": "properties",
                    "propertiesNotSatisfied": [
                        {"propertyName": "email", "details": []},
                        {"propertyName": "mobile", "details": []},
                    ],
                },
                {"operatorName": "required", "missingProperties": ["name", "email"]},
            ],
        },
    },
}


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def mock_collection():
    collection = MagicMock()
    collection.insert_one = AsyncMock()
    collection.find_one = AsyncMock()
    collection.create_index = AsyncMock()
    collection.database.command = AsyncMock(return_value={"ok": 1})
    return collection


@pytest.fixture
def repository(mock_collection):
    return MongoSubmissionRepository(mock_collection)


@pytest.fixture
def submission():
    return Submission(
        name="Jane Doe",
        email="jane@example.com",
        created_at=datetime(2024, 1, 15, tzinfo=timezone.utc),
    )


# ============================================================================
# extract_invalid_fields()
# ============================================================================


def test_extract_invalid_fields():
    assert extract_invalid_fields(VALIDATION_DETAILS) == ["email", "mobile", "name"]


@pytest.mark.parametrize("details", [None, {}, {"errInfo": None}, {"errInfo": {}}])
def test_extract_invalid_fields_without_info(details):
    assert extract_invalid_fields(details) == []


# ============================================================================
# save()
# ============================================================================


@pytest.mark.asyncio
async def test_save_inserts_document(repository, mock_collection, submission):
    object_id = ObjectId()
    mock_collection.insert_one.return_value = MagicMock(inserted_id=object_id)

    submission_id = await repository.save(submission)

    assert submission_id == str(object_id)
    mock_collection.insert_one.assert_awaited_once_with(submission.to_document())


@pytest.mark.asyncio
async def test_save_validation_failure(repository, mock_collection, submission):
    mock_collection.insert_one.side_effect = WriteError(
        "Document failed validation", code=121, details=VALIDATION_DETAILS
    )

    with pytest.raises(SubmissionStoreValidationError) as exc_info:
        await repository.save(submission)

    assert exc_info.value.fields == ["email", "mobile", "name"]


@pytest.mark.asyncio
async def test_save_other_write_error(repository, mock_collection, submission):
    mock_collection.insert_one.side_effect = WriteError(
        "E11000 duplicate key", code=11000, details={"code": 11000}
    )

    with pytest.raises(SubmissionPersistenceError) as exc_info:
        await repository.save(submission)

    assert isinstance(exc_info.value.original_error, WriteError)


@pytest.mark.asyncio
async def test_save_connection_lost(repository, mock_collection, submission):
    mock_collection.insert_one.side_effect = AutoReconnect("connection closed")

    with pytest.raises(SubmissionPersistenceError, match="connection closed"):
        await repository.save(submission)


# ============================================================================
# get_by_id()
# ============================================================================


@pytest.mark.asyncio
async def test_get_by_id_found(repository, mock_collection, submission):
    object_id = ObjectId()
    document = submission.to_document()
    document["_id"] = object_id
    mock_collection.find_one.return_value = document

    result = await repository.get_by_id(str(object_id))

    mock_collection.find_one.assert_awaited_once_with({"_id": object_id})
    assert result.id == str(object_id)
    assert result.email == "jane@example.com"


@pytest.mark.asyncio
async def test_get_by_id_not_found(repository, mock_collection):
    mock_collection.find_one.return_value = None

    assert await repository.get_by_id(str(ObjectId())) is None


@pytest.mark.asyncio
@pytest.mark.parametrize("bad_id", ["not-an-id", "", None])
async def test_get_by_id_malformed(repository, mock_collection, bad_id):
    assert await repository.get_by_id(bad_id) is None
    mock_collection.find_one.assert_not_awaited()


@pytest.mark.asyncio
async def test_get_by_id_query_failure(repository, mock_collection):
    mock_collection.find_one.side_effect = OperationFailure("boom")

    with pytest.raises(SubmissionPersistenceError):
        await repository.get_by_id(str(ObjectId()))


# ============================================================================
# ping() / ensure_indexes()
# ============================================================================


@pytest.mark.asyncio
async def test_ping_success(repository, mock_collection):
    assert await repository.ping() is True
    mock_collection.database.command.assert_awaited_once_with("ping")


@pytest.mark.asyncio
async def test_ping_failure(repository, mock_collection):
    mock_collection.database.command.side_effect = AutoReconnect("down")

    assert await repository.ping() is False


@pytest.mark.asyncio
async def test_ensure_indexes(repository, mock_collection):
    await repository.ensure_indexes()

    mock_collection.create_index.assert_awaited_once_with([("createdAt", DESCENDING)])
