"""
SubmissionRepository Interface

Repository pattern interface for Submission persistence.

Architecture Notes:
    - Protocol-based interface (structural typing)
    - Async methods (motor driver in Infrastructure Layer)
    - Implementation: src/infrastructure/persistence/repositories
    - Tests use an in-memory implementation of the same Protocol
"""

from typing import Optional, Protocol

from ..entities.submission import Submission


class SubmissionRepositoryProtocol(Protocol):
    """
    Protocol defining the contract for Submission persistence.

    Submissions are write-once: there is no update or delete operation.
    """

    async def save(self, submission: Submission) -> str:
        """
        Store a new submission.

        Args:
            submission: Submission entity without id

        Returns:
            Identifier assigned by the store (string)

        Raises:
            SubmissionStoreValidationError: If the store rejects the document
            SubmissionPersistenceError: If the write fails for any other reason
        """
        ...

    async def get_by_id(self, submission_id: str) -> Optional[Submission]:
        """
        Retrieve a submission by identifier.

        Returns:
            Submission if found, None for unknown or malformed identifiers
        """
        ...

    async def ping(self) -> bool:
        """
        Check store connectivity.

        Returns:
            True if the store answered, False otherwise (never raises)
        """
        ...
