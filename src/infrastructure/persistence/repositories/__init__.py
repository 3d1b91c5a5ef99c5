"""
Repository Implementations

Exports:
    - MongoSubmissionRepository: MongoDB-backed SubmissionRepositoryProtocol
"""

from .submission_repository import MongoSubmissionRepository

__all__ = ["MongoSubmissionRepository"]
