"""
Submission Repository Interfaces.

Exports:
    - SubmissionRepositoryProtocol: Data persistence contract
"""

from .submission_repository import SubmissionRepositoryProtocol

__all__ = ["SubmissionRepositoryProtocol"]
