"""
Domain Layer - Core Business Logic

Contains the Submission entity, resume attachment value objects, form
validation rules, the repository contract and the exception hierarchy.
Framework-independent and highly testable.

Architecture:
    - Clean Architecture: Domain Layer is the center, no infrastructure dependencies
    - Dependency Inversion: Domain defines interfaces, Infrastructure implements

Subdomains:
    - submission: Job-application submissions
    - shared: Cross-subdomain concepts (exceptions)

Usage:
    >>> from src.domain import Submission, DomainException
    >>> from src.domain.submission import validate_submission_form
"""

# Submission Subdomain
from .submission import (
    Submission,
    SubmissionRepositoryProtocol,
    validate_submission_form,
)

# Shared Domain
from .shared import DomainException

__all__ = [
    # Submission Subdomain
    "Submission",
    "SubmissionRepositoryProtocol",
    "validate_submission_form",
    # Shared Domain
    "DomainException",
]
