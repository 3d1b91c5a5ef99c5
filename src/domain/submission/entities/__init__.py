"""
Submission Entities.

Exports:
    - Submission: Immutable applicant record
"""

from .submission import Submission

__all__ = ["Submission"]
