"""
Application Services

Responsibility:
    Orchestration services that coordinate domain validation, attachment
    storage and persistence.

Contains:
    - SubmitApplicationUseCase: validate, store resume, persist submission

Does NOT contain:
    - Domain business logic (use Domain layer)
    - Direct infrastructure calls (use dependency injection)
"""

from src.application.services.submit_application_use_case import (
    SubmissionResult,
    SubmitApplicationUseCase,
)

__all__ = ["SubmissionResult", "SubmitApplicationUseCase"]
