"""
Tests for domain exceptions.

Covers:
- Size formatting in AttachmentTooLargeError messages
- Original error detail in SubmissionPersistenceError
"""

import pytest

from src.domain.shared.exceptions import (
    AttachmentTooLargeError,
    SubmissionPersistenceError,
    format_size,
)


@pytest.mark.parametrize(
    "size_bytes, expected",
    [
        (20 * 1024 * 1024, "20.00MB"),
        (5 * 1024 * 1024, "5.00MB"),
        (1048, "1.02KB"),
        (1024, "1.00KB"),
        (512, "512 bytes"),
    ],
)
def test_format_size(size_bytes, expected):
    assert format_size(size_bytes) == expected


def test_small_bound_is_not_reported_as_zero():
    error = AttachmentTooLargeError(
        "Resume file is too large", file_size_bytes=20 * 1024 * 1024, max_size_bytes=1048
    )

    assert error.message == "Resume file is too large (File: 20.00MB, Max: 1.02KB)"
    assert error.field == "resume"


def test_too_large_without_sizes_keeps_plain_message():
    error = AttachmentTooLargeError("Resume file is too large", max_size_bytes=1048)

    assert error.message == "Resume file is too large"


def test_persistence_error_includes_original_error():
    error = SubmissionPersistenceError(
        "Failed to save submission", original_error=RuntimeError("socket closed")
    )

    assert error.message == (
        "Failed to save submission | Original error: RuntimeError: socket closed"
    )
    assert str(error).startswith("SubmissionPersistenceError: ")
