"""
Domain Layer Exceptions

This module defines the exception hierarchy for the Submission Service.
All domain-specific exceptions inherit from DomainException.

Responsibility:
    - Base exception class for domain errors
    - Type-safe error handling across layers
    - Clear separation from framework exceptions

Architecture Notes:
    - Part of Shared Domain (used across all layers)
    - API Layer maps these to HTTP status codes (see src/api/main.py)
    - Infrastructure Layer translates driver errors (pymongo) into these types
"""


def format_size(size_bytes: int) -> str:
    """
    Human-readable size: MB from 0.01MB up, KB from 1KB up, else bytes.

    Examples:
        >>> format_size(6 * 1024 * 1024)
        '6.00MB'
        >>> format_size(1048)
        '1.02KB'
        >>> format_size(512)
        '512 bytes'
    """
    size_mb = size_bytes / (1024 * 1024)
    if size_mb >= 0.01:
        return f"{size_mb:.2f}MB"
    if size_bytes >= 1024:
        return f"{size_bytes / 1024:.2f}KB"
    return f"{size_bytes} bytes"


class DomainException(Exception):
    """
    Base exception for all domain layer errors.

    Usage:
        - Catch this in Application Layer to handle all domain errors
        - API Layer converts to appropriate HTTP status codes

    Examples:
        >>> raise DomainException("Business rule violation")
    """

    def __init__(self, message: str) -> None:
        """
        Initialize domain exception with error message.

        Args:
            message: Human-readable error description
        """
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        """String representation of the exception."""
        return f"{self.__class__.__name__}: {self.message}"

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return f"{self.__class__.__name__}(message={self.message!r})"


class SubmissionValidationError(DomainException):
    """
    Raised when submitted form fields fail validation.

    This exception is raised when:
    - name is missing or empty after trimming
    - email is missing or empty after trimming
    - email does not look like local@domain.tld

    Attributes:
        field: Name of the offending form field ("name", "email", "resume")

    Examples:
        >>> raise SubmissionValidationError(
        ...     "Name is required and cannot be empty", field="name"
        ... )
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        """
        Initialize submission validation error.

        Args:
            message: Error description (returned to the client as-is)
            field: Name of field that caused error (optional)
        """
        self.field = field
        super().__init__(message)


class AttachmentTooLargeError(SubmissionValidationError):
    """
    Raised when an uploaded resume exceeds the configured size bound.

    Always reported against the "resume" field.

    Attributes:
        file_size_bytes: Actual file size in bytes
        max_size_bytes: Maximum allowed size in bytes

    Examples:
        >>> raise AttachmentTooLargeError(
        ...     "Resume file is too large",
        ...     file_size_bytes=6 * 1024 * 1024,
        ...     max_size_bytes=5 * 1024 * 1024
        ... )
    """

    def __init__(
        self,
        message: str,
        file_size_bytes: int | None = None,
        max_size_bytes: int | None = None,
    ) -> None:
        """
        Initialize attachment size error.

        Args:
            message: Error description
            file_size_bytes: Actual file size in bytes (optional)
            max_size_bytes: Maximum allowed size in bytes (optional)
        """
        self.file_size_bytes = file_size_bytes
        self.max_size_bytes = max_size_bytes

        # Build detailed message with human-readable sizes
        if file_size_bytes and max_size_bytes:
            detailed_message = (
                f"{message} (File: {format_size(file_size_bytes)}, "
                f"Max: {format_size(max_size_bytes)})"
            )
            super().__init__(detailed_message, field="resume")
        else:
            super().__init__(message, field="resume")


class SubmissionStoreValidationError(DomainException):
    """
    Raised when the document store rejects a submission during validation.

    MongoDB reports this as a WriteError with code 121 when a collection
    validator is configured. The repository extracts the offending property
    names so the client gets the field list.

    Attributes:
        fields: Names of the fields the store rejected (may be empty)
    """

    def __init__(self, message: str, fields: list[str] | None = None) -> None:
        self.fields = fields or []
        super().__init__(message)


class SubmissionPersistenceError(DomainException):
    """
    Raised when a submission cannot be written for non-validation reasons.

    Covers connectivity loss, timeouts and any other driver failure.
    API Layer maps this to HTTP 500 and hides the detail outside development.

    Attributes:
        original_error: Original exception from the driver (optional)
    """

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        self.original_error = original_error

        if original_error:
            detailed_message = (
                f"{message} | Original error: "
                f"{type(original_error).__name__}: {original_error}"
            )
            super().__init__(detailed_message)
        else:
            super().__init__(message)


class StoreConnectionError(DomainException):
    """
    Raised when the initial document store connection cannot be established.

    Fatal at startup: the process exits instead of retrying.
    """


class ConfigurationError(DomainException):
    """
    Raised when required configuration is missing or invalid.

    Examples:
        >>> raise ConfigurationError("MONGO_URI is not set")
    """
