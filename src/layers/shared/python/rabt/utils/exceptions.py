"""Custom exception classes for RABT onboarding."""


class RabtError(Exception):
    """Base exception for all onboarding errors."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        status_code: int = 500,
        details: dict | None = None,
    ):
        """Initialize RabtError.

        Args:
            message: Human-readable error message.
            error_code: Machine-readable error code.
            status_code: HTTP status code for API responses.
            details: Additional error details.
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or "INTERNAL_ERROR"
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert exception to dictionary for API response."""
        result = {
            "error": True,
            "error_code": self.error_code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


class ValidationError(RabtError):
    """Raised when a request body cannot be parsed at the HTTP boundary.

    Field rule failures inside the onboarding core are returned as
    ValidationResult data instead.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        errors: list[dict] | None = None,
    ):
        """Initialize ValidationError.

        Args:
            message: Error message.
            errors: List of validation errors with field and message.
        """
        self.errors = errors or []
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            status_code=400,
            details={"errors": self.errors},
        )

    @classmethod
    def from_pydantic(cls, exc: Exception) -> "ValidationError":
        """Create ValidationError from Pydantic ValidationError."""
        errors = []
        if hasattr(exc, "errors"):
            for error in exc.errors():
                errors.append(
                    {
                        "field": ".".join(str(loc) for loc in error.get("loc", [])),
                        "message": error.get("msg", "Invalid value"),
                    }
                )
        return cls(message="Validation failed", errors=errors)


class ConflictError(RabtError):
    """Raised when a conditional write finds an existing item."""

    def __init__(self, message: str = "Resource conflict"):
        """Initialize ConflictError."""
        super().__init__(
            message=message,
            error_code="CONFLICT",
            status_code=409,
        )


class PersistenceError(RabtError):
    """Raised when an onboarding record could not be stored."""

    def __init__(
        self,
        message: str = "Failed to save submission",
        original_error: str | None = None,
    ):
        """Initialize PersistenceError."""
        super().__init__(
            message=message,
            error_code="PERSISTENCE_ERROR",
            status_code=503,
            details={"original_error": original_error} if original_error else None,
        )


class NotificationError(RabtError):
    """Raised when the notification function could not be reached or failed."""

    def __init__(
        self,
        message: str = "Notification function returned an error",
        status_code: int | None = None,
        response: dict | None = None,
    ):
        """Initialize NotificationError.

        Args:
            message: Error message.
            status_code: HTTP status returned by the function, if any.
            response: Parsed response body, if any.
        """
        details = {}
        if status_code is not None:
            details["status_code"] = status_code
        if response is not None:
            details["response"] = response

        super().__init__(
            message=message,
            error_code="NOTIFICATION_ERROR",
            status_code=502,
            details=details if details else None,
        )
