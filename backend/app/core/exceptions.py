class AppError(Exception):
    """Base class for all application exceptions."""
    def __init__(self, message: str, status_code: int = 500, details: dict = None):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

class ScheduleValidationError(AppError):
    """Raised when a schedule entry is structurally invalid."""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message, status_code=400, details=details)

class ResourceNotFoundError(AppError):
    """Raised when a requested resource is not found."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(f"{resource_type} with id {resource_id} not found", status_code=404)

class ConfigurationError(AppError):
    """Raised when system configuration is invalid."""
    def __init__(self, message: str):
        super().__init__(message, status_code=500)

class StoreUnavailableError(AppError):
    """Raised when a read against the backing store fails.

    Never treated as an empty result: a failed holiday lookup is not "no holiday".
    """
    def __init__(self, operation: str):
        super().__init__(
            f"Schedule store read failed during {operation}",
            status_code=500,
            details={"operation": operation},
        )

class SchedulingConflictError(AppError):
    """Raised when a write is refused because the engine reported conflicts."""
    def __init__(self, conflicts: list[dict]):
        super().__init__(
            "Scheduling conflicts detected",
            status_code=409,
            details={"conflicts": conflicts},
        )

class ConcurrentScheduleWriteError(AppError):
    """Raised when the store rejects an approved write because another request won the slot."""
    def __init__(self, message: str = "Another entry was saved for this slot at the same time. Please retry."):
        super().__init__(message, status_code=409, details={"retryable": True})
