"""Domain error types."""


class DietTrackerError(Exception):
    """Base class for errors raised by the diet tracker services."""


class NotFoundError(DietTrackerError):
    """Raised when a requested record does not exist for the caller."""


class ValidationError(DietTrackerError):
    """Raised when input is missing or malformed."""


class ConflictError(DietTrackerError):
    """Raised when a write violates a uniqueness constraint."""


class AuthenticationError(DietTrackerError):
    """Raised when credentials or tokens are invalid."""


class AnalysisError(DietTrackerError):
    """Raised when the AI analysis response cannot be used."""
