"""
Order statistics exception classes
"""
from typing import Optional


class StatsError(Exception):
    """Base exception for the statistics service."""

    def __init__(self, message: str, error_code: Optional[str] = None):
        """
        Args:
            message: Error message
            error_code: Error code (optional)
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class RepositoryError(StatsError):
    """Raised when the order store cannot be reached, queried or released."""

    def __init__(self, operation: str, reason: str):
        """
        Args:
            operation: Repository operation (e.g. 'connect', 'fetch', 'close')
            reason: Failure reason
        """
        message = f"Order repository {operation} failed: {reason}"
        super().__init__(message, error_code="REPOSITORY_FAILED")
        self.operation = operation
        self.reason = reason


class ComputationError(StatsError):
    """Raised when statistics cannot be computed from the fetched orders."""

    def __init__(self, message: str, error_code: str = "COMPUTATION_FAILED"):
        super().__init__(message, error_code=error_code)


class InvalidOrderError(ComputationError):
    """Raised when an order record is missing a field required by its type."""

    def __init__(self, reason: str):
        super().__init__(f"Invalid order record: {reason}", error_code="INVALID_ORDER")
        self.reason = reason


class ConfigurationError(StatsError):
    """Configuration error."""

    def __init__(self, config_key: str, reason: str):
        """
        Args:
            config_key: Configuration key
            reason: Error reason
        """
        message = f"Configuration error ({config_key}): {reason}"
        super().__init__(message, error_code="CONFIGURATION_ERROR")
        self.config_key = config_key
        self.reason = reason
