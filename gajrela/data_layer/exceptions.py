"""Structured error types for the nutrition estimator.

Only two conditions stop an estimate:

    INVALID_CONFIGURATION  assumed yield <= 0, broken reference table,
                           unreadable recipe file
    INVALID_INPUT          negative or non-numeric mass, unknown milk type

An unresolved dry-fruit name and a zero macro total are NOT errors. They are
reported as warnings on the NutritionEstimate and the numbers fall back to
zero.
"""

from enum import Enum
from typing import Any, Dict, Optional


class EstimatorErrorCode(Enum):
    """Error codes, as strings for easy serialization and logging."""

    INVALID_CONFIGURATION = "INVALID_CONFIGURATION"
    INVALID_INPUT = "INVALID_INPUT"


class EstimatorError(Exception):
    """Base exception for all estimator errors.

    Attributes:
        code: EstimatorErrorCode identifying the error type
        message: Human-readable error description
        context: Dictionary of relevant error context
    """

    def __init__(
        self,
        code: EstimatorErrorCode,
        message: str,
        context: Optional[Dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.context = context or {}
        super().__init__(f"[{code.value}] {message}")

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"code={self.code!r}, "
            f"message={self.message!r}, "
            f"context={self.context!r})"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for JSON output.

        Returns:
            Dictionary with error code, message, and context
        """
        return {
            "error_code": self.code.value,
            "message": self.message,
            "context": self.context,
        }


class InvalidConfigurationError(EstimatorError):
    """Raised when estimator configuration cannot produce meaningful numbers.

    Examples: an assumed yield of zero or less, a reference table missing a
    category, a recipe file that does not parse.
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(EstimatorErrorCode.INVALID_CONFIGURATION, message, context)


class InvalidInputError(EstimatorError, ValueError):
    """Raised when a recipe value is physically meaningless."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(EstimatorErrorCode.INVALID_INPUT, message, context)
