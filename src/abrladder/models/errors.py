"""Error hierarchy and error response models."""

from enum import StrEnum

from pydantic import BaseModel, Field


class ViolationKind(StrEnum):
    """Categories of input/output validation failure."""

    SCHEMA = "SchemaViolation"
    RANGE = "RangeViolation"
    ORDER = "OrderViolation"
    KEY_FORMAT = "KeyFormatViolation"


class AbrLadderError(Exception):
    """Base error for all ABR ladder errors."""

    def __init__(self, message: str, component: str = "", details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.component = component
        self.details = details or {}


class LadderValidationError(AbrLadderError):
    """One or more inputs or outputs failed shape/range checks."""

    def __init__(self, errors: list[str], details: dict | None = None):
        message = errors[0] if len(errors) == 1 else f"{len(errors)} validation errors"
        super().__init__(message, component="validation", details=details)
        self.errors = list(errors)


class ProfileError(AbrLadderError):
    """ABR profile assembly could not produce a usable profile."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, component="profile", details=details)


class ErrorResponse(BaseModel):
    """Standardized error response for API."""

    error_type: str = Field(..., description="Error category")
    component: str = Field(default="", description="Component that raised the error")
    message: str = Field(..., description="Human-readable error message")
    details: dict = Field(default_factory=dict)
    actionable_guidance: str = Field(default="", description="Suggested user action")

    @classmethod
    def from_exception(cls, exc: AbrLadderError, guidance: str = "") -> "ErrorResponse":
        return cls(
            error_type=type(exc).__name__,
            component=exc.component,
            message=exc.message,
            details=exc.details,
            actionable_guidance=guidance,
        )
