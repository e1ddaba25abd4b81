"""Error taxonomy for calendar reconciliation failures"""

from enum import Enum
from typing import Optional, Dict, Any

from pydantic import BaseModel


class ErrorCode(str, Enum):
    """Machine-readable failure kinds surfaced to the provider framework"""

    INVALID_REQUEST = "invalid_request"
    RESOLUTION_ERROR = "resolution_error"
    AUTH_ERROR = "auth_error"
    STORE_ERROR = "store_error"


class StoreErrorKind(str, Enum):
    """Document store failure categories"""

    ALREADY_EXISTS = "AlreadyExists"
    NOT_FOUND = "NotFound"
    THROTTLED = "Throttled"
    OTHER = "Other"


class ErrorDetail(BaseModel):
    """Structured error detail, suitable for logging or test assertions"""

    code: ErrorCode
    message: str
    kind: Optional[StoreErrorKind] = None
    aws_error_code: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None

    class Config:
        use_enum_values = True


class CalendarSetupError(Exception):
    """Base class for every failure raised by the reconciliation handler."""

    code: ErrorCode = ErrorCode.INVALID_REQUEST

    def __init__(
        self,
        message: str,
        aws_error_code: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.aws_error_code = aws_error_code
        self.metadata = metadata

    def to_detail(self) -> ErrorDetail:
        """Convert to an ErrorDetail model"""
        return ErrorDetail(
            code=self.code,
            message=self.message,
            aws_error_code=self.aws_error_code,
            metadata=self.metadata,
        )


class InvalidRequestError(CalendarSetupError):
    """The lifecycle event could not be parsed into a reconciliation request."""

    code = ErrorCode.INVALID_REQUEST


class ResolutionError(CalendarSetupError):
    """Calendar content could not be fetched or decoded."""

    code = ErrorCode.RESOLUTION_ERROR


class AuthError(CalendarSetupError):
    """Role assumption was rejected by STS."""

    code = ErrorCode.AUTH_ERROR


class StoreError(CalendarSetupError):
    """A create/update/delete call against SSM failed."""

    code = ErrorCode.STORE_ERROR

    def __init__(
        self,
        kind: StoreErrorKind,
        message: str,
        aws_error_code: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, aws_error_code=aws_error_code, metadata=metadata)
        self.kind = kind

    def to_detail(self) -> ErrorDetail:
        return ErrorDetail(
            code=self.code,
            message=self.message,
            kind=self.kind,
            aws_error_code=self.aws_error_code,
            metadata=self.metadata,
        )


def client_error_code(error: Exception) -> Optional[str]:
    """Extract the AWS error code from a botocore ClientError, if any."""
    response = getattr(error, "response", None) or {}
    return response.get("Error", {}).get("Code")
