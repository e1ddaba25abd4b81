"""Change calendar provisioning through a custom-resource handler."""

from .calendar import CalendarSource, calendar_arn, handler_policy_statement
from .config import Settings
from .content import ContentResolver, resolve_content, select_source
from .credentials import assume_role
from .errors import (
    AuthError,
    CalendarSetupError,
    ErrorCode,
    ErrorDetail,
    InvalidRequestError,
    ResolutionError,
    StoreError,
    StoreErrorKind,
)
from .handler import on_event
from .models import BrokeredCredentials, CalendarProperties, ReconciliationRequest, RequestType, SourceType
from .store import DocumentStoreClient

__all__ = [
    "AuthError",
    "BrokeredCredentials",
    "CalendarProperties",
    "CalendarSetupError",
    "CalendarSource",
    "ContentResolver",
    "DocumentStoreClient",
    "ErrorCode",
    "ErrorDetail",
    "InvalidRequestError",
    "ReconciliationRequest",
    "RequestType",
    "ResolutionError",
    "Settings",
    "SourceType",
    "StoreError",
    "StoreErrorKind",
    "assume_role",
    "calendar_arn",
    "handler_policy_statement",
    "on_event",
    "resolve_content",
    "select_source",
]
