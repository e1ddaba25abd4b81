"""Request and credential models for calendar reconciliation"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import InvalidRequestError


class RequestType(str, Enum):
    """Lifecycle events emitted by the custom-resource provider"""

    CREATE = "Create"
    UPDATE = "Update"
    DELETE = "Delete"


class SourceType(str, Enum):
    """Where the calendar body comes from"""

    PATH = "path"  # body shipped inline in the resource properties
    S3_OBJECT = "s3Object"


class CalendarProperties(BaseModel):
    """ResourceProperties of the calendar custom resource"""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # Delete events may omit or carry any source type; checked on resolution
    source_type: Optional[str] = Field(None, alias="SourceType")
    calendar_name: str = Field(..., alias="CalendarName", min_length=1)
    calendar_body: Optional[str] = Field(None, alias="CalendarBody")
    bucket_name: Optional[str] = Field(None, alias="BucketName")
    role_arn: Optional[str] = Field(None, alias="RoleArn")


class ReconciliationRequest(BaseModel):
    """
    A single provider event.

    request_type stays a plain string so that event types this handler does
    not know about still parse and reach the dispatcher.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    request_type: str = Field(..., alias="RequestType")
    properties: CalendarProperties = Field(..., alias="ResourceProperties")

    @property
    def document_name(self) -> str:
        return self.properties.calendar_name

    @classmethod
    def from_event(cls, event: Dict[str, Any]) -> "ReconciliationRequest":
        """
        Parse a raw provider event.

        Raises:
            InvalidRequestError: If required fields are missing or malformed
        """
        try:
            return cls.model_validate(event)
        except ValidationError as e:
            raise InvalidRequestError(
                f"Invalid calendar event: {e.error_count()} validation error(s)",
                metadata={"errors": e.errors(include_url=False)},
            ) from e


@dataclass
class BrokeredCredentials:
    """Temporary STS credentials, valid for the current invocation only."""

    access_key_id: str
    secret_access_key: str
    session_token: Optional[str] = None

    @classmethod
    def from_sts_response(cls, response: dict) -> "BrokeredCredentials":
        """Create from an sts:AssumeRole response."""
        credentials = response["Credentials"]
        return cls(
            access_key_id=credentials["AccessKeyId"],
            secret_access_key=credentials["SecretAccessKey"],
            session_token=credentials.get("SessionToken"),
        )

    def to_client_kwargs(self) -> dict:
        """Keyword arguments for boto3 client construction."""
        return {
            "aws_access_key_id": self.access_key_id,
            "aws_secret_access_key": self.secret_access_key,
            "aws_session_token": self.session_token,
        }

    def __repr__(self) -> str:
        return f"BrokeredCredentials(access_key_id={self.access_key_id!r})"
