"""Provisioning-side definitions of a change calendar custom resource.

A calendar is either read from a local directory when the stack is
synthesized, and shipped inline, or pulled from S3 by the handler at deploy
time, optionally through a cross-account role.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from .models import SourceType

HANDLER_ACTIONS = ["ssm:CreateDocument", "ssm:UpdateDocument", "ssm:DeleteDocument"]


@dataclass(frozen=True)
class CalendarSource:
    """Where a calendar comes from, as sent to the handler."""

    source_type: SourceType
    calendar_name: str
    calendar_body: Optional[str] = None
    bucket_name: Optional[str] = None
    role_arn: Optional[str] = None

    @classmethod
    def path(cls, calendar_name: str, calendar_path: str) -> "CalendarSource":
        """Read calendar_path/calendar_name now and ship it inline."""
        body = (Path(calendar_path) / calendar_name).read_text(encoding="utf-8")
        return cls(
            source_type=SourceType.PATH,
            calendar_name=calendar_name,
            calendar_body=body,
        )

    @classmethod
    def s3_location(
        cls,
        calendar_name: str,
        bucket_name: str,
        role_arn: Optional[str] = None,
    ) -> "CalendarSource":
        """Fetch s3://bucket_name/calendar_name at deploy time."""
        return cls(
            source_type=SourceType.S3_OBJECT,
            calendar_name=calendar_name,
            bucket_name=bucket_name,
            role_arn=role_arn,
        )

    def to_resource_properties(self) -> Dict[str, str]:
        """ResourceProperties for the custom resource (unset values omitted)."""
        properties = {
            "SourceType": self.source_type.value,
            "CalendarName": self.calendar_name,
            "CalendarBody": self.calendar_body,
            "BucketName": self.bucket_name,
            "RoleArn": self.role_arn,
        }
        return {k: v for k, v in properties.items() if v is not None}


def calendar_arn(calendar_name: str, region: str, account: str, partition: str = "aws") -> str:
    return f"arn:{partition}:ssm:{region}:{account}:document/{calendar_name}"


def handler_policy_statement(arn: str) -> Dict[str, Any]:
    """IAM statement granting the handler its SSM document calls."""
    return {
        "Effect": "Allow",
        "Action": list(HANDLER_ACTIONS),
        "Resource": [arn],
    }
