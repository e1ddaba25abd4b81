"""Resolve the calendar document body from its configured source."""

import logging
from typing import Callable, Optional

from botocore.exceptions import BotoCoreError, ClientError

from .credentials import s3_client_for
from .errors import InvalidRequestError, ResolutionError, client_error_code
from .models import CalendarProperties, SourceType

logger = logging.getLogger(__name__)


def select_source(properties: CalendarProperties) -> SourceType:
    """
    Map the raw SourceType property onto a known source.

    Raises:
        InvalidRequestError: If the source type is missing or unknown
    """
    try:
        return SourceType(properties.source_type)
    except ValueError as e:
        raise InvalidRequestError(
            f"Unsupported calendar source type: {properties.source_type!r}",
            metadata={"calendar_name": properties.calendar_name},
        ) from e


class ContentResolver:
    """
    Produces the calendar body for Create and Update events.

    Every call resolves from scratch; neither content nor credentials are kept
    between calls.
    """

    def __init__(self, sts_client=None, client_factory: Optional[Callable] = None):
        self._sts_client = sts_client
        self._client_factory = client_factory

    def resolve(self, properties: CalendarProperties) -> str:
        source = select_source(properties)
        if source is SourceType.PATH:
            return self._from_inline(properties)
        return self._from_s3(properties)

    def _from_inline(self, properties: CalendarProperties) -> str:
        if properties.calendar_body is None:
            raise ResolutionError(
                f"Calendar {properties.calendar_name} has no inline body",
                metadata={"calendar_name": properties.calendar_name},
            )
        return properties.calendar_body

    def _from_s3(self, properties: CalendarProperties) -> str:
        """
        Fetch s3://BucketName/CalendarName and decode it as UTF-8.

        When RoleArn is set the role is assumed before the client is built, so
        the fetch never runs with ambient credentials by mistake.
        """
        bucket = properties.bucket_name
        key = properties.calendar_name
        if not bucket:
            raise ResolutionError(
                f"Calendar {key} is sourced from S3 but no bucket was given",
                metadata={"calendar_name": key},
            )

        s3 = s3_client_for(
            properties.role_arn,
            sts_client=self._sts_client,
            client_factory=self._client_factory,
        )

        logger.info(f"Fetching calendar from s3://{bucket}/{key}")
        try:
            response = s3.get_object(Bucket=bucket, Key=key)
            body = response["Body"].read()
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Failed to fetch s3://{bucket}/{key}: {e}")
            raise ResolutionError(
                f"Unable to fetch calendar s3://{bucket}/{key}",
                aws_error_code=client_error_code(e),
                metadata={"bucket": bucket, "key": key},
            ) from e

        try:
            return body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ResolutionError(
                f"Calendar s3://{bucket}/{key} is not valid UTF-8",
                metadata={"bucket": bucket, "key": key},
            ) from e


def resolve_content(properties: CalendarProperties, sts_client=None, client_factory=None) -> str:
    """Resolve calendar content with a fresh resolver."""
    return ContentResolver(sts_client=sts_client, client_factory=client_factory).resolve(properties)
