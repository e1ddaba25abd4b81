"""SSM document operations for change calendars."""

import json
import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .errors import StoreError, StoreErrorKind, client_error_code

logger = logging.getLogger(__name__)

DOCUMENT_TYPE = "ChangeCalendar"
DOCUMENT_FORMAT = "TEXT"
# SSM rejects a bare "$" as DocumentVersion, so the latest marker is spelled out
LATEST_VERSION = "$LATEST"

# SSM reports a missing document as InvalidDocument
_ERROR_KINDS = {
    "DocumentAlreadyExists": StoreErrorKind.ALREADY_EXISTS,
    "InvalidDocument": StoreErrorKind.NOT_FOUND,
    "ThrottlingException": StoreErrorKind.THROTTLED,
    "TooManyUpdates": StoreErrorKind.THROTTLED,
}


class DocumentStoreClient:
    """
    Thin wrapper over the SSM document API.

    Each method is exactly one remote call with no idempotency guard; a second
    create for the same name fails with AlreadyExists.
    """

    def __init__(self, ssm_client=None):
        self._ssm = ssm_client or boto3.client("ssm")

    def create(self, name: str, content: str) -> dict:
        """Register a new change calendar document."""
        response = self._call(
            "create",
            name,
            self._ssm.create_document,
            Name=name,
            Content=content,
            DocumentType=DOCUMENT_TYPE,
            DocumentFormat=DOCUMENT_FORMAT,
        )
        logger.info(f"Create document: {json.dumps(response, default=str)}")
        return response

    def update(self, name: str, content: str) -> dict:
        """Update the calendar content against the latest version."""
        response = self._call(
            "update",
            name,
            self._ssm.update_document,
            Name=name,
            Content=content,
            DocumentVersion=LATEST_VERSION,
        )
        logger.info(f"Update document: {json.dumps(response, default=str)}")
        return response

    def delete(self, name: str) -> dict:
        """Remove the calendar document."""
        response = self._call("delete", name, self._ssm.delete_document, Name=name)
        logger.info(f"Delete document: {json.dumps(response, default=str)}")
        return response

    def _call(self, operation: str, name: str, method, **kwargs) -> dict:
        try:
            return method(**kwargs)
        except (ClientError, BotoCoreError) as e:
            code = client_error_code(e)
            kind = _ERROR_KINDS.get(code, StoreErrorKind.OTHER)
            logger.error(f"Failed to {operation} document {name}: {e}")
            raise StoreError(
                kind,
                f"Unable to {operation} calendar document {name}",
                aws_error_code=code,
                metadata={"calendar_name": name, "operation": operation},
            ) from e
