"""STS role assumption for cross-account calendar sources."""

import logging
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .errors import AuthError, client_error_code
from .models import BrokeredCredentials

logger = logging.getLogger(__name__)

SESSION_NAME = "Calendar-Setup-Role"


def assume_role(role_arn: str, sts_client=None) -> BrokeredCredentials:
    """
    Exchange a role ARN for temporary credentials.

    Args:
        role_arn: Role to assume
        sts_client: Optional STS client (a default client is created otherwise)

    Returns:
        BrokeredCredentials for this invocation

    Raises:
        AuthError: If STS rejects the request or cannot be reached
    """
    sts = sts_client or boto3.client("sts")

    logger.info(f"Assuming role {role_arn}")
    try:
        response = sts.assume_role(RoleArn=role_arn, RoleSessionName=SESSION_NAME)
    except (ClientError, BotoCoreError) as e:
        logger.error(f"Failed to assume role {role_arn}: {e}")
        raise AuthError(
            f"Unable to assume role {role_arn}",
            aws_error_code=client_error_code(e),
            metadata={"role_arn": role_arn},
        ) from e

    return BrokeredCredentials.from_sts_response(response)


def s3_client_for(role_arn: Optional[str], sts_client=None, client_factory=None):
    """
    Build an S3 client, assuming role_arn first when one is given.

    client_factory defaults to boto3.client and is called as
    client_factory("s3", **credential_kwargs). It also builds the STS client
    when none is passed in.
    """
    factory = client_factory or boto3.client
    if not role_arn:
        return factory("s3")

    credentials = assume_role(role_arn, sts_client=sts_client or factory("sts"))
    return factory("s3", **credentials.to_client_kwargs())
