"""Runtime settings for the calendar setup handler."""

import logging
import os
from dataclasses import dataclass
from typing import Optional

import boto3
from dotenv import load_dotenv

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """
    Environment-driven configuration.

    Values are read once per invocation; nothing here is cached at module level.
    """

    region: Optional[str] = None
    profile: Optional[str] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            load_env_file: Load a local .env file first (development runs)

        Returns:
            Settings instance
        """
        if load_env_file:
            load_dotenv()

        return cls(
            region=os.getenv("AWS_REGION", os.getenv("AWS_DEFAULT_REGION")),
            profile=os.getenv("AWS_PROFILE"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def create_session(self) -> boto3.session.Session:
        """Create a boto3 session honoring the configured profile and region."""
        if self.profile:
            logger.debug(f"Using AWS profile {self.profile}")
            return boto3.Session(profile_name=self.profile, region_name=self.region)
        return boto3.Session(region_name=self.region)
