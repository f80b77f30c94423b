from __future__ import annotations
"""Storage connection profile and S3 client construction."""
from dataclasses import dataclass
import logging

import boto3
from botocore.exceptions import BotoCoreError

from .errors import ClientInitError

LOGGER = logging.getLogger(__name__)

DEFAULT_PROFILE = "default"
DEFAULT_REGION = "us-east-1"


@dataclass(frozen=True)
class ConnectionProfile:
    """Named credential profile and region resolved from the host configuration."""

    name: str = DEFAULT_PROFILE
    region: str = DEFAULT_REGION


def create_client(profile: ConnectionProfile | None = None, *, session_factory=None):
    """Return an S3 client bound to ``profile``.

    Raises:
        ClientInitError: when the profile, region or credentials cannot be resolved.
    """
    profile = profile or ConnectionProfile()
    session_factory = session_factory or boto3.session.Session
    try:
        session = session_factory(profile_name=profile.name, region_name=profile.region)
        if session.get_credentials() is None:
            raise ClientInitError(
                f"unable to locate credentials for profile '{profile.name}'"
            )
        client = session.client("s3")
    except BotoCoreError as exc:
        raise ClientInitError(
            f"unable to load SDK config for profile '{profile.name}' "
            f"in region '{profile.region}': {exc}"
        ) from exc
    LOGGER.debug("Created S3 client for profile '%s' in '%s'", profile.name, profile.region)
    return client
