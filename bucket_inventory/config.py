"""
Configuration for the bucket inventory run.

Credentials are read from a .env file (see client_factory); everything else
has a sensible default and can be overridden from the command line.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

# S3 reports an empty LocationConstraint for buckets in the default region
DEFAULT_REGION: str = "us-east-1"

# Legacy LocationConstraint value still returned for some older buckets
LEGACY_EU_LOCATION: str = "EU"
LEGACY_EU_REGION: str = "eu-west-1"

# Error code S3 returns when a bucket has no default encryption configured
ENCRYPTION_NOT_FOUND_CODE: str = "ServerSideEncryptionConfigurationNotFoundError"

# Environment variables read by the credential loader
ENV_FILE_VARIABLE: str = "AWS_ENV_FILE"
ACCESS_KEY_VARIABLE: str = "AWS_ACCESS_KEY_ID"
SECRET_KEY_VARIABLE: str = "AWS_SECRET_ACCESS_KEY"
SESSION_TOKEN_VARIABLE: str = "AWS_SESSION_TOKEN"

# Marker printed when a bucket has no default KMS key
ABSENT_KEY_MARKER: str = "none"


class AclFailurePolicy(Enum):
    """How the orchestrator reacts to an ACL lookup failure"""

    FATAL = "fatal"
    SKIP = "skip"


@dataclass(frozen=True)
class InventorySettings:
    """Settings for one inventory run."""

    env_path: Optional[str] = None
    # Endpoint for ListBuckets and GetBucketLocation only; an empty
    # LocationConstraint always means DEFAULT_REGION
    control_region: str = DEFAULT_REGION
    acl_failure_policy: AclFailurePolicy = AclFailurePolicy.FATAL
    verbose: bool = False
