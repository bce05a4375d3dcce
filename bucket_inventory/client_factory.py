#!/usr/bin/env python3
"""
AWS Client Factory Module
Loads credentials from a .env file and creates region-scoped S3 clients.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import boto3
from dotenv import load_dotenv

from .config import (
    ACCESS_KEY_VARIABLE,
    ENV_FILE_VARIABLE,
    SECRET_KEY_VARIABLE,
    SESSION_TOKEN_VARIABLE,
)
from .errors import ConfigError


@dataclass(frozen=True)
class AwsCredentials:
    """Static credentials used for every S3 client of a run."""

    aws_access_key_id: str
    aws_secret_access_key: str
    aws_session_token: Optional[str] = None

    def as_client_kwargs(self) -> dict:
        client_kwargs = {
            "aws_access_key_id": self.aws_access_key_id,
            "aws_secret_access_key": self.aws_secret_access_key,
        }
        if self.aws_session_token:
            client_kwargs["aws_session_token"] = self.aws_session_token
        return client_kwargs


def resolve_env_path(env_path: Optional[str] = None) -> str:
    """
    Determine which .env file should be used for AWS credentials.

    Priority order:
      1. Explicit parameter
      2. AWS_ENV_FILE environment variable
      3. ~/.env
    """
    if env_path:
        return env_path
    aws_env_file = os.environ.get(ENV_FILE_VARIABLE)
    if aws_env_file:
        return aws_env_file
    return str(Path.home() / ".env")


def load_credentials_from_env(env_path: Optional[str] = None) -> AwsCredentials:
    """
    Load AWS credentials from a .env file.

    Args:
        env_path: Optional override path (defaults to AWS_ENV_FILE, then ~/.env)

    Returns:
        AwsCredentials: access key, secret key and optional session token

    Raises:
        ConfigError: If credentials are not found
    """
    resolved_path = resolve_env_path(env_path)
    load_dotenv(resolved_path)

    aws_access_key_id = os.getenv(ACCESS_KEY_VARIABLE)
    aws_secret_access_key = os.getenv(SECRET_KEY_VARIABLE)
    aws_session_token = os.getenv(SESSION_TOKEN_VARIABLE)
    if aws_access_key_id and aws_secret_access_key:
        logging.info("✅ AWS credentials loaded from %s", resolved_path)
        if aws_session_token:
            logging.info("✅ AWS session token loaded from %s", resolved_path)
        return AwsCredentials(aws_access_key_id, aws_secret_access_key, aws_session_token)

    raise ConfigError(f"AWS credentials not found in {resolved_path}")


def create_s3_client(region: str, credentials: AwsCredentials):
    """
    Create an S3 boto3 client bound to a region.

    Args:
        region: AWS region name
        credentials: Credentials loaded for this run

    Returns:
        boto3.client: Configured S3 client
    """
    return boto3.client("s3", region_name=region, **credentials.as_client_kwargs())
