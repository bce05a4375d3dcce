"""
Storage client adapter.

The pipeline depends on four narrow capabilities rather than on a boto3
client, so each one can be replaced by an in-memory fake in tests.
Boto3StorageClient is the production implementation: a straight passthrough
with no retries and no caching.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol

from botocore.exceptions import ClientError

from .cancellation import CancellationToken
from .client_factory import AwsCredentials, create_s3_client
from .config import LEGACY_EU_LOCATION, LEGACY_EU_REGION
from .errors import BackendError
from .models import AclInfo, BucketDescriptor, BucketRequest, EncryptionInfo


class BucketLister(Protocol):
    def list_buckets(self, token: CancellationToken) -> list[BucketDescriptor]: ...


class BucketAclGetter(Protocol):
    def get_bucket_acl(self, token: CancellationToken, request: BucketRequest) -> AclInfo: ...


class BucketEncryptionGetter(Protocol):
    def get_bucket_encryption(
        self, token: CancellationToken, request: BucketRequest
    ) -> Optional[EncryptionInfo]: ...


class BucketLocationGetter(Protocol):
    def get_bucket_location(self, token: CancellationToken, request: BucketRequest) -> str: ...


class StorageClient(BucketLister, BucketAclGetter, BucketEncryptionGetter, BucketLocationGetter, Protocol):
    """All four capabilities together."""


ClientFactory = Callable[[str], StorageClient]


def fault_from_client_error(error: ClientError) -> str:
    """Classify a ClientError as a client or server fault."""
    error_type = error.response.get("Error", {}).get("Type")
    if error_type == "Sender":
        return "client"
    if error_type == "Receiver":
        return "server"
    status = error.response.get("ResponseMetadata", {}).get("HTTPStatusCode")
    if status is None:
        return "unknown"
    if status >= 500:
        return "server"
    if status >= 400:
        return "client"
    return "unknown"


def to_backend_error(operation: str, error: ClientError) -> BackendError:
    """Convert a botocore ClientError into a BackendError."""
    details = error.response.get("Error", {})
    return BackendError(
        operation,
        code=details.get("Code", "Unknown"),
        message=details.get("Message", str(error)),
        fault=fault_from_client_error(error),
    )


class Boto3StorageClient:
    """StorageClient backed by a boto3 S3 client."""

    def __init__(self, s3_client, region: Optional[str] = None):
        self.s3 = s3_client
        self.region = region

    def _call(self, token: CancellationToken, operation: str, method_name: str, **params) -> dict:
        token.raise_if_cancelled(operation)
        try:
            return getattr(self.s3, method_name)(**params)
        except ClientError as e:
            raise to_backend_error(operation, e) from e

    def list_buckets(self, token: CancellationToken) -> list[BucketDescriptor]:
        response = self._call(token, "ListBuckets", "list_buckets")
        return [BucketDescriptor.from_response(bucket) for bucket in response.get("Buckets", [])]

    def get_bucket_acl(self, token: CancellationToken, request: BucketRequest) -> AclInfo:
        response = self._call(token, "GetBucketAcl", "get_bucket_acl", **request.to_params())
        return AclInfo.from_response(response)

    def get_bucket_encryption(
        self, token: CancellationToken, request: BucketRequest
    ) -> Optional[EncryptionInfo]:
        response = self._call(
            token, "GetBucketEncryption", "get_bucket_encryption", **request.to_params()
        )
        return EncryptionInfo.from_response(response)

    def get_bucket_location(self, token: CancellationToken, request: BucketRequest) -> str:
        response = self._call(
            token,
            "GetBucketLocation",
            "get_bucket_location",
            **request.to_params(include_owner=False),
        )
        location = response.get("LocationConstraint") or ""
        # Buckets created before region names existed still report "EU"
        if location == LEGACY_EU_LOCATION:
            return LEGACY_EU_REGION
        return location


def boto3_client_factory(credentials: AwsCredentials) -> ClientFactory:
    """Return a factory producing a fresh Boto3StorageClient per region."""

    def _factory(region: str) -> StorageClient:
        return Boto3StorageClient(create_s3_client(region, credentials), region=region)

    return _factory
