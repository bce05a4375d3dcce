"""In-memory S3 backend and helpers shared by bucket inventory tests."""

from __future__ import annotations

from datetime import datetime, timezone

from botocore.exceptions import ClientError

from bucket_inventory.errors import BackendError
from bucket_inventory.models import (
    AclInfo,
    BucketDescriptor,
    EncryptionInfo,
    EncryptionRule,
)


def make_client_error(code, operation, message="", status=400):
    """Build a botocore ClientError with the given code and HTTP status."""
    return ClientError(
        {
            "Error": {"Code": code, "Message": message},
            "ResponseMetadata": {"HTTPStatusCode": status},
        },
        operation,
    )


def make_backend_error(code, operation="GetBucketEncryption", message="", fault="client"):
    return BackendError(operation, code=code, message=message, fault=fault)


def kms_encryption(key_id, *extra_keys):
    """EncryptionInfo with one aws:kms rule per key id."""
    return EncryptionInfo(
        rules=tuple(EncryptionRule("aws:kms", kms_key_id=key) for key in (key_id, *extra_keys))
    )


def bucket(name):
    return BucketDescriptor(name=name, creation_date=datetime(2021, 6, 1, tzinfo=timezone.utc))


class FakeStorageBackend:  # pylint: disable=too-many-instance-attributes
    """Account state served to FakeStorageClient instances."""

    def __init__(self, bucket_names=(), locations=None, encryption=None):
        self.buckets = [bucket(name) for name in bucket_names]
        self.locations = dict(locations or {})
        self.encryption = dict(encryption or {})
        self.listing_error = None
        self.location_errors = {}
        self.acl_errors = {}
        self.encryption_errors = {}
        self.calls = []
        self.created_regions = []

    def client_factory(self, region):
        self.created_regions.append(region)
        return FakeStorageClient(self, region)

    def calls_for(self, operation):
        return [call for call in self.calls if call[1] == operation]


class FakeStorageClient:
    """StorageClient serving a FakeStorageBackend, recording every call."""

    def __init__(self, backend, region):
        self.backend = backend
        self.region = region

    def _record(self, token, operation, bucket_name=None):
        token.raise_if_cancelled(operation)
        self.backend.calls.append((self.region, operation, bucket_name))

    def list_buckets(self, token):
        self._record(token, "ListBuckets")
        if self.backend.listing_error is not None:
            raise self.backend.listing_error
        return list(self.backend.buckets)

    def get_bucket_location(self, token, request):
        self._record(token, "GetBucketLocation", request.bucket)
        if request.bucket in self.backend.location_errors:
            raise self.backend.location_errors[request.bucket]
        return self.backend.locations.get(request.bucket, "")

    def get_bucket_acl(self, token, request):
        self._record(token, "GetBucketAcl", request.bucket)
        if request.bucket in self.backend.acl_errors:
            raise self.backend.acl_errors[request.bucket]
        return AclInfo(owner="owner-id", grants=({"Permission": "FULL_CONTROL"},))

    def get_bucket_encryption(self, token, request):
        self._record(token, "GetBucketEncryption", request.bucket)
        if request.bucket in self.backend.encryption_errors:
            raise self.backend.encryption_errors[request.bucket]
        if request.bucket not in self.backend.encryption:
            raise make_backend_error("ServerSideEncryptionConfigurationNotFoundError")
        return self.backend.encryption[request.bucket]
