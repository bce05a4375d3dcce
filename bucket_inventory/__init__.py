"""
Bucket inventory package.

List every S3 bucket in an account with its region, ACL check and default
server-side encryption key.
"""

from .cancellation import CancellationToken
from .errors import (
    AclLookupError,
    BackendError,
    ConfigError,
    EncryptionLookupError,
    InventoryError,
    ListingError,
    LocationLookupError,
    RunCancelledError,
)
from .models import (
    AclInfo,
    BucketDescriptor,
    BucketRequest,
    EncryptionInfo,
    EncryptionRule,
    InventoryRecord,
    InventoryReport,
    RegionBinding,
)
from .orchestrator import InventoryOrchestrator, RunPhase, build_record

__all__ = [
    "AclInfo",
    "AclLookupError",
    "BackendError",
    "BucketDescriptor",
    "BucketRequest",
    "CancellationToken",
    "ConfigError",
    "EncryptionInfo",
    "EncryptionLookupError",
    "EncryptionRule",
    "InventoryError",
    "InventoryOrchestrator",
    "InventoryRecord",
    "InventoryReport",
    "ListingError",
    "LocationLookupError",
    "RegionBinding",
    "RunCancelledError",
    "RunPhase",
    "build_record",
]
