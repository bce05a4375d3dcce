"""
Inventory orchestrator.

Lists buckets once, then processes them one at a time in listing order:
resolve region, fetch ACL, fetch encryption, record. Listing, location and
ACL failures abort the run (ACL failures can be downgraded with
AclFailurePolicy.SKIP); encryption failures never do.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional

from .bucket_inspector import BucketInspector
from .cancellation import CancellationToken
from .client_adapter import BucketLister
from .config import AclFailurePolicy
from .errors import AclLookupError, InventoryError, ListingError, RunCancelledError
from .models import (
    BucketDescriptor,
    EncryptionInfo,
    InventoryRecord,
    InventoryReport,
    RegionBinding,
)
from .region_resolver import RegionResolver


class RunPhase(Enum):
    """Inventory run phases"""

    LISTING = "listing"
    RESOLVING_REGION = "resolving_region"
    INSPECTING_ACL = "inspecting_acl"
    INSPECTING_ENCRYPTION = "inspecting_encryption"
    RECORDED = "recorded"
    DONE = "done"
    ABORTED = "aborted"


def build_record(
    bucket: BucketDescriptor, binding: RegionBinding, encryption: Optional[EncryptionInfo]
) -> InventoryRecord:
    """Build the inventory record from the default encryption rule, if any."""
    if encryption is None:
        return InventoryRecord(name=bucket.name, region=binding.region)
    rule = encryption.default_rule
    return InventoryRecord(
        name=bucket.name,
        kms_key_id=rule.kms_key_id,
        region=binding.region,
        algorithm=rule.algorithm,
    )


class InventoryOrchestrator:
    """Drives the sequential per-bucket inventory pipeline"""

    def __init__(
        self,
        lister: BucketLister,
        resolver: RegionResolver,
        inspector: Optional[BucketInspector] = None,
        acl_policy: AclFailurePolicy = AclFailurePolicy.FATAL,
    ):
        self.lister = lister
        self.resolver = resolver
        self.inspector = inspector or BucketInspector()
        self.acl_policy = acl_policy
        self.phase: Optional[RunPhase] = None
        self.failed_phase: Optional[RunPhase] = None

    def _list_buckets(self, token: CancellationToken) -> list[BucketDescriptor]:
        self.phase = RunPhase.LISTING
        try:
            return self.lister.list_buckets(token)
        except RunCancelledError:
            raise
        except Exception as e:
            raise ListingError(f"Got an error retrieving buckets: {e}") from e

    def _check_acl(self, token: CancellationToken, binding: RegionBinding, bucket_name: str) -> None:
        self.phase = RunPhase.INSPECTING_ACL
        try:
            self.inspector.fetch_acl(token, binding, bucket_name)
        except AclLookupError as e:
            if self.acl_policy is AclFailurePolicy.FATAL:
                raise
            logging.warning("Skipping ACL check: %s", e)

    def process_bucket(self, token: CancellationToken, bucket: BucketDescriptor) -> InventoryRecord:
        """Run the full pipeline for one bucket with its own region binding."""
        self.phase = RunPhase.RESOLVING_REGION
        binding = self.resolver.resolve_region(token, bucket.name)

        self._check_acl(token, binding, bucket.name)

        self.phase = RunPhase.INSPECTING_ENCRYPTION
        encryption = self.inspector.fetch_encryption(token, binding, bucket.name)

        record = build_record(bucket, binding, encryption)
        self.phase = RunPhase.RECORDED
        return record

    def run(
        self,
        token: CancellationToken,
        on_record: Optional[Callable[[InventoryRecord], None]] = None,
    ) -> InventoryReport:
        """
        Inventory every bucket in the account.

        Args:
            token: Cancellation token checked before every backend call
            on_record: Optional callback invoked as each record is produced

        Returns:
            InventoryReport: One record per bucket, in listing order

        Raises:
            InventoryError: Listing, location, ACL or cancellation failures
            KeyboardInterrupt: A second Ctrl+C interrupted an in-flight call
        """
        report = InventoryReport()
        self.failed_phase = None
        try:
            buckets = self._list_buckets(token)
            logging.info("Found %d bucket(s) to inventory", len(buckets))
            for bucket in buckets:
                record = self.process_bucket(token, bucket)
                report.append(record)
                if on_record is not None:
                    on_record(record)
        except (InventoryError, KeyboardInterrupt):
            self.failed_phase = self.phase
            self.phase = RunPhase.ABORTED
            raise
        self.phase = RunPhase.DONE
        return report
