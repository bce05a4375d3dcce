"""
Data model for the bucket inventory pipeline.

Backend payloads are converted into these frozen dataclasses at the adapter
boundary so the rest of the pipeline never touches raw boto3 dictionaries.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .client_adapter import StorageClient


@dataclass(frozen=True)
class BucketDescriptor:
    """A bucket as returned by ListBuckets."""

    name: str
    creation_date: Optional[datetime] = None

    @classmethod
    def from_response(cls, bucket: dict) -> "BucketDescriptor":
        return cls(name=bucket["Name"], creation_date=bucket.get("CreationDate"))


@dataclass(frozen=True)
class BucketRequest:
    """Request shape for the per-bucket ACL, encryption and location calls."""

    bucket: str
    expected_bucket_owner: Optional[str] = None

    def to_params(self, include_owner: bool = True) -> dict:
        """Build boto3 keyword arguments, omitting the owner when unset."""
        params = {"Bucket": self.bucket}
        if include_owner and self.expected_bucket_owner:
            params["ExpectedBucketOwner"] = self.expected_bucket_owner
        return params


@dataclass(frozen=True)
class RegionBinding:
    """A storage client bound to the region of exactly one bucket."""

    region: str
    client: "StorageClient"


@dataclass(frozen=True)
class AclInfo:
    """Access control list of a bucket."""

    owner: Optional[str] = None
    grants: tuple[dict, ...] = ()

    @classmethod
    def from_response(cls, response: dict) -> "AclInfo":
        owner = response.get("Owner") or {}
        return cls(
            owner=owner.get("ID") or owner.get("DisplayName"),
            grants=tuple(response.get("Grants", [])),
        )


@dataclass(frozen=True)
class EncryptionRule:
    """One default server-side encryption rule."""

    algorithm: str
    kms_key_id: Optional[str] = None
    bucket_key_enabled: Optional[bool] = None

    @classmethod
    def from_response(cls, rule: dict) -> "EncryptionRule":
        default = rule.get("ApplyServerSideEncryptionByDefault", {})
        return cls(
            algorithm=default.get("SSEAlgorithm", ""),
            kms_key_id=default.get("KMSMasterKeyID"),
            bucket_key_enabled=rule.get("BucketKeyEnabled"),
        )


@dataclass(frozen=True)
class EncryptionInfo:
    """Default encryption configuration; always holds at least one rule."""

    rules: tuple[EncryptionRule, ...]

    def __post_init__(self):
        if not self.rules:
            raise ValueError("EncryptionInfo requires at least one rule")

    @property
    def default_rule(self) -> EncryptionRule:
        return self.rules[0]

    @classmethod
    def from_response(cls, response: dict) -> Optional["EncryptionInfo"]:
        """Parse GetBucketEncryption output; None when no rules are present."""
        configuration = response.get("ServerSideEncryptionConfiguration") or {}
        rules = tuple(EncryptionRule.from_response(rule) for rule in configuration.get("Rules", []))
        if not rules:
            return None
        return cls(rules=rules)


@dataclass(frozen=True)
class InventoryRecord:
    """Per-bucket output line; kms_key_id None means no default key."""

    name: str
    kms_key_id: Optional[str] = None
    region: Optional[str] = None
    algorithm: Optional[str] = None


@dataclass
class InventoryReport:
    """Ordered records of a completed run."""

    records: list[InventoryRecord] = field(default_factory=list)

    def append(self, record: InventoryRecord) -> None:
        self.records.append(record)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self):
        return iter(self.records)

    @property
    def encrypted_count(self) -> int:
        """Number of buckets with a default KMS key."""
        return sum(1 for record in self.records if record.kms_key_id is not None)
