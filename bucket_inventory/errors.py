"""
Error taxonomy for the bucket inventory run.

Only EncryptionLookupError is absorbed by the pipeline; every other error
aborts the run.
"""

from __future__ import annotations


class InventoryError(Exception):
    """Base class for all inventory errors."""


class ConfigError(InventoryError):
    """Raised when credentials or settings cannot be loaded."""


class RunCancelledError(InventoryError):
    """Raised when the caller cancelled the run."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"Run cancelled before {operation}")
        self.operation = operation


class BackendError(InventoryError):
    """Structured S3 API error carrying the code, message and fault category."""

    def __init__(self, operation: str, code: str, message: str, fault: str) -> None:
        super().__init__(f"{operation} failed: {code}: {message}")
        self.operation = operation
        self.code = code
        self.message = message
        self.fault = fault


class ListingError(InventoryError):
    """Raised when the bucket listing call fails."""


class _BucketLookupError(InventoryError):
    description = "lookup"

    def __init__(self, bucket_name: str, cause: BaseException) -> None:
        super().__init__(f"Failed to retrieve {self.description} for bucket {bucket_name}: {cause}")
        self.bucket_name = bucket_name
        self.cause = cause


class LocationLookupError(_BucketLookupError):
    """Raised when a bucket's location cannot be determined."""

    description = "location"


class AclLookupError(_BucketLookupError):
    """Raised when a bucket's ACL cannot be retrieved."""

    description = "ACL"


class EncryptionLookupError(_BucketLookupError):
    """Recoverable failure retrieving a bucket's default encryption."""

    description = "encryption"
