"""
ACL and default encryption lookups for a single bucket.

Encryption lookups fail routinely: S3 answers with an error, not an empty
result, when a bucket has no default encryption. Those failures are logged
and absorbed. ACL failures are raised to the orchestrator.
"""

from __future__ import annotations

import logging
from typing import Optional

from .cancellation import CancellationToken
from .config import ENCRYPTION_NOT_FOUND_CODE
from .errors import AclLookupError, BackendError, EncryptionLookupError, RunCancelledError
from .models import AclInfo, BucketRequest, EncryptionInfo, RegionBinding


def _log_encryption_failure(bucket_name: str, error: Exception) -> None:
    """Log an absorbed encryption lookup failure."""
    if isinstance(error, BackendError):
        level = logging.INFO if error.code == ENCRYPTION_NOT_FOUND_CODE else logging.WARNING
        logging.log(
            level,
            "Got an API error retrieving bucket encryption bucket: %s, code: %s, message: %s, fault: %s",
            bucket_name,
            error.code,
            error.message,
            error.fault,
        )
    else:
        logging.warning(
            "Got an error retrieving bucket encryption: %s", EncryptionLookupError(bucket_name, error)
        )


class BucketInspector:
    """Fetches ACL and encryption metadata through a region-bound client."""

    def fetch_acl(self, token: CancellationToken, binding: RegionBinding, bucket_name: str) -> AclInfo:
        """
        Retrieve the bucket's ACL.

        Raises:
            AclLookupError: If the lookup fails for any reason
            RunCancelledError: If the run was cancelled
        """
        try:
            return binding.client.get_bucket_acl(token, BucketRequest(bucket_name))
        except RunCancelledError:
            raise
        except Exception as e:
            raise AclLookupError(bucket_name, e) from e

    def fetch_encryption(
        self, token: CancellationToken, binding: RegionBinding, bucket_name: str
    ) -> Optional[EncryptionInfo]:
        """
        Retrieve the bucket's default encryption configuration.

        Returns None when the bucket has no default encryption or the lookup
        fails; only cancellation is raised.
        """
        try:
            return binding.client.get_bucket_encryption(token, BucketRequest(bucket_name))
        except RunCancelledError:
            raise
        except Exception as e:  # noqa: BLE001
            _log_encryption_failure(bucket_name, e)
            return None
