"""
Region resolution for S3 buckets.

S3 only answers ACL and encryption requests correctly on the bucket's own
regional endpoint, so every bucket gets a client bound to the region its
location query reports.
"""

from __future__ import annotations

import logging

from .cancellation import CancellationToken
from .client_adapter import BucketLocationGetter, ClientFactory
from .config import DEFAULT_REGION
from .errors import LocationLookupError, RunCancelledError
from .models import BucketRequest, RegionBinding


def normalize_location(location_constraint: str | None, default_region: str = DEFAULT_REGION) -> str:
    """
    Map a LocationConstraint to a region name.

    S3 encodes the default region as an empty (or missing) constraint.
    """
    return location_constraint if location_constraint else default_region


class RegionResolver:
    """Resolves a bucket's region and builds a client bound to it."""

    def __init__(
        self,
        control_client: BucketLocationGetter,
        client_factory: ClientFactory,
        default_region: str = DEFAULT_REGION,
    ):
        self.control_client = control_client
        self.client_factory = client_factory
        self.default_region = default_region

    def resolve_region(self, token: CancellationToken, bucket_name: str) -> RegionBinding:
        """
        Query the bucket's location and return a freshly bound client.

        Raises:
            LocationLookupError: If the location query fails for any reason
            RunCancelledError: If the run was cancelled
        """
        try:
            location = self.control_client.get_bucket_location(token, BucketRequest(bucket_name))
        except RunCancelledError:
            raise
        except Exception as e:
            raise LocationLookupError(bucket_name, e) from e

        region = normalize_location(location, self.default_region)
        logging.debug("Bucket %s resolved to region %s", bucket_name, region)
        return RegionBinding(region=region, client=self.client_factory(region))
