#!/usr/bin/env python3
"""
List every S3 bucket in the account with its default encryption key.

Each bucket is queried through a client bound to its own region. Buckets
without default encryption are reported with KeyID "none".

This is a thin wrapper around the bucket_inventory package.
"""
from __future__ import annotations

from bucket_inventory.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
