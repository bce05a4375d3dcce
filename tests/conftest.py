"""Shared pytest fixtures for bucket inventory tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from bucket_inventory.cancellation import CancellationToken
from bucket_inventory.orchestrator import InventoryOrchestrator
from bucket_inventory.region_resolver import RegionResolver
from tests.inventory_test_utils import FakeStorageBackend, kms_encryption


@pytest.fixture(autouse=True)
def stub_boto3_client(monkeypatch):
    """Replace boto3.client so tests never call real AWS."""

    def fake_client(service_name, **kwargs):
        client = MagicMock(name=f"{service_name}-client")
        client.service_name = service_name
        client.client_kwargs = kwargs
        return client

    monkeypatch.setattr("boto3.client", fake_client)


@pytest.fixture
def token():
    """Fresh, uncancelled token."""
    return CancellationToken()


@pytest.fixture
def backend():
    """Two-bucket account: 'a' in the default region with key k1, 'b' in eu-west-1."""
    return FakeStorageBackend(
        bucket_names=["a", "b"],
        locations={"b": "eu-west-1"},
        encryption={"a": kms_encryption("k1")},
    )


@pytest.fixture
def make_orchestrator():
    """Build an InventoryOrchestrator wired to a fake backend."""

    def _make(fake_backend, **kwargs):
        control_client = fake_backend.client_factory("us-east-1")
        resolver = RegionResolver(control_client, fake_backend.client_factory)
        return InventoryOrchestrator(control_client, resolver, **kwargs)

    return _make
