"""Assertion helpers for bucket inventory tests, with failure messages showing both values."""

from __future__ import annotations


def assert_equal(actual, expected, *, message: str | None = None) -> None:
    """Assert equality with a clearer error message."""
    failure_message = message or f"Expected {expected!r} but received {actual!r}"
    assert actual == expected, failure_message


def assert_record_keys(report, expected: list[tuple[str, str | None]]) -> None:
    """Assert a report's (name, kms_key_id) pairs in order."""
    assert_equal([(record.name, record.kms_key_id) for record in report], expected)
