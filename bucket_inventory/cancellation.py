"""Cancellation token threaded through every backend call."""

from __future__ import annotations

from threading import Event

from .errors import RunCancelledError


class CancellationToken:
    """Cooperative cancellation flag shared between the CLI and the pipeline."""

    def __init__(self) -> None:
        self._event = Event()

    def cancel(self) -> None:
        """Request cancellation; the next backend call will fail."""
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self, operation: str) -> None:
        """Raise RunCancelledError when cancellation was requested."""
        if self._event.is_set():
            raise RunCancelledError(operation)
