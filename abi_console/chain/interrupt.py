"""
One-shot interrupt notice for live event watching.

While active, SIGINT and SIGTERM set a flag instead of raising
KeyboardInterrupt, so the watch loop can release its subscription before
returning. Previous handlers are restored on exit.
"""

import signal
import threading


class InterruptNotice:
    """Context manager turning interrupt signals into a waitable flag."""

    def __init__(self, signals=(signal.SIGINT, signal.SIGTERM)):
        self._event = threading.Event()
        self._signals = signals
        self._previous = {}

    def __enter__(self) -> "InterruptNotice":
        for sig in self._signals:
            self._previous[sig] = signal.signal(sig, self._handle)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        for sig, handler in self._previous.items():
            signal.signal(sig, handler)
        self._previous.clear()

    def _handle(self, signum, frame) -> None:
        self._event.set()

    def is_set(self) -> bool:
        return self._event.is_set()

    def wait(self, timeout: float) -> bool:
        """Block until interrupted or timeout expires. True if interrupted."""
        return self._event.wait(timeout)
