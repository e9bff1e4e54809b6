"""Absolute deadline for the reply collection loop."""

import time


class Deadline:
    """A fixed point in time, set once when constructed.

    Unlike a per-read timeout, the remaining time shrinks with every read, so
    a steady stream of replies cannot extend the collection window.
    """

    def __init__(self, timeout: float):
        """Start the deadline.

        Args:
            timeout: Seconds from now until expiry.
        """
        self.timeout = timeout
        self._start_time = time.monotonic()

    @property
    def elapsed(self) -> float:
        """Seconds elapsed since start."""
        return time.monotonic() - self._start_time

    @property
    def remaining(self) -> float:
        """Seconds remaining before expiry, never negative."""
        return max(0.0, self.timeout - self.elapsed)
