"""
Session-scoped packet sequence counter.

Each packet carries a 16-bit sequence number. The counter starts at 0 and
pre-increments, so the first packet of a session is numbered 1. After 0xFFFF
the counter wraps to 0x0000.

Commands may be issued from several threads at once (UI callbacks, worker
threads), so increments are serialized with a lock and no two callers ever
observe the same value.
"""

from __future__ import annotations

import threading

from midiapi.protocol.constants import ProtocolConstants


class SequenceCounter:
    """
    Thread-safe, wrapping 16-bit sequence generator.

    Example:
        >>> counter = SequenceCounter()
        >>> counter.next()
        1
        >>> counter.next()
        2
        >>> counter.value
        2
    """

    def __init__(self, start: int = 0) -> None:
        """
        Initialize the counter.

        Args:
            start: Value before the first increment (0 for a fresh session).

        Raises:
            ValueError: If start is not a 16-bit value.
        """
        if not 0 <= start <= ProtocolConstants.SEQUENCE_MASK:
            raise ValueError(f"Sequence start must be 0-65535, got {start}")
        self._value = start
        self._lock = threading.Lock()

    @property
    def value(self) -> int:
        """Get the most recently issued sequence number."""
        with self._lock:
            return self._value

    def next(self) -> int:
        """
        Advance the counter and return the new value.

        Returns:
            Next sequence number (0-65535).
        """
        with self._lock:
            self._value = (self._value + 1) & ProtocolConstants.SEQUENCE_MASK
            return self._value

    def reset(self) -> None:
        """Return the counter to 0 at session teardown."""
        with self._lock:
            self._value = 0

    def __repr__(self) -> str:
        return f"SequenceCounter(value={self._value})"
