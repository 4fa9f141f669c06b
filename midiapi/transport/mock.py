"""
Mock transport for testing.

This module provides a mock device session that records every frame written
to it, so the command client can be tested without hardware. Open and write
failures can be injected to exercise error paths.

Example:
    >>> from midiapi.transport import MockTransport
    >>> from midiapi import CommandClient
    >>>
    >>> mock = MockTransport()
    >>> async with CommandClient(mock) as client:
    ...     await client.beep()
    >>> len(mock.last_written)
    20
"""

from __future__ import annotations

from collections.abc import Callable

from midiapi.exceptions import TransportError
from midiapi.transport.abc import AbstractTransport


class MockTransport(AbstractTransport):
    """
    Mock transport for testing without hardware.

    Attributes:
        written_data: List of all frames written to the transport.
        open_count: Number of successful open() calls.
    """

    def __init__(self, port_name: str = "mock://midi") -> None:
        """
        Initialize the mock transport.

        Args:
            port_name: Identifier for the mock transport.
        """
        self._port_name = port_name
        self._is_open = False
        self._written_data: list[bytes] = []
        self._open_error: Exception | None = None
        self._write_errors: list[Exception] = []
        self._write_callback: Callable[[bytes], None] | None = None
        self.open_count = 0

    @property
    def is_open(self) -> bool:
        """Check if the mock transport is open."""
        return self._is_open

    @property
    def port_name(self) -> str:
        """Get the mock port name."""
        return self._port_name

    @property
    def written_data(self) -> list[bytes]:
        """Get all data written to the transport."""
        return self._written_data.copy()

    @property
    def last_written(self) -> bytes | None:
        """Get the most recently written data."""
        return self._written_data[-1] if self._written_data else None

    def fail_next_open(self, error: Exception | None = None) -> None:
        """
        Make the next open() call raise.

        Args:
            error: Exception to raise (TransportError if None).
        """
        self._open_error = error or TransportError("Mock device unavailable")

    def fail_next_write(self, error: Exception | None = None) -> None:
        """
        Make the next write() call raise instead of recording the frame.

        Calls queue up: each one fails one more write.

        Args:
            error: Exception to raise (TransportError if None).
        """
        self._write_errors.append(error or TransportError("Mock write failed"))

    def set_write_callback(self, callback: Callable[[bytes], None] | None) -> None:
        """
        Set a callback invoked with each frame after it is recorded.
        """
        self._write_callback = callback

    def clear(self) -> None:
        """Clear written data and any pending injected failures."""
        self._written_data.clear()
        self._write_errors.clear()
        self._open_error = None

    async def open(self) -> None:
        """Open the mock transport."""
        if self._is_open:
            raise TransportError("Mock transport already open")
        if self._open_error is not None:
            error, self._open_error = self._open_error, None
            raise error
        self._is_open = True
        self.open_count += 1

    async def close(self) -> None:
        """Close the mock transport."""
        self._is_open = False

    async def write(self, data: bytes) -> None:
        """
        Record a frame written to the mock transport.

        Raises:
            TransportError: If transport is not open or a failure was injected.
        """
        if not self._is_open:
            raise TransportError("Mock transport not open")

        if self._write_errors:
            raise self._write_errors.pop(0)

        self._written_data.append(bytes(data))

        if self._write_callback:
            self._write_callback(bytes(data))

    def assert_written(self, expected: bytes, index: int = -1) -> None:
        """
        Assert that specific data was written.

        Args:
            expected: Expected bytes.
            index: Index in written_data list (-1 for last).

        Raises:
            AssertionError: If data doesn't match.
        """
        if not self._written_data:
            raise AssertionError("No data written to mock transport")

        actual = self._written_data[index]
        if actual != expected:
            raise AssertionError(f"Written data mismatch: expected {expected!r}, got {actual!r}")

    def assert_write_count(self, expected: int) -> None:
        """
        Assert number of write operations.

        Raises:
            AssertionError: If count doesn't match.
        """
        actual = len(self._written_data)
        if actual != expected:
            raise AssertionError(f"Write count mismatch: expected {expected}, got {actual}")

    def __repr__(self) -> str:
        status = "open" if self._is_open else "closed"
        return f"MockTransport({self._port_name!r}, writes={len(self._written_data)}, {status})"
