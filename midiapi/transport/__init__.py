"""
Transport layer for MIDI API communication.

This package provides the device sessions that command frames are handed to.

Available transports:
- AsyncSerialTransport: Async serial/USB-MIDI port using pyserial-asyncio
- MockTransport: Mock transport for testing without hardware

Example:
    >>> from midiapi.transport import AsyncSerialTransport
    >>> async with AsyncSerialTransport("/dev/ttyACM0") as transport:
    ...     await transport.write(frame)

Testing Example:
    >>> from midiapi.transport import MockTransport
    >>> mock = MockTransport()
    >>> mock.fail_next_write()
"""

from midiapi.transport.abc import AbstractTransport
from midiapi.transport.mock import MockTransport
from midiapi.transport.serial_async import AsyncSerialTransport

__all__ = [
    "AbstractTransport",
    "AsyncSerialTransport",
    "MockTransport",
]
