"""
midiapi - Python library for sending commands to Aila MIDI devices.

This library encodes typed commands into checksummed, length-framed packets,
wraps them in the 4-byte USB-MIDI SysEx chunk layout, and hands the result to
an async device session.

Example:
    >>> from midiapi import CommandClient
    >>> from midiapi.transport import AsyncSerialTransport
    >>>
    >>> async def main():
    ...     transport = AsyncSerialTransport("/dev/ttyACM0")
    ...     async with CommandClient(transport) as client:
    ...         await client.beep()

Encoding without a device:
    >>> from midiapi import CommandEncoder
    >>> frame = CommandEncoder().encode_command("flash", duration=250)
"""

from midiapi.protocol import (
    DEFAULT_CATALOG,
    ChunkStatus,
    CommandCatalog,
    CommandEncoder,
    CommandSpec,
    Opcode,
    SequenceCounter,
    build_packet,
    calculate_checksum,
    encode_transport_frame,
)
from midiapi.models import RawPacket
from midiapi.exceptions import (
    ChecksumError,
    ConnectionError,
    MidiApiError,
    PayloadTooLargeError,
    ProtocolError,
    TransportError,
    TransportSendError,
    UnknownCommandError,
)
from midiapi.client import ClientState, CommandClient, StatusSink
from midiapi.transport import AbstractTransport, AsyncSerialTransport, MockTransport

__version__ = "0.1.0"
__all__ = [
    # Client
    "CommandClient",
    "ClientState",
    "StatusSink",
    # Codec
    "CommandEncoder",
    "CommandCatalog",
    "CommandSpec",
    "DEFAULT_CATALOG",
    "SequenceCounter",
    "Opcode",
    "ChunkStatus",
    "build_packet",
    "calculate_checksum",
    "encode_transport_frame",
    # Models
    "RawPacket",
    # Exceptions
    "MidiApiError",
    "ProtocolError",
    "UnknownCommandError",
    "PayloadTooLargeError",
    "ChecksumError",
    "ConnectionError",
    "TransportError",
    "TransportSendError",
    # Transport
    "AbstractTransport",
    "AsyncSerialTransport",
    "MockTransport",
    # Version
    "__version__",
]
