"""
Exception hierarchy for midiapi.

All exceptions inherit from MidiApiError, providing a clean hierarchy
for error handling:

1. Protocol errors (unknown command, oversized payload, checksum) are raised
   while encoding and never touch the device
2. Connection errors mean no device session is available
3. Transport errors come from the device session itself and are surfaced
   to the caller unchanged, never retried
"""

from __future__ import annotations


class MidiApiError(Exception):
    """
    Base exception for all midiapi errors.

    All library-specific exceptions inherit from this class, allowing
    callers to catch all midiapi errors with a single except clause.
    """

    pass


class ProtocolError(MidiApiError):
    """
    Protocol-level error.

    Raised when a command cannot be encoded into a valid packet.
    """

    pass


class UnknownCommandError(ProtocolError):
    """
    Command name is not registered in the command catalog.
    """

    def __init__(self, name: str, *, known: list[str] | None = None) -> None:
        self.name = name
        self.known = known or []
        message = f"Unknown command '{name}'"
        if self.known:
            message += f". Valid: {self.known}"
        super().__init__(message)


class PayloadTooLargeError(ProtocolError):
    """
    Encoded payload does not fit the single-byte payload length field.
    """

    def __init__(self, size: int, *, limit: int = 0xFF, command: str | None = None) -> None:
        self.size = size
        self.limit = limit
        self.command = command
        target = f" for '{command}'" if command else ""
        super().__init__(f"Payload{target} is {size} bytes, limit is {limit}")


class ChecksumError(ProtocolError):
    """
    Checksum validation failure.

    Raised when a packet's stored checksum doesn't match the calculated value.
    """

    def __init__(
        self,
        message: str = "Checksum validation failed",
        *,
        expected: int | None = None,
        received: int | None = None,
    ) -> None:
        super().__init__(message)
        self.expected = expected
        self.received = received

    def __str__(self) -> str:
        base = super().__str__()
        if self.expected is not None and self.received is not None:
            return f"{base} (expected 0x{self.expected:08X}, got 0x{self.received:08X})"
        return base


class ConnectionError(MidiApiError):  # noqa: A001 - intentionally shadows builtin
    """
    Device session error.

    Raised when:
    - The device cannot be opened
    - A command is sent while no session is open
    """

    pass


class TransportError(MidiApiError):
    """
    Transport-level error.

    Raised for low-level transport issues:
    - Serial port errors
    - I/O errors
    - Hardware communication failures
    """

    pass


class TransportSendError(TransportError):
    """
    The device session rejected or failed to deliver a frame.

    The codec never retries; the caller decides whether to send again.
    """

    def __init__(self, message: str, *, frame: bytes | None = None) -> None:
        super().__init__(message)
        self.frame = frame
