"""
MIDI API command client.

This module provides the main client interface for sending commands to an
Aila MIDI device over a device session (transport).

The client tracks the session lifecycle:
    DISCONNECTED -> connect() -> CONNECTED
    CONNECTED -> send_command() -> CONNECTED
    CONNECTED -> disconnect() -> DISCONNECTED

Every terminal outcome is reported as a short human-readable string to a
status sink (a UI label, a log line, a test list), for example
"Beep command sent" or "Not connected to a MIDI device".

Example:
    >>> from midiapi import CommandClient
    >>> from midiapi.transport import AsyncSerialTransport
    >>>
    >>> async def main():
    ...     transport = AsyncSerialTransport("/dev/ttyACM0")
    ...     async with CommandClient(transport, status_sink=print) as client:
    ...         await client.beep()
    ...         await client.flash(duration=500)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum, auto
from typing import TYPE_CHECKING

from midiapi.exceptions import (
    ConnectionError,
    ProtocolError,
    TransportError,
    TransportSendError,
)
from midiapi.protocol.codec import CommandEncoder
from midiapi.protocol.constants import ProtocolConstants
from midiapi.protocol.encoding import bytes_to_hex

if TYPE_CHECKING:
    from midiapi.transport.abc import AbstractTransport

# Module logger
logger = logging.getLogger(__name__)

StatusSink = Callable[[str], None]
"""Receives human-readable status strings."""


def log_status(message: str) -> None:
    """Default status sink: write the message to the module logger."""
    logger.info("Status: %s", message)


class ClientState(Enum):
    """Command client session states."""

    DISCONNECTED = auto()
    """No device session open."""

    CONNECTING = auto()
    """Opening the device session."""

    CONNECTED = auto()
    """Session open, commands can be sent."""

    DISCONNECTING = auto()
    """Closing the device session."""


class CommandClient:
    """
    Client for sending MIDI API commands to a device.

    Sends are fire-and-forget: the device does not answer, and a failed send
    is reported and raised but never retried.

    Attributes:
        state: Current session state.
        transport: The underlying device session.
        encoder: Command encoder holding the session sequence counter.
    """

    def __init__(
        self,
        transport: AbstractTransport,
        encoder: CommandEncoder | None = None,
        status_sink: StatusSink | None = None,
    ) -> None:
        """
        Initialize the command client.

        Args:
            transport: Device session frames are written to.
            encoder: Command encoder (a fresh one with the default catalog if None).
            status_sink: Callable receiving status strings (logs them if None).
        """
        self._transport = transport
        self._encoder = encoder if encoder is not None else CommandEncoder()
        self._status_sink = status_sink or log_status
        self._state = ClientState.DISCONNECTED

    @property
    def state(self) -> ClientState:
        """Get the current session state."""
        return self._state

    @property
    def is_connected(self) -> bool:
        """Check if the client has an open device session."""
        return self._state == ClientState.CONNECTED and self._transport.is_open

    @property
    def transport(self) -> AbstractTransport:
        """Get the underlying transport."""
        return self._transport

    @property
    def encoder(self) -> CommandEncoder:
        """Get the command encoder."""
        return self._encoder

    async def connect(self) -> None:
        """
        Open the device session.

        Raises:
            ConnectionError: If already connected or the device cannot be opened.
        """
        if self._state != ClientState.DISCONNECTED:
            raise ConnectionError(
                f"Cannot connect: client is in {self._state.name} state"
            )

        self._state = ClientState.CONNECTING
        logger.info("Opening device session on %s", self._transport.port_name)

        try:
            if not self._transport.is_open:
                await self._transport.open()
        except (TransportError, OSError) as e:
            self._state = ClientState.DISCONNECTED
            logger.error("Failed to open %s: %s", self._transport.port_name, e)
            self._report("Failed to open MIDI device")
            raise ConnectionError(f"Failed to open MIDI device: {e}") from e

        self._state = ClientState.CONNECTED
        self._report("Connected to MIDI device")

    async def disconnect(self) -> None:
        """
        Close the device session and end the sequence numbering session.

        Safe to call even if not connected.
        """
        if self._state == ClientState.DISCONNECTED:
            return

        self._state = ClientState.DISCONNECTING
        try:
            await self._transport.close()
        finally:
            self._encoder.reset()
            self._state = ClientState.DISCONNECTED
            self._report("Disconnected from MIDI device")

    async def send_command(self, command_name: str, **args: int) -> bytes:
        """
        Encode a command and send it to the device.

        Args:
            command_name: Registered command name ("beep", "flash", ...).
            **args: Command arguments (e.g. duration=500).

        Returns:
            The transport frame that was sent.

        Raises:
            ConnectionError: If no device session is open.
            UnknownCommandError: If the command is not registered.
            PayloadTooLargeError: If the encoded payload exceeds 255 bytes.
            TypeError: If an argument is not accepted by the command.
            TransportSendError: If the device session fails to deliver the frame.
        """
        if not self.is_connected:
            self._report("Not connected to a MIDI device")
            raise ConnectionError("Not connected to a MIDI device")

        try:
            packet, frame = self._encoder.encode_packet(command_name, **args)
        except (ProtocolError, TypeError, ValueError) as e:
            logger.error("Error creating %s packet: %s", command_name, e)
            self._report(f"Failed to create {command_name} command")
            raise

        logger.debug("Built %r", packet)

        try:
            await self._transport.write(frame)
        except TransportSendError as e:
            self._report(f"Error sending MIDI command: {e}")
            raise
        except (TransportError, OSError) as e:
            self._report(f"Error sending MIDI command: {e}")
            raise TransportSendError(str(e), frame=frame) from e

        logger.debug("Sent MIDI message, length: %d (%s)", len(frame), bytes_to_hex(frame))
        self._report(f"{command_name.capitalize()} command sent")
        return frame

    async def beep(self, duration: int = ProtocolConstants.DEFAULT_DURATION) -> bytes:
        """
        Sound the device buzzer.

        Args:
            duration: Beep duration, 0 for the device default.
        """
        return await self.send_command("beep", duration=duration)

    async def flash(self, duration: int = ProtocolConstants.DEFAULT_DURATION) -> bytes:
        """
        Flash the device LEDs.

        Args:
            duration: Flash duration, 0 for the device default.
        """
        return await self.send_command("flash", duration=duration)

    def _report(self, message: str) -> None:
        """Forward a status string to the sink."""
        self._status_sink(message)

    async def __aenter__(self) -> CommandClient:
        """Async context manager entry - opens the device session."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - closes the device session."""
        await self.disconnect()

    def __repr__(self) -> str:
        return (
            f"CommandClient(state={self._state.name}, "
            f"port={self._transport.port_name!r}, sequence={self._encoder.sequence.value})"
        )
