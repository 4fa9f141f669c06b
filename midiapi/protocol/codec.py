"""
Command encoding pipeline: resolve, sequence, build, checksum, chunk.

CommandEncoder is the single entry point between a command name and the
bytes handed to a device session. It owns the session's SequenceCounter;
create one encoder per device session.

Example:
    >>> encoder = CommandEncoder()
    >>> frame = encoder.encode_command("beep")
    >>> len(frame)
    20
"""

from __future__ import annotations

from midiapi.models.packets import RawPacket
from midiapi.protocol.chunking import encode_transport_frame
from midiapi.protocol.commands import DEFAULT_CATALOG, CommandCatalog
from midiapi.protocol.packet_builder import build_packet
from midiapi.protocol.sequence import SequenceCounter


class CommandEncoder:
    """
    Encodes named commands into transport frames for one session.

    The sequence counter advances before the packet is built, so a command
    that fails to encode still consumes a sequence number. Receivers do not
    rely on contiguous numbering.

    Attributes:
        catalog: Commands this encoder can resolve.
        sequence: Session-scoped sequence counter.
    """

    def __init__(
        self,
        catalog: CommandCatalog | None = None,
        sequence: SequenceCounter | None = None,
    ) -> None:
        """
        Initialize the encoder.

        Args:
            catalog: Command catalog (default catalog if None).
            sequence: Sequence counter to draw from (fresh counter if None).
        """
        self._catalog = catalog if catalog is not None else DEFAULT_CATALOG
        self._sequence = sequence if sequence is not None else SequenceCounter()

    @property
    def catalog(self) -> CommandCatalog:
        """Get the command catalog."""
        return self._catalog

    @property
    def sequence(self) -> SequenceCounter:
        """Get the session sequence counter."""
        return self._sequence

    def build(self, command_name: str, **args: int) -> RawPacket:
        """
        Build the next raw packet for a command.

        Raises:
            UnknownCommandError: If the command is not registered.
            PayloadTooLargeError: If the encoded payload exceeds 255 bytes.
        """
        return build_packet(command_name, self._sequence.next(), self._catalog, **args)

    def encode_packet(self, command_name: str, **args: int) -> tuple[RawPacket, bytes]:
        """
        Build a packet and its transport frame.

        Returns:
            The raw packet and the chunked frame carrying it.
        """
        packet = self.build(command_name, **args)
        return packet, encode_transport_frame(packet.to_bytes())

    def encode_command(self, command_name: str, **args: int) -> bytes:
        """
        Encode a command all the way to a transport frame.

        Args:
            command_name: Registered command name.
            **args: Command arguments (e.g. duration=500). Arguments are
                keyword-only; positional arguments raise TypeError.

        Returns:
            Transport frame bytes ready for the device session.
        """
        _, frame = self.encode_packet(command_name, **args)
        return frame

    def reset(self) -> None:
        """Reset the sequence counter at session teardown."""
        self._sequence.reset()

    def __repr__(self) -> str:
        return f"CommandEncoder(commands={self._catalog.names()}, sequence={self._sequence.value})"
