"""
Pydantic model for raw MIDI API command packets.

Packet layout (all multi-byte fields big-endian)::

    +------+----------+----------+--------+-----+-----------+--------+
    | Sync | Checksum | Sequence | Opcode | Len |  Payload  | Footer |
    | 0x62 | 4 bytes  | 2 bytes  | 2 bytes| 1 B |  Len bytes| 0x2323 |
    +------+----------+----------+--------+-----+-----------+--------+

- Checksum covers Sequence through Footer inclusive (bytes 5..end)
- Packet length is 12 + Len

The model is frozen: once the builder has finalized the checksum, nothing
about the packet changes.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from midiapi.exceptions import ChecksumError, ProtocolError
from midiapi.protocol.checksums import calculate_checksum, encode_checksum
from midiapi.protocol.constants import ProtocolConstants
from midiapi.protocol.encoding import decode_uint16, decode_uint32, encode_uint16


class RawPacket(BaseModel):
    """
    One checksummed command packet, before transport chunking.

    Example:
        >>> packet = RawPacket(sequence=1, opcode=0x0100, payload=b"\\x00\\x00", checksum=0)
        >>> len(packet)
        14
        >>> packet.body.hex(" ")
        '00 01 01 00 02 00 00 23 23'
    """

    model_config = ConfigDict(frozen=True)

    sequence: int = Field(ge=0, le=0xFFFF, description="Per-session command counter")
    opcode: int = Field(ge=0, le=0xFFFF, description="Command identifier")
    payload: bytes = Field(
        default=b"",
        max_length=ProtocolConstants.MAX_PAYLOAD_SIZE,
        description="Command-specific arguments",
    )
    checksum: int = Field(ge=0, le=0xFFFFFFFF, description="Checksum over bytes 5..end")

    @property
    def payload_length(self) -> int:
        """Value of the single-byte payload length field."""
        return len(self.payload)

    @property
    def body(self) -> bytes:
        """
        Bytes 5..end: sequence, opcode, length, payload, and footer.

        This is exactly the range the checksum is computed over.
        """
        return (
            encode_uint16(self.sequence)
            + encode_uint16(self.opcode)
            + bytes([self.payload_length])
            + self.payload
            + encode_uint16(ProtocolConstants.FOOTER)
        )

    @property
    def is_valid(self) -> bool:
        """Check that the stored checksum matches the packet body."""
        return self.checksum == calculate_checksum(self.body)

    def to_bytes(self) -> bytes:
        """Serialize the packet to its wire layout."""
        return bytes([ProtocolConstants.SYNC]) + encode_checksum(self.checksum) + self.body

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __len__(self) -> int:
        return ProtocolConstants.OVERHEAD_SIZE + self.payload_length

    def __repr__(self) -> str:
        payload = self.payload.hex(" ") if self.payload else "(empty)"
        return (
            f"RawPacket(seq={self.sequence}, opcode=0x{self.opcode:04X}, "
            f"payload={payload}, checksum=0x{self.checksum:08X})"
        )

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> RawPacket:
        """
        Rebuild a packet from its wire layout, checking every fixed field.

        Args:
            data: Complete raw packet, sync byte through footer.

        Returns:
            RawPacket instance.

        Raises:
            ProtocolError: If sync, length, or footer are wrong.
            ChecksumError: If the stored checksum doesn't match.
        """
        data = bytes(data)
        if len(data) < ProtocolConstants.OVERHEAD_SIZE:
            raise ProtocolError(
                f"Packet too short: {len(data)} bytes, need at least "
                f"{ProtocolConstants.OVERHEAD_SIZE}"
            )
        if data[ProtocolConstants.SYNC_OFFSET] != ProtocolConstants.SYNC:
            raise ProtocolError(f"Bad sync byte 0x{data[0]:02X}")

        length = data[ProtocolConstants.LENGTH_OFFSET]
        if len(data) != ProtocolConstants.OVERHEAD_SIZE + length:
            raise ProtocolError(
                f"Length field says {length} payload bytes but packet is {len(data)} bytes"
            )

        footer = decode_uint16(data[-ProtocolConstants.FOOTER_SIZE :])
        if footer != ProtocolConstants.FOOTER:
            raise ProtocolError(f"Bad footer 0x{footer:04X}")

        start = ProtocolConstants.CHECKSUM_OFFSET
        stored = decode_uint32(data[start : start + ProtocolConstants.CHECKSUM_SIZE])
        expected = calculate_checksum(data[ProtocolConstants.SEQUENCE_OFFSET :])
        if stored != expected:
            raise ChecksumError(expected=expected, received=stored)

        seq = ProtocolConstants.SEQUENCE_OFFSET
        op = ProtocolConstants.OPCODE_OFFSET
        body = ProtocolConstants.PAYLOAD_OFFSET
        return cls(
            sequence=decode_uint16(data[seq : seq + 2]),
            opcode=decode_uint16(data[op : op + 2]),
            payload=data[body : body + length],
            checksum=stored,
        )
