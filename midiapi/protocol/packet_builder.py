"""
Packet builder: lays out a command as a checksummed raw packet.

Building is a pure computation. The caller supplies the sequence number
(normally drawn from a SequenceCounter), so the builder never touches
shared state.

Steps:
1. Resolve the command in the catalog
2. Encode its payload (size limit enforced by the catalog entry)
3. Lay out sync, zeroed checksum, sequence, opcode, length, payload, footer
4. Checksum bytes 5..end and write the result big-endian into bytes 1-4
"""

from __future__ import annotations

from midiapi.models.packets import RawPacket
from midiapi.protocol.checksums import calculate_checksum, encode_checksum
from midiapi.protocol.commands import DEFAULT_CATALOG, CommandCatalog
from midiapi.protocol.constants import ProtocolConstants
from midiapi.protocol.encoding import encode_uint8, encode_uint16


def layout_packet(sequence: int, opcode: int, payload: bytes = b"") -> bytes:
    """
    Lay out a complete raw packet and fill in its checksum.

    Args:
        sequence: 16-bit sequence number.
        opcode: 16-bit command opcode.
        payload: Command payload (0-255 bytes).

    Returns:
        Wire bytes, sync through footer.

    Raises:
        ValueError: If a field value is out of range.
    """
    packet = bytearray()
    packet += encode_uint8(ProtocolConstants.SYNC)
    packet += bytes(ProtocolConstants.CHECKSUM_SIZE)
    packet += encode_uint16(sequence)
    packet += encode_uint16(opcode)
    packet += encode_uint8(len(payload))
    packet += payload
    packet += encode_uint16(ProtocolConstants.FOOTER)

    checksum = calculate_checksum(packet[ProtocolConstants.SEQUENCE_OFFSET :])
    start = ProtocolConstants.CHECKSUM_OFFSET
    packet[start : start + ProtocolConstants.CHECKSUM_SIZE] = encode_checksum(checksum)
    return bytes(packet)


def build_packet(
    command_name: str,
    sequence: int,
    catalog: CommandCatalog | None = None,
    **args: int,
) -> RawPacket:
    """
    Build the raw packet for a named command.

    Args:
        command_name: Registered command name ("beep", "flash", ...).
        sequence: Sequence number to embed (0-65535).
        catalog: Catalog to resolve against (default catalog if None).
        **args: Command arguments passed to the payload encoder.

    Returns:
        Immutable RawPacket with its checksum finalized.

    Raises:
        UnknownCommandError: If the command is not registered.
        PayloadTooLargeError: If the encoded payload exceeds 255 bytes.
        ValueError: If the sequence or an argument is out of range.

    Example:
        >>> packet = build_packet("beep", 1)
        >>> packet.to_bytes()[5:].hex(" ")
        '00 01 01 00 02 00 00 23 23'
    """
    spec = (catalog if catalog is not None else DEFAULT_CATALOG).resolve(command_name)
    payload = spec.encode_payload(**args)
    return RawPacket.from_bytes(layout_packet(sequence, spec.opcode, payload))
