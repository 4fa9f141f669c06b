"""
32-bit packet checksum calculation and validation.

The MIDI API protocol uses an MSB-first CRC-32 driven by the Ethernet
polynomial:
- Start from 0xFFFFFFFF
- XOR each byte into the top 8 bits of the accumulator
- Shift left 8 times, XORing 0x04C11DB7 whenever the top bit falls out
- No input/output reflection and no final complement

The companion firmware and iOS apps compute the same value, so the bit
manipulation must stay exactly as written here rather than being swapped
for zlib/binascii CRC-32, which reflects and complements.

The checksum covers packet bytes 5..end (sequence through footer) and is
stored big-endian in bytes 1-4.
"""

from __future__ import annotations

from midiapi.protocol.constants import ProtocolConstants
from midiapi.protocol.encoding import decode_uint32, encode_uint32

_TOP_BIT = 0x80000000
_MASK = 0xFFFFFFFF


def calculate_checksum(data: bytes | bytearray | memoryview) -> int:
    """
    Calculate the 32-bit checksum over the given bytes.

    Args:
        data: Bytes to checksum (packet bytes 5..end when checking a packet).

    Returns:
        32-bit checksum value.

    Example:
        >>> hex(calculate_checksum(b"123456789"))
        '0x376e6e7'
    """
    crc = ProtocolConstants.CHECKSUM_INIT
    for byte in bytes(data):
        crc ^= byte << 24
        for _ in range(8):
            if crc & _TOP_BIT:
                crc = ((crc << 1) ^ ProtocolConstants.CHECKSUM_POLYNOMIAL) & _MASK
            else:
                crc = (crc << 1) & _MASK
    return crc


def encode_checksum(checksum: int) -> bytes:
    """
    Encode a checksum value as 4 big-endian bytes.

    Raises:
        ValueError: If checksum does not fit in 32 bits.
    """
    return encode_uint32(checksum)


def validate_checksum(packet: bytes | bytearray | memoryview) -> bool:
    """
    Check that the checksum stored in a raw packet matches its contents.

    Args:
        packet: Complete raw packet, sync byte through footer.

    Returns:
        True if bytes 1-4 equal the checksum of bytes 5..end.
    """
    packet = bytes(packet)
    if len(packet) < ProtocolConstants.OVERHEAD_SIZE:
        return False

    start = ProtocolConstants.CHECKSUM_OFFSET
    stored = decode_uint32(packet[start : start + ProtocolConstants.CHECKSUM_SIZE])
    return stored == calculate_checksum(packet[ProtocolConstants.SEQUENCE_OFFSET :])
