"""
Binary field encoding utilities for the MIDI API protocol.

Every multi-byte packet field is big-endian (network order, high byte first):
- Byte 0x62 is written as b"\\x62"
- Word 0x0100 is written as b"\\x01\\x00"
- Checksum 0x0376E6E7 is written as b"\\x03\\x76\\xe6\\xe7"
"""

from __future__ import annotations


def encode_uint8(value: int) -> bytes:
    """
    Encode an 8-bit unsigned value as a single byte.

    Args:
        value: Byte value (0-255).

    Returns:
        1-byte representation.

    Raises:
        ValueError: If value is not in range 0-255.
    """
    if not 0 <= value <= 0xFF:
        raise ValueError(f"Byte value must be 0-255, got {value}")
    return bytes([value])


def encode_uint16(value: int) -> bytes:
    """
    Encode a 16-bit unsigned value as 2 big-endian bytes.

    Args:
        value: 16-bit value (0-65535).

    Returns:
        2-byte representation, high byte first.

    Raises:
        ValueError: If value is not in range 0-65535.

    Example:
        >>> encode_uint16(0x0202)
        b'\\x02\\x02'
    """
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"UInt16 value must be 0-65535, got {value}")
    return value.to_bytes(2, "big")


def decode_uint16(data: bytes | bytearray | memoryview) -> int:
    """
    Decode 2 big-endian bytes to a 16-bit unsigned value.

    Raises:
        ValueError: If data is not exactly 2 bytes.
    """
    if len(data) != 2:
        raise ValueError(f"Expected 2 bytes, got {len(data)}")
    return int.from_bytes(data, "big")


def encode_uint32(value: int) -> bytes:
    """
    Encode a 32-bit unsigned value as 4 big-endian bytes.

    Args:
        value: 32-bit value (0-0xFFFFFFFF).

    Returns:
        4-byte representation, high byte first.

    Raises:
        ValueError: If value does not fit in 32 bits.
    """
    if not 0 <= value <= 0xFFFFFFFF:
        raise ValueError(f"UInt32 value must be 0-0xFFFFFFFF, got {value}")
    return value.to_bytes(4, "big")


def decode_uint32(data: bytes | bytearray | memoryview) -> int:
    """
    Decode 4 big-endian bytes to a 32-bit unsigned value.

    Raises:
        ValueError: If data is not exactly 4 bytes.
    """
    if len(data) != 4:
        raise ValueError(f"Expected 4 bytes, got {len(data)}")
    return int.from_bytes(data, "big")


def bytes_to_hex(data: bytes | bytearray | memoryview) -> str:
    """
    Convert bytes to a space-separated uppercase hex string for logging.

    Example:
        >>> bytes_to_hex(b'\\x62\\x23\\x23')
        '62 23 23'
    """
    return bytes(data).hex(" ").upper()
