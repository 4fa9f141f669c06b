"""
MIDI API command protocol opcodes and constants.

Values match the companion firmware and iOS implementations, which consume
identical packet bytes.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Final


class Opcode(IntEnum):
    """
    16-bit opcodes identifying which command a packet carries.

    The high byte groups commands by peripheral:
    - 0x01xx: Buzzer
    - 0x02xx: LEDs
    """

    # ===== Buzzer =====

    BUZZER_BEEP = 0x0100
    """Sound the buzzer for a duration (0 = device default)."""

    # ===== LEDs =====

    LEDS_FLASH = 0x0202
    """Flash the LEDs for a duration (0 = device default)."""


class ChunkStatus(IntEnum):
    """
    Leading status byte of a 4-byte transport chunk.

    These are the USB-MIDI SysEx code index numbers: one continuation code
    and three terminal codes that say how many data bytes are valid.
    """

    CONTINUE = 0x04
    """SysEx starts or continues, all 3 data bytes valid."""

    END_1 = 0x05
    """SysEx ends, only the first data byte valid."""

    END_2 = 0x06
    """SysEx ends, first two data bytes valid."""

    END_3 = 0x07
    """SysEx ends, all 3 data bytes valid. Reserved, never emitted."""


class ProtocolConstants:
    """
    MIDI API protocol constants.

    Contains packet markers, field sizes, limits, and transport defaults
    used throughout the protocol implementation.
    """

    # ===== Packet Markers =====

    SYNC: Final[int] = 0x62
    """Start of packet marker."""

    FOOTER: Final[int] = 0x2323
    """Fixed 2-byte packet terminator ("##")."""

    # ===== Packet Layout =====

    SYNC_OFFSET: Final[int] = 0
    CHECKSUM_OFFSET: Final[int] = 1
    SEQUENCE_OFFSET: Final[int] = 5
    OPCODE_OFFSET: Final[int] = 7
    LENGTH_OFFSET: Final[int] = 9
    PAYLOAD_OFFSET: Final[int] = 10

    CHECKSUM_SIZE: Final[int] = 4
    FOOTER_SIZE: Final[int] = 2

    HEADER_SIZE: Final[int] = 10
    """Sync + checksum + sequence + opcode + payload length."""

    OVERHEAD_SIZE: Final[int] = 12
    """Header plus footer; packet length is this plus the payload length."""

    MAX_PAYLOAD_SIZE: Final[int] = 0xFF
    """Largest payload the single-byte length field can describe."""

    # ===== Sequence Numbers =====

    SEQUENCE_MASK: Final[int] = 0xFFFF
    """Sequence numbers are 16-bit and wrap from 0xFFFF to 0x0000."""

    # ===== Checksum =====

    CHECKSUM_INIT: Final[int] = 0xFFFFFFFF
    CHECKSUM_POLYNOMIAL: Final[int] = 0x04C11DB7

    # ===== Transport Chunking =====

    CHUNK_SIZE: Final[int] = 4
    """Status byte plus three data bytes."""

    CHUNK_DATA_SIZE: Final[int] = 3

    # ===== Command Arguments =====

    DEFAULT_DURATION: Final[int] = 0
    """Duration value asking the device to use its own default."""

    # ===== Serial Port Configuration =====

    DEFAULT_BAUD_RATE: Final[int] = 31250
    """MIDI wire rate."""

    DEFAULT_WRITE_TIMEOUT: Final[float] = 2.0
    """Seconds to wait for a frame to drain before failing the send."""
