"""
Protocol layer for MIDI API commands.

This module contains the command codec:
- Opcodes, chunk status codes, and protocol constants
- Big-endian field encoding
- Checksum calculation and validation
- Session sequence counter
- Command catalog
- Packet building
- Transport chunk encoding
- The CommandEncoder pipeline tying them together
"""

from midiapi.protocol.constants import ChunkStatus, Opcode, ProtocolConstants
from midiapi.protocol.encoding import (
    bytes_to_hex,
    decode_uint16,
    decode_uint32,
    encode_uint8,
    encode_uint16,
    encode_uint32,
)
from midiapi.protocol.checksums import calculate_checksum, encode_checksum, validate_checksum
from midiapi.protocol.sequence import SequenceCounter
from midiapi.protocol.commands import (
    BEEP,
    DEFAULT_CATALOG,
    FLASH,
    CommandCatalog,
    CommandSpec,
    encode_duration,
    resolve_command,
)
from midiapi.protocol.chunking import encode_transport_frame, frame_length, iter_chunks
from midiapi.protocol.packet_builder import build_packet, layout_packet
from midiapi.protocol.codec import CommandEncoder

__all__ = [
    # Constants
    "Opcode",
    "ChunkStatus",
    "ProtocolConstants",
    # Encoding
    "encode_uint8",
    "encode_uint16",
    "decode_uint16",
    "encode_uint32",
    "decode_uint32",
    "bytes_to_hex",
    # Checksums
    "calculate_checksum",
    "encode_checksum",
    "validate_checksum",
    # Sequence
    "SequenceCounter",
    # Commands
    "CommandSpec",
    "CommandCatalog",
    "DEFAULT_CATALOG",
    "BEEP",
    "FLASH",
    "encode_duration",
    "resolve_command",
    # Chunking
    "encode_transport_frame",
    "iter_chunks",
    "frame_length",
    # Packets
    "build_packet",
    "layout_packet",
    # Pipeline
    "CommandEncoder",
]
