"""
Transport chunk encoding for byte-stream MIDI carriers.

A raw packet is split left to right into groups of up to 3 bytes, each
carried in a 4-byte chunk with a leading status byte (USB-MIDI SysEx event
layout)::

    >= 3 bytes left:  [0x04, b0, b1, b2]   continuation, 3 valid bytes
    exactly 2 left:   [0x06, b0, b1, 0x00] terminal, 2 valid bytes
    exactly 1 left:   [0x05, b0, 0x00, 0x00] terminal, 1 valid byte

When the packet length is a multiple of 3 the final chunk keeps status 0x04;
the terminal full-chunk status 0x07 is never produced. The receiving
firmware is only known to accept this encoding, so it is reproduced as is.

Frame length is always 4 * ceil(len(raw) / 3); empty input gives an empty
frame.
"""

from __future__ import annotations

from collections.abc import Iterator

from midiapi.protocol.constants import ChunkStatus, ProtocolConstants

_PAD = 0x00

# Status byte for a chunk that closes the message, keyed by valid byte count.
_TERMINAL_STATUS = {
    1: ChunkStatus.END_1,
    2: ChunkStatus.END_2,
}


def frame_length(raw_length: int) -> int:
    """
    Get the transport frame length for a raw packet of the given size.

    Example:
        >>> frame_length(14)
        20
    """
    if raw_length < 0:
        raise ValueError(f"Length must be non-negative, got {raw_length}")
    chunks = -(-raw_length // ProtocolConstants.CHUNK_DATA_SIZE)
    return chunks * ProtocolConstants.CHUNK_SIZE


def iter_chunks(raw: bytes | bytearray | memoryview) -> Iterator[bytes]:
    """
    Yield the 4-byte transport chunks for a raw packet.

    Args:
        raw: Raw packet bytes.

    Yields:
        One 4-byte chunk per group of up to 3 input bytes.
    """
    data = bytes(raw)
    step = ProtocolConstants.CHUNK_DATA_SIZE
    for offset in range(0, len(data), step):
        group = data[offset : offset + step]
        if len(group) == step:
            yield bytes([ChunkStatus.CONTINUE]) + group
        else:
            padding = bytes([_PAD] * (step - len(group)))
            yield bytes([_TERMINAL_STATUS[len(group)]]) + group + padding


def encode_transport_frame(raw: bytes | bytearray | memoryview) -> bytes:
    """
    Encode a raw packet into the chunked frame handed to the carrier.

    Args:
        raw: Raw packet bytes (any length, including empty).

    Returns:
        Concatenated 4-byte chunks.

    Example:
        >>> encode_transport_frame(b"\\x01\\x02\\x03\\x04").hex(" ")
        '04 01 02 03 05 04 00 00'
    """
    return b"".join(iter_chunks(raw))
