"""Tests for transport chunk encoding."""

import pytest

from midiapi.protocol.chunking import encode_transport_frame, frame_length, iter_chunks
from midiapi.protocol.constants import ChunkStatus


def split(frame: bytes) -> list[bytes]:
    """Split a frame into its 4-byte chunks."""
    return [frame[i : i + 4] for i in range(0, len(frame), 4)]


class TestEncodeTransportFrame:
    """Tests for encode_transport_frame."""

    def test_status_values(self):
        """Test chunk status codes match the USB-MIDI SysEx codes."""
        assert ChunkStatus.CONTINUE == 0x04
        assert ChunkStatus.END_1 == 0x05
        assert ChunkStatus.END_2 == 0x06
        assert ChunkStatus.END_3 == 0x07

    def test_fourteen_bytes(self):
        """Test 14 bytes: four full chunks and a 2-byte terminal chunk."""
        raw = bytes(range(0x10, 0x1E))
        chunks = split(encode_transport_frame(raw))

        assert len(chunks) == 5
        for i, chunk in enumerate(chunks[:4]):
            assert chunk == bytes([0x04]) + raw[i * 3 : i * 3 + 3]
        assert chunks[4] == bytes([0x06, raw[12], raw[13], 0x00])

    def test_twelve_bytes(self):
        """Test an exact multiple of 3 ends with a continuation chunk, not 0x07."""
        raw = bytes(range(1, 13))
        chunks = split(encode_transport_frame(raw))

        assert len(chunks) == 4
        assert all(chunk[0] == 0x04 for chunk in chunks)
        assert b"".join(chunk[1:] for chunk in chunks) == raw

    def test_thirteen_bytes(self):
        """Test 13 bytes end with a 1-byte terminal chunk."""
        raw = bytes(range(1, 14))
        chunks = split(encode_transport_frame(raw))

        assert len(chunks) == 5
        assert chunks[-1] == bytes([0x05, raw[12], 0x00, 0x00])

    def test_single_byte(self):
        """Test a single byte becomes one terminal chunk."""
        assert encode_transport_frame(b"\x62") == b"\x05\x62\x00\x00"

    def test_two_bytes(self):
        """Test two bytes become one terminal chunk."""
        assert encode_transport_frame(b"\x23\x23") == b"\x06\x23\x23\x00"

    def test_three_bytes(self):
        """Test three bytes become one continuation chunk."""
        assert encode_transport_frame(b"\x01\x02\x03") == b"\x04\x01\x02\x03"

    def test_empty(self):
        """Test empty input produces an empty frame."""
        assert encode_transport_frame(b"") == b""
        assert list(iter_chunks(b"")) == []

    def test_status_never_reserved(self):
        """Test status 0x07 is never emitted."""
        for length in range(1, 40):
            chunks = split(encode_transport_frame(bytes(length)))
            assert all(chunk[0] != ChunkStatus.END_3 for chunk in chunks)

    @pytest.mark.parametrize("length", [1, 2, 3, 4, 12, 13, 14, 100, 267])
    def test_frame_length_law(self, length):
        """Test output length is 4 * ceil(L / 3)."""
        frame = encode_transport_frame(bytes(length))
        expected = 4 * ((length + 2) // 3)
        assert len(frame) == expected
        assert frame_length(length) == expected

    def test_accepts_bytearray(self):
        """Test mutable buffers are accepted."""
        assert encode_transport_frame(bytearray(b"\x01\x02")) == b"\x06\x01\x02\x00"

    def test_frame_length_negative(self):
        """Test negative lengths are rejected."""
        with pytest.raises(ValueError):
            frame_length(-1)


class TestIterChunks:
    """Tests for iter_chunks."""

    def test_yields_four_byte_chunks(self):
        """Test every yielded chunk is 4 bytes."""
        chunks = list(iter_chunks(bytes(range(14))))
        assert len(chunks) == 5
        assert all(len(chunk) == 4 for chunk in chunks)

    def test_join_equals_frame(self):
        """Test joined chunks equal the encoded frame."""
        raw = bytes(range(20))
        assert b"".join(iter_chunks(raw)) == encode_transport_frame(raw)
