"""Tests for MockTransport."""

import pytest

from midiapi.exceptions import TransportError
from midiapi.transport.mock import MockTransport


class TestMockTransport:
    """Tests for MockTransport class."""

    @pytest.fixture
    def transport(self):
        """Create a MockTransport instance."""
        return MockTransport()

    @pytest.mark.asyncio
    async def test_open_close(self, transport):
        """Test opening and closing transport."""
        assert not transport.is_open
        await transport.open()
        assert transport.is_open
        assert transport.open_count == 1
        await transport.close()
        assert not transport.is_open

    @pytest.mark.asyncio
    async def test_double_open_raises(self, transport):
        """Test that opening twice raises error."""
        await transport.open()
        with pytest.raises(TransportError):
            await transport.open()

    @pytest.mark.asyncio
    async def test_close_idempotent(self, transport):
        """Test that closing a closed transport is harmless."""
        await transport.close()
        await transport.close()
        assert not transport.is_open

    @pytest.mark.asyncio
    async def test_write_records_data(self, transport):
        """Test that write records data."""
        await transport.open()
        await transport.write(b"hello")
        await transport.write(b"world")
        assert transport.written_data == [b"hello", b"world"]
        assert transport.last_written == b"world"

    @pytest.mark.asyncio
    async def test_write_when_closed_raises(self, transport):
        """Test that writing to closed transport raises."""
        with pytest.raises(TransportError):
            await transport.write(b"test")

    @pytest.mark.asyncio
    async def test_fail_next_open(self, transport):
        """Test an injected open failure affects one open only."""
        transport.fail_next_open()
        with pytest.raises(TransportError):
            await transport.open()
        assert not transport.is_open

        await transport.open()
        assert transport.is_open

    @pytest.mark.asyncio
    async def test_fail_next_write(self, transport):
        """Test an injected write failure drops that frame only."""
        await transport.open()
        transport.fail_next_write(OSError("cable unplugged"))

        with pytest.raises(OSError):
            await transport.write(b"lost")
        await transport.write(b"kept")

        assert transport.written_data == [b"kept"]

    @pytest.mark.asyncio
    async def test_write_callback(self, transport):
        """Test the write callback sees each frame."""
        seen = []
        transport.set_write_callback(seen.append)
        await transport.open()
        await transport.write(bytearray(b"\x04\x62\x00\x00"))
        assert seen == [b"\x04\x62\x00\x00"]

    @pytest.mark.asyncio
    async def test_context_manager(self, transport):
        """Test async context manager opens and closes."""
        async with transport:
            assert transport.is_open
        assert not transport.is_open

    @pytest.mark.asyncio
    async def test_clear(self, transport):
        """Test clear drops history and pending failures."""
        await transport.open()
        await transport.write(b"data")
        transport.fail_next_write()
        transport.clear()

        assert transport.written_data == []
        await transport.write(b"after")
        assert transport.last_written == b"after"

    def test_last_written_empty(self, transport):
        """Test last_written is None before any write."""
        assert transport.last_written is None

    @pytest.mark.asyncio
    async def test_assert_helpers(self, transport):
        """Test assert_written and assert_write_count."""
        await transport.open()
        await transport.write(b"a")
        await transport.write(b"b")

        transport.assert_written(b"b")
        transport.assert_written(b"a", index=0)
        transport.assert_write_count(2)

        with pytest.raises(AssertionError):
            transport.assert_written(b"c")
        with pytest.raises(AssertionError):
            transport.assert_write_count(3)

    def test_assert_written_nothing(self, transport):
        """Test assert_written fails when nothing was written."""
        with pytest.raises(AssertionError):
            transport.assert_written(b"x")
