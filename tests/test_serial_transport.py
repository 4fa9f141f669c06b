"""Tests for AsyncSerialTransport without hardware."""

import asyncio

import pytest
import serial

from midiapi.exceptions import TransportError, TransportSendError
from midiapi.protocol.constants import ProtocolConstants
from midiapi.transport.serial_async import AsyncSerialTransport


class FakeWriter:
    """Stand-in for asyncio.StreamWriter with injectable failures."""

    def __init__(self, write_error=None, hang=False):
        self.buffer = b""
        self.closed = False
        self._write_error = write_error
        self._hang = hang

    def write(self, data):
        if self._write_error is not None:
            raise self._write_error
        self.buffer += data

    async def drain(self):
        if self._hang:
            await asyncio.Event().wait()

    def is_closing(self):
        return self.closed

    def close(self):
        self.closed = True

    async def wait_closed(self):
        pass


class TestAsyncSerialTransport:
    """Tests for AsyncSerialTransport class."""

    @pytest.fixture
    def transport(self):
        """Create a transport on a port that does not exist."""
        return AsyncSerialTransport("/dev/midiapi-missing-port", write_timeout=0.05)

    def test_defaults(self):
        """Test default configuration uses the MIDI wire rate."""
        transport = AsyncSerialTransport("/dev/midiapi-missing-port")
        assert transport.port_name == "/dev/midiapi-missing-port"
        assert transport.baudrate == ProtocolConstants.DEFAULT_BAUD_RATE == 31250
        assert transport.is_open is False

    def test_repr(self, transport):
        """Test repr shows port, rate, and state."""
        assert repr(transport) == (
            "AsyncSerialTransport('/dev/midiapi-missing-port', baudrate=31250, closed)"
        )

    @pytest.mark.asyncio
    async def test_open_missing_port_raises(self, transport):
        """Test opening a missing port raises TransportError."""
        with pytest.raises(TransportError):
            await transport.open()
        assert transport.is_open is False

    @pytest.mark.asyncio
    async def test_write_when_closed_raises(self, transport):
        """Test writing before open raises TransportError."""
        with pytest.raises(TransportError):
            await transport.write(b"\x05\x62\x00\x00")

    @pytest.mark.asyncio
    async def test_close_when_closed(self, transport):
        """Test closing an unopened port is harmless."""
        await transport.close()
        assert transport.is_open is False

    @pytest.mark.asyncio
    async def test_write_drains(self, transport):
        """Test a successful write hands the frame to the stream."""
        writer = FakeWriter()
        transport._writer = writer

        await transport.write(b"\x04\x62\x00\x00")

        assert writer.buffer == b"\x04\x62\x00\x00"
        assert transport.is_open

    @pytest.mark.asyncio
    async def test_write_drain_timeout(self, transport):
        """Test a drain that never finishes raises TransportSendError."""
        transport._writer = FakeWriter(hang=True)
        frame = b"\x04\x62\x00\x00\x06\x23\x23\x00"

        with pytest.raises(TransportSendError) as exc_info:
            await transport.write(frame)

        assert exc_info.value.frame == frame
        assert isinstance(exc_info.value.__cause__, asyncio.TimeoutError)
        assert "did not drain" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_write_os_error(self, transport):
        """Test an OSError from the stream raises TransportSendError."""
        error = OSError("device unplugged")
        transport._writer = FakeWriter(write_error=error)

        with pytest.raises(TransportSendError) as exc_info:
            await transport.write(bytearray(b"\x05\x62\x00\x00"))

        assert exc_info.value.frame == b"\x05\x62\x00\x00"
        assert exc_info.value.__cause__ is error
        assert "device unplugged" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_write_serial_exception(self, transport):
        """Test a SerialException from the stream raises TransportSendError."""
        error = serial.SerialException("port vanished")
        transport._writer = FakeWriter(write_error=error)

        with pytest.raises(TransportSendError) as exc_info:
            await transport.write(b"\x05\x62\x00\x00")

        assert exc_info.value.__cause__ is error

    @pytest.mark.asyncio
    async def test_close_releases_writer(self, transport):
        """Test close shuts the stream and marks the port closed."""
        writer = FakeWriter()
        transport._writer = writer

        await transport.close()

        assert writer.closed
        assert transport.is_open is False
