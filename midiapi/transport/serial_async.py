"""
Async serial transport using pyserial-asyncio.

This module provides the hardware transport for sending command frames to
the device over a byte-oriented point-to-point link: a USB-MIDI class
device exposed as a serial port, a USB-serial bridge, or a DIN MIDI UART.

Serial Configuration:
- Baud rate: 31250 (MIDI wire rate, configurable)
- Data bits: 8
- Parity: None
- Stop bits: 1
- Flow control: None

Example:
    >>> transport = AsyncSerialTransport("/dev/ttyACM0")
    >>> async with transport:
    ...     await transport.write(frame)
"""

from __future__ import annotations

import asyncio
import logging

import serial
import serial_asyncio

from midiapi.exceptions import TransportError, TransportSendError
from midiapi.protocol.constants import ProtocolConstants
from midiapi.protocol.encoding import bytes_to_hex
from midiapi.transport.abc import AbstractTransport

logger = logging.getLogger(__name__)


class AsyncSerialTransport(AbstractTransport):
    """
    Async serial transport using pyserial-asyncio.

    Attributes:
        port_name: Serial port path (e.g., "/dev/ttyACM0", "COM3").
        is_open: Whether the port is currently open.

    Example:
        >>> transport = AsyncSerialTransport("/dev/ttyACM0", baudrate=31250)
        >>> await transport.open()
        >>> try:
        ...     await transport.write(frame)
        ... finally:
        ...     await transport.close()
    """

    def __init__(
        self,
        port: str,
        baudrate: int = ProtocolConstants.DEFAULT_BAUD_RATE,
        write_timeout: float = ProtocolConstants.DEFAULT_WRITE_TIMEOUT,
    ) -> None:
        """
        Initialize the async serial transport.

        Args:
            port: Serial port path (e.g., "/dev/ttyACM0", "COM3").
            baudrate: Baud rate (default: 31250).
            write_timeout: Seconds to wait for a frame to drain (default: 2.0).
        """
        self._port = port
        self._baudrate = baudrate
        self._write_timeout = write_timeout
        self._writer: asyncio.StreamWriter | None = None

    @property
    def is_open(self) -> bool:
        """Check if the serial port is currently open."""
        return self._writer is not None and not self._writer.is_closing()

    @property
    def port_name(self) -> str:
        """Get the serial port path."""
        return self._port

    @property
    def baudrate(self) -> int:
        """Get the configured baud rate."""
        return self._baudrate

    async def open(self) -> None:
        """
        Open the serial port connection.

        Raises:
            TransportError: If the port cannot be opened.
        """
        if self.is_open:
            return

        try:
            _, self._writer = await serial_asyncio.open_serial_connection(
                url=self._port,
                baudrate=self._baudrate,
                parity=serial.PARITY_NONE,
                stopbits=serial.STOPBITS_ONE,
                bytesize=serial.EIGHTBITS,
                xonxoff=False,
                rtscts=False,
                dsrdtr=False,
            )
        except serial.SerialException as e:
            raise TransportError(f"Failed to open serial port {self._port}: {e}") from e
        except OSError as e:
            raise TransportError(f"OS error opening {self._port}: {e}") from e

        logger.info("Opened %s at %d baud", self._port, self._baudrate)

    async def close(self) -> None:
        """
        Close the serial port connection.

        Safe to call multiple times.
        """
        if self._writer is not None:
            try:
                self._writer.close()
                await self._writer.wait_closed()
            except (OSError, serial.SerialException) as e:
                logger.warning("Error closing %s: %s", self._port, e)
            finally:
                logger.info("Closed %s", self._port)

        self._writer = None

    async def write(self, data: bytes) -> None:
        """
        Write a frame to the serial port and wait for it to drain.

        Args:
            data: Bytes to transmit.

        Raises:
            TransportError: If the port is not open.
            TransportSendError: If the write fails or does not drain in time.
        """
        if not self.is_open:
            raise TransportError("Serial port is not open")

        logger.debug("TX %s", bytes_to_hex(data))

        try:
            self._writer.write(data)
            await asyncio.wait_for(self._writer.drain(), timeout=self._write_timeout)
        except asyncio.TimeoutError as e:
            raise TransportSendError(
                f"Write to {self._port} did not drain within {self._write_timeout:.1f}s",
                frame=bytes(data),
            ) from e
        except (OSError, serial.SerialException) as e:
            raise TransportSendError(f"Write failed: {e}", frame=bytes(data)) from e

    def __repr__(self) -> str:
        status = "open" if self.is_open else "closed"
        return f"AsyncSerialTransport({self._port!r}, baudrate={self._baudrate}, {status})"
