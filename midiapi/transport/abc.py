"""
Abstract device session interface for MIDI API communication.

This module defines the abstract base class for all transport implementations.
A transport is the device session the codec hands its frames to: it can be
opened and closed, and it accepts opaque byte buffers for transmission.

The protocol is one-directional, so transports only write. Delivery timeouts
belong to the transport; the codec never retries a failed write.

Implementations:
- AsyncSerialTransport: pyserial-asyncio based serial/USB-MIDI port
- MockTransport: For testing without hardware
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from types import TracebackType


class AbstractTransport(ABC):
    """
    Abstract base class for MIDI API device sessions.

    Transports support async context manager protocol for safe resource
    management:

        async with AsyncSerialTransport("/dev/ttyACM0") as transport:
            await transport.write(frame)

    Attributes:
        is_open: Whether the device session is currently open.
        port_name: Identifier for the transport (e.g., serial port name).
    """

    @property
    @abstractmethod
    def is_open(self) -> bool:
        """
        Check if the device session is currently open.

        Returns:
            True if connected and ready to send, False otherwise.
        """
        ...

    @property
    @abstractmethod
    def port_name(self) -> str:
        """
        Get the transport identifier.

        Returns:
            Port name or identifier string (e.g., "/dev/ttyACM0", "COM3").
        """
        ...

    @abstractmethod
    async def open(self) -> None:
        """
        Open the device session.

        Raises:
            TransportError: If the session cannot be established.
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """
        Close the device session.

        Releases the physical connection and any associated resources.
        Safe to call multiple times (idempotent).

        After closing, the transport can be reopened with open().
        """
        ...

    @abstractmethod
    async def write(self, data: bytes) -> None:
        """
        Send a transport frame to the device.

        Args:
            data: Complete chunked frame.

        Raises:
            TransportError: If the transport is not open or the write fails.
        """
        ...

    async def __aenter__(self) -> AbstractTransport:
        """Async context manager entry - opens the transport."""
        await self.open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Async context manager exit - closes the transport."""
        await self.close()
