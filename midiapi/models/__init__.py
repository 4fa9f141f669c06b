"""
Data models for the MIDI API protocol.

This module contains Pydantic models representing the data structures
used in the protocol:

- RawPacket: one checksummed command packet before transport chunking
"""

from midiapi.models.packets import RawPacket

__all__ = [
    "RawPacket",
]
