"""
Command catalog: semantic command names mapped to opcodes and payload encoders.

Adding a command only takes a new catalog entry; the packet builder, chunk
encoder and client work with any registered command.

Example:
    >>> spec = resolve_command("beep")
    >>> hex(spec.opcode)
    '0x100'
    >>> spec.encode_payload(duration=500)
    b'\\x01\\xf4'
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from midiapi.exceptions import PayloadTooLargeError, UnknownCommandError
from midiapi.protocol.constants import Opcode, ProtocolConstants
from midiapi.protocol.encoding import encode_uint16

PayloadEncoder = Callable[..., bytes]


def encode_duration(duration: int = ProtocolConstants.DEFAULT_DURATION) -> bytes:
    """
    Encode a duration argument as a 2-byte big-endian payload.

    Args:
        duration: Duration in device units, 0 for the device default.

    Raises:
        ValueError: If duration is not in range 0-65535.
    """
    return encode_uint16(duration)


@dataclass(frozen=True)
class CommandSpec:
    """
    Static, read-only catalog entry.

    Attributes:
        name: Command name used by callers ("beep", "flash").
        opcode: 16-bit opcode written into the packet.
        payload_encoder: Pure function turning command arguments into payload bytes.
        description: Human-readable summary.
    """

    name: str
    opcode: int
    payload_encoder: PayloadEncoder = field(repr=False)
    description: str = ""

    def __post_init__(self) -> None:
        if not 0 <= self.opcode <= 0xFFFF:
            raise ValueError(f"Opcode must be 0-65535, got {self.opcode}")

    def encode_payload(self, **args: int) -> bytes:
        """
        Run the payload encoder and enforce the payload size limit.

        Raises:
            PayloadTooLargeError: If the payload exceeds 255 bytes.
        """
        payload = bytes(self.payload_encoder(**args))
        if len(payload) > ProtocolConstants.MAX_PAYLOAD_SIZE:
            raise PayloadTooLargeError(
                len(payload),
                limit=ProtocolConstants.MAX_PAYLOAD_SIZE,
                command=self.name,
            )
        return payload


class CommandCatalog:
    """
    Registry of command specs keyed by name.
    """

    def __init__(self, specs: list[CommandSpec] | None = None) -> None:
        self._specs: dict[str, CommandSpec] = {}
        for spec in specs or []:
            self.register(spec)

    def register(self, spec: CommandSpec, *, replace: bool = False) -> None:
        """
        Add a command to the catalog.

        Args:
            spec: Catalog entry to add.
            replace: Allow overwriting an existing entry with the same name.

        Raises:
            ValueError: If the name is already registered and replace is False.
        """
        if spec.name in self._specs and not replace:
            raise ValueError(f"Command '{spec.name}' is already registered")
        self._specs[spec.name] = spec

    def resolve(self, name: str) -> CommandSpec:
        """
        Look up a command by name.

        Raises:
            UnknownCommandError: If the name is not registered.
        """
        try:
            return self._specs[name]
        except KeyError:
            raise UnknownCommandError(name, known=self.names()) from None

    def names(self) -> list[str]:
        """Get registered command names in registration order."""
        return list(self._specs)

    def __contains__(self, name: object) -> bool:
        return name in self._specs

    def __iter__(self) -> Iterator[CommandSpec]:
        return iter(self._specs.values())

    def __len__(self) -> int:
        return len(self._specs)

    def copy(self) -> CommandCatalog:
        """Get an independent catalog with the same entries."""
        return CommandCatalog(list(self._specs.values()))

    def __repr__(self) -> str:
        return f"CommandCatalog({self.names()})"


BEEP = CommandSpec(
    name="beep",
    opcode=Opcode.BUZZER_BEEP,
    payload_encoder=encode_duration,
    description="Sound the buzzer",
)

FLASH = CommandSpec(
    name="flash",
    opcode=Opcode.LEDS_FLASH,
    payload_encoder=encode_duration,
    description="Flash the LEDs",
)

DEFAULT_CATALOG = CommandCatalog([BEEP, FLASH])
"""Catalog holding the commands the device firmware understands."""


def resolve_command(name: str) -> CommandSpec:
    """Resolve a command name against the default catalog."""
    return DEFAULT_CATALOG.resolve(name)
