"""Typed payloads for each message variant.

A MidiMessage stores generic ``number``/``value`` fields. The payload
classes give the same data under its musical names, one class per type,
so callers can dispatch with ``isinstance`` or ``match``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from ..constants import CCMode, MessageType


@dataclass(frozen=True)
class NoteOnPayload:
    """Note on: note number and velocity."""

    type: ClassVar[MessageType] = MessageType.NOTE_ON

    note: int
    velocity: int


@dataclass(frozen=True)
class NoteOffPayload:
    """Note off: note number and release velocity."""

    type: ClassVar[MessageType] = MessageType.NOTE_OFF

    note: int
    velocity: int


@dataclass(frozen=True)
class KeyPressurePayload:
    """Polyphonic key pressure. Velocity mirrors pressure."""

    type: ClassVar[MessageType] = MessageType.KEY_PRESSURE

    note: int
    pressure: int

    @property
    def velocity(self) -> int:
        return self.pressure


@dataclass(frozen=True)
class ControlChangePayload:
    """Control change, with its channel mode when cc is 120-127."""

    type: ClassVar[MessageType] = MessageType.CC

    cc: int
    value: int
    mode: CCMode | None = None


@dataclass(frozen=True)
class ProgramChangePayload:
    type: ClassVar[MessageType] = MessageType.PROGRAM_CHANGE

    program: int


@dataclass(frozen=True)
class ChannelPressurePayload:
    """Channel pressure. Velocity mirrors pressure."""

    type: ClassVar[MessageType] = MessageType.CHANNEL_PRESSURE

    pressure: int

    @property
    def velocity(self) -> int:
        return self.pressure


@dataclass(frozen=True)
class PitchBendPayload:
    """Pitch bend as ``(msb << 8) | lsb``. Velocity mirrors the bend."""

    type: ClassVar[MessageType] = MessageType.PITCH_BEND

    pitchbend: int

    @property
    def velocity(self) -> int:
        return self.pitchbend


@dataclass(frozen=True)
class UnknownPayload:
    type: ClassVar[MessageType] = MessageType.UNKNOWN


Payload = Union[
    NoteOnPayload,
    NoteOffPayload,
    KeyPressurePayload,
    ControlChangePayload,
    ProgramChangePayload,
    ChannelPressurePayload,
    PitchBendPayload,
    UnknownPayload,
]


def payload_for(
    message_type: MessageType, number: int, value: int, mode: CCMode | None = None
) -> Payload:
    """Build the payload for a message type from its generic fields.

    Args:
        message_type: Message variant
        number: Generic number field
        value: Generic value field
        mode: Channel mode (control change only)

    Returns:
        Payload instance matching ``message_type``
    """
    if message_type is MessageType.NOTE_ON:
        return NoteOnPayload(note=number, velocity=value)
    if message_type is MessageType.NOTE_OFF:
        return NoteOffPayload(note=number, velocity=value)
    if message_type is MessageType.KEY_PRESSURE:
        return KeyPressurePayload(note=number, pressure=value)
    if message_type is MessageType.CC:
        return ControlChangePayload(cc=number, value=value, mode=mode)
    if message_type is MessageType.PROGRAM_CHANGE:
        return ProgramChangePayload(program=number)
    if message_type is MessageType.CHANNEL_PRESSURE:
        return ChannelPressurePayload(pressure=number)
    if message_type is MessageType.PITCH_BEND:
        return PitchBendPayload(pitchbend=number)
    return UnknownPayload()
