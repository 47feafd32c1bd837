"""MIDI constants for channel-voice messages.

This module defines the message type tags, channel mode tags, status byte
family codes and bit masks shared by the decoder and encoder.
"""

from __future__ import annotations

import enum

# Bit masks
STATUS_MASK = 0xF0
CHANNEL_MASK = 0x0F
DATA_MASK = 0x7F

# Channel clamp bounds (16 is one past the last wire channel)
MIN_CHANNEL = 0
MAX_CHANNEL = 16

# Data byte bounds
MIN_DATA = 0
MAX_DATA = 127


class MessageType(str, enum.Enum):
    """Channel-voice message variants.

    Members compare equal to their string tags, so ``msg.type == "noteon"``
    works as well as ``msg.type is MessageType.NOTE_ON``.
    """

    NOTE_ON = "noteon"
    NOTE_OFF = "noteoff"
    KEY_PRESSURE = "keypressure"
    CC = "controlchange"
    PROGRAM_CHANGE = "programchange"
    CHANNEL_PRESSURE = "channelpressure"
    PITCH_BEND = "pitchbend"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value

    @property
    def is_voice(self) -> bool:
        """True for the seven channel-voice types."""
        return self is not MessageType.UNKNOWN


class CCMode(str, enum.Enum):
    """Channel mode classifications for control change 120-127."""

    ALL_SOUNDS_OFF = "allsoundsoff"
    RESET_ALL = "resetallcontrollers"
    LOCAL_CONTROLLER_OFF = "localcontrolleroff"
    LOCAL_CONTROLLER_ON = "localcontrolleron"
    ALL_NOTES_OFF = "allnotesoff"
    OMNI_OFF = "omnimodeoff"
    OMNI_ON = "omnimodeon"  # Respond to all channels
    MONO_ON = "monomodeon"
    POLY_ON = "polymodeon"

    def __str__(self) -> str:
        return self.value


class StatusByte(enum.IntEnum):
    """Status byte family codes (high nibble)."""

    NOTE_OFF = 0x80
    NOTE_ON = 0x90
    KEY_PRESSURE = 0xA0
    CC = 0xB0
    PROGRAM_CHANGE = 0xC0
    CHANNEL_PRESSURE = 0xD0
    PITCH_BEND = 0xE0


class CCModeValue(enum.IntEnum):
    """Controller numbers reserved for channel mode messages."""

    ALL_SOUNDS_OFF = 120
    RESET_ALL = 121
    LOCAL_CONTROLLER = 122
    ALL_NOTES_OFF = 123
    OMNI_OFF = 124
    OMNI_ON = 125
    MONO_ON = 126
    POLY_ON = 127


# Family code <-> message type
STATUS_TO_TYPE: dict[int, MessageType] = {
    StatusByte.NOTE_OFF: MessageType.NOTE_OFF,
    StatusByte.NOTE_ON: MessageType.NOTE_ON,
    StatusByte.KEY_PRESSURE: MessageType.KEY_PRESSURE,
    StatusByte.CC: MessageType.CC,
    StatusByte.PROGRAM_CHANGE: MessageType.PROGRAM_CHANGE,
    StatusByte.CHANNEL_PRESSURE: MessageType.CHANNEL_PRESSURE,
    StatusByte.PITCH_BEND: MessageType.PITCH_BEND,
}

TYPE_TO_STATUS: dict[MessageType, StatusByte] = {
    message_type: StatusByte(code) for code, message_type in STATUS_TO_TYPE.items()
}

# Types whose wire form has no second data byte
TWO_BYTE_TYPES = frozenset({MessageType.PROGRAM_CHANGE, MessageType.CHANNEL_PRESSURE})
