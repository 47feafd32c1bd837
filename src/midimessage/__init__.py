"""midimessage: MIDI Channel-Voice Message Codec

A Python library for converting between raw MIDI bytes, as delivered by a
hardware or virtual MIDI port, and labelled message objects for sequencers,
controllers and synthesizers.

Key Features:
- Pydantic-based message model with normalizing setters
- Decoding of the seven channel-voice message types
- Encoding back to 2 or 3 wire bytes
- Channel mode detection for control change 120-127
- Never raises on malformed input: values are coerced, clamped or logged

Quick Start:
    >>> from midimessage import create, encode
    >>>
    >>> msg = create([0x90, 60, 64])
    >>> msg.type, msg.note, msg.velocity
    (<MessageType.NOTE_ON: 'noteon'>, 60, 64)
    >>> msg.type = "noteoff"
    >>> encode(msg)
    b'\\x80<@'
    >>> create([0xB2, 120, 0]).cc_mode
    <CCMode.ALL_SOUNDS_OFF: 'allsoundsoff'>
"""

from __future__ import annotations

from .codec import (
    decode,
    encode,
    make_status_byte,
    parse_channel_mode_message,
    to_midi_array,
    validate_array,
)
from .config import DEFAULT_CONFIG, CodecConfig
from .constants import (
    CHANNEL_MASK,
    DATA_MASK,
    STATUS_MASK,
    CCMode,
    CCModeValue,
    MessageType,
    StatusByte,
)
from .exceptions import ConfigError, EncodeError, MidiMessageError
from .factory import create, from_event
from .models import (
    ChannelPressurePayload,
    ControlChangePayload,
    KeyPressurePayload,
    MidiMessage,
    NoteOffPayload,
    NoteOnPayload,
    Payload,
    PitchBendPayload,
    ProgramChangePayload,
    UnknownPayload,
)

__version__ = "0.1.0"

__all__ = [
    # Core API
    "MidiMessage",
    "create",
    "from_event",
    "decode",
    "encode",
    "to_midi_array",
    "make_status_byte",
    "validate_array",
    "parse_channel_mode_message",
    # Configuration
    "CodecConfig",
    "DEFAULT_CONFIG",
    # Constants
    "MessageType",
    "CCMode",
    "StatusByte",
    "CCModeValue",
    "STATUS_MASK",
    "CHANNEL_MASK",
    "DATA_MASK",
    # Payloads
    "Payload",
    "NoteOnPayload",
    "NoteOffPayload",
    "KeyPressurePayload",
    "ControlChangePayload",
    "ProgramChangePayload",
    "ChannelPressurePayload",
    "PitchBendPayload",
    "UnknownPayload",
    # Exceptions
    "MidiMessageError",
    "ConfigError",
    "EncodeError",
    # Version
    "__version__",
]
