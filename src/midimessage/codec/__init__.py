"""MIDI byte codec for midimessage.

This module provides decoding of raw MIDI arrays, encoding back to bytes
and channel mode classification.
"""

from __future__ import annotations

from .decoder import decode, unpack, validate_array
from .encoder import encode, make_status_byte, to_midi_array
from .modes import parse_channel_mode_message

__all__ = [
    "decode",
    "encode",
    "unpack",
    "validate_array",
    "make_status_byte",
    "to_midi_array",
    "parse_channel_mode_message",
]
