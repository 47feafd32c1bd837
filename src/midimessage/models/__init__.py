"""Pydantic message modeling for midimessage.

This module provides the MidiMessage model and the typed payload classes
that describe each message variant.
"""

from __future__ import annotations

from .message import MidiMessage, coerce_type
from .payload import (
    ChannelPressurePayload,
    ControlChangePayload,
    KeyPressurePayload,
    NoteOffPayload,
    NoteOnPayload,
    Payload,
    PitchBendPayload,
    ProgramChangePayload,
    UnknownPayload,
    payload_for,
)

__all__ = [
    "MidiMessage",
    "coerce_type",
    "Payload",
    "payload_for",
    "NoteOnPayload",
    "NoteOffPayload",
    "KeyPressurePayload",
    "ControlChangePayload",
    "ProgramChangePayload",
    "ChannelPressurePayload",
    "PitchBendPayload",
    "UnknownPayload",
]
