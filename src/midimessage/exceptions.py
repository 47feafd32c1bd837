"""Exception hierarchy for midimessage.

Malformed MIDI input never raises: it is coerced, clamped or logged. The
exceptions below are reserved for caller programming errors.
All exceptions inherit from MidiMessageError for easy catching.
"""

from __future__ import annotations


class MidiMessageError(Exception):
    """Base exception for all midimessage errors."""

    pass


class ConfigError(MidiMessageError):
    """Raised when a CodecConfig is constructed with invalid values.

    Examples:
        - validate is not a bool
        - note_velocity outside 0-127
    """

    pass


class EncodeError(MidiMessageError):
    """Raised when a message cannot be represented as a byte string.

    Examples:
        - number set to 300 on a NoteOn (byte out of 0-255)
        - negative number on an Unknown message
    """

    pass
