"""MIDI byte encoder.

This module converts a MidiMessage back into the status/data byte layout
expected by a MIDI transport.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..constants import DATA_MASK, TWO_BYTE_TYPES, TYPE_TO_STATUS, MessageType
from ..exceptions import EncodeError

if TYPE_CHECKING:
    from ..models.message import MidiMessage


def make_status_byte(status: int, channel: int) -> int:
    """Combine a family code and a channel into a status byte.

    The channel is added, not OR'd, so only channels 0-15 stay inside the
    low nibble.
    """
    return int(status) + channel


def to_midi_array(message: MidiMessage) -> list[int]:
    """Encode a message as a list of ints.

    Three entries for note, key pressure, control change and pitch bend
    messages, two for program change and channel pressure. Unknown messages
    produce ``[0, number, value]``.

    Args:
        message: Message to encode

    Returns:
        Status byte followed by data bytes
    """
    out = [0, message.number, message.value]

    status = TYPE_TO_STATUS.get(message.type)
    if status is not None:
        out[0] = make_status_byte(status, message.channel)

    if message.type is MessageType.PITCH_BEND:
        out[1] = message.number & DATA_MASK  # lsb
        out[2] = (message.number >> 8) & DATA_MASK  # msb

    if message.type in TWO_BYTE_TYPES:
        del out[2:]

    return out


def encode(message: MidiMessage) -> bytes:
    """Encode a message to raw MIDI bytes.

    Args:
        message: Message to encode

    Returns:
        Wire bytes (2 or 3 bytes for channel-voice messages)

    Raises:
        EncodeError: If a computed byte falls outside 0-255

    Examples:
        ```python
        from midimessage import create, encode

        encode(create("pitchbend", 18546, 0, 2))  # b"\\xe2\\x72\\x48"
        encode(create("programchange", 19, 0, 2))  # b"\\xc2\\x13"
        ```
    """
    out = to_midi_array(message)

    for index, byte in enumerate(out):
        if not 0 <= byte <= 0xFF:
            raise EncodeError(
                f"{message.type} byte {index}: value {byte} out of bounds [0, 255]"
            )

    return bytes(out)
