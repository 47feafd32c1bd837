"""MIDI byte decoder.

This module converts a raw status/data byte sequence into the fields of a
MidiMessage. Malformed input never raises: short or invalid arrays are
logged and leave the target message untouched.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterable, Sequence

from ..config import DEFAULT_CONFIG, CodecConfig
from ..constants import CHANNEL_MASK, DATA_MASK, STATUS_MASK, STATUS_TO_TYPE, MessageType
from ..utils.coerce import coerce_int, is_numeric

if TYPE_CHECKING:
    from ..models.message import MidiMessage

logger = logging.getLogger(__name__)

MIN_MESSAGE_LENGTH = 2


def validate_array(data: Iterable[Any]) -> bool:
    """Check that every entry of a raw MIDI array is numeric.

    Args:
        data: Candidate byte sequence

    Returns:
        True if every entry is numeric, False otherwise (a warning is logged)
    """
    for item in data:
        if not is_numeric(item):
            logger.warning("MidiMessage input is not a valid MIDI data array: %r", data)
            return False

    return True


def unpack(
    data: Sequence[Any] | None, config: CodecConfig | None = None
) -> tuple[MessageType, int, int, int] | None:
    """Split a raw MIDI array into message fields.

    Args:
        data: Status byte, data byte 1 and optional data byte 2
        config: Codec configuration (validation toggle)

    Returns:
        Tuple (type, number, value, channel), or None if the array is too
        short or fails validation
    """
    config = config or DEFAULT_CONFIG

    if data is None:
        data = ()
    elif not isinstance(data, (bytes, bytearray, memoryview, list, tuple)):
        data = list(data)

    if len(data) < MIN_MESSAGE_LENGTH:
        logger.warning("Illegal MIDI message of length %d", len(data))
        return None

    if config.validate and not validate_array(data):
        return None

    raw = [coerce_int(item) for item in data[:3]]
    status = raw[0]

    channel = status & CHANNEL_MASK
    message_type = STATUS_TO_TYPE.get(status & STATUS_MASK, MessageType.UNKNOWN)
    number = raw[1] & DATA_MASK
    value = raw[2] & DATA_MASK if len(raw) > 2 else 0

    if message_type is MessageType.NOTE_OFF:
        value = 0

    elif message_type is MessageType.NOTE_ON:
        # Note on with velocity 0 is a note off
        if value == 0:
            message_type = MessageType.NOTE_OFF

    elif message_type is MessageType.PROGRAM_CHANGE:
        # Program number is taken without the data mask
        number = raw[1]
        value = 0

    elif message_type is MessageType.CHANNEL_PRESSURE:
        value = 0

    elif message_type is MessageType.PITCH_BEND:
        # lsb in data byte 1, msb in data byte 2, msb shifted by a full byte
        number = (value << 8) | number
        value = 0

    elif message_type is MessageType.UNKNOWN:
        number = 0
        value = 0

    return message_type, number, value, channel


def decode(
    data: Sequence[Any] | None,
    timestamp: Any = 0,
    *,
    into: MidiMessage | None = None,
    config: CodecConfig | None = None,
) -> MidiMessage:
    """Decode a raw MIDI array into a MidiMessage.

    Args:
        data: Byte sequence such as ``b"\\x90\\x3c\\x40"`` or ``[144, 60, 64]``
        timestamp: Delay hint in milliseconds
        into: Existing message to reset in place. When decoding fails it is
            returned unchanged.
        config: Codec configuration (validation toggle)

    Returns:
        The decoded message (``into`` itself when given)

    Examples:
        ```python
        from midimessage import decode

        msg = decode([0x92, 55, 113])
        msg.type      # MessageType.NOTE_ON
        msg.channel   # 2

        decode([0xE2, 114, 72]).pitchbend  # 18546
        ```
    """
    # Import here to avoid circular dependency
    from ..models.message import MidiMessage

    message = into if into is not None else MidiMessage()

    fields = unpack(data, config)
    if fields is None:
        return message

    message_type, number, value, channel = fields
    return message.reset(message_type, number, value, channel, timestamp)
