"""Message construction from any supported input shape.

``create()`` is the single entry point for building a MidiMessage. It
dispatches on the shape of its arguments and funnels every path through
``MidiMessage.reset()``, so all inputs are normalized the same way.
"""

from __future__ import annotations

import logging
import numbers
from typing import Any, Mapping, Sequence

from .codec.decoder import decode
from .config import DEFAULT_CONFIG, CodecConfig
from .models.message import MidiMessage
from .utils import coerce_int, is_numeric

logger = logging.getLogger(__name__)

_BYTE_TYPES = (bytes, bytearray, memoryview)


def _is_int(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _from_array(data: Sequence[Any], rest: Sequence[Any], config: CodecConfig) -> MidiMessage:
    timestamp = rest[0] if rest else 0
    return decode(data, timestamp, config=config)


def create(*args: Any, config: CodecConfig | None = None) -> MidiMessage:
    """Create a normalized MidiMessage from any supported input shape.

    Supported shapes:

    - no arguments: empty ``unknown`` message
    - parameters: ``create("noteon", 60, 64, 0, 120)`` or the same packed
      in a list, ``create(["noteon", 60, 64, 0, 120])``
    - another message or mapping with message fields: re-normalized copy
    - raw MIDI data: ``create([0x90, 60, 64])``, ``create(b"\\x90<@", 207)``
      or bare bytes ``create(0x90, 60, 64, 300)`` (a fourth int is the
      timestamp)
    - a bare note number: ``create(78)`` or ``create(78.0)`` is a note on
      at full velocity. Any finite real is truncated like a setter would.
    - any other leading value followed by more arguments is taken as an
      invalid type tag: ``create(None, 60, 64, 3)`` is an ``unknown``
      message that keeps number, value and channel

    Only the first five parameters are used.

    Args:
        *args: One of the input shapes above
        config: Codec configuration (validation toggle, note velocity)

    Returns:
        Normalized message. Invalid raw arrays and a lone unsupported value
        (such as None or NaN) are logged and produce an empty message.

    Examples:
        ```python
        from midimessage import create

        create([0x92, 55, 113]).note         # 55
        create("cc", 3, 1).type              # MessageType.CC
        create(78).velocity                  # 127
        create("noteon", 60, 64, -5).channel  # 0
        ```
    """
    config = config or DEFAULT_CONFIG

    if not args:
        return MidiMessage()

    first, rest = args[0], args[1:]

    if isinstance(first, (MidiMessage, Mapping)):
        return MidiMessage().copy_from(first)

    # str covers MessageType members
    if isinstance(first, str):
        return MidiMessage().reset(*args[:5])

    if isinstance(first, _BYTE_TYPES):
        return _from_array(first, rest, config)

    if isinstance(first, (list, tuple)):
        if first and isinstance(first[0], str):
            return MidiMessage().reset(*first[:5])
        return _from_array(first, rest, config)

    if _is_int(first) and rest:
        return _from_array(args[:3], args[3:4], config)

    # any other leading value is a type tag; an invalid one becomes unknown
    if rest:
        return MidiMessage().reset(*args[:5])

    if is_numeric(first) and not isinstance(first, bool):
        return MidiMessage.from_note(coerce_int(first), velocity=config.note_velocity)

    logger.warning("Unsupported MidiMessage input: %r", first)
    return MidiMessage()


def from_event(event: Any, config: CodecConfig | None = None) -> MidiMessage:
    """Create a message from an event exposing ``data`` and ``timestamp``.

    Example:
        ```python
        def on_midi_message(event):
            msg = from_event(event)
            if msg.type == "noteon":
                synth.play(msg.note, msg.velocity)
        ```
    """
    return MidiMessage().from_midi_event(event, config=config or DEFAULT_CONFIG)
