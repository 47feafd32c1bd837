"""The MidiMessage model.

MidiMessage is a pydantic model with assignment validation, so every field
write passes through a normalizing setter: types fall back to ``unknown``,
channels clamp to 0-16, numbers and values coerce to ints and values clamp
to 0-127 for the channel-voice types.

Derived fields (``note``, ``velocity``, ``cc``, ...) and the channel mode are
computed from ``type``, ``number`` and ``value`` on access, so only the group
for the current type is ever populated.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from ..codec.decoder import decode
from ..codec.encoder import encode, to_midi_array
from ..codec.modes import parse_channel_mode_message
from ..config import CodecConfig
from ..constants import MAX_CHANNEL, MAX_DATA, MIN_CHANNEL, MIN_DATA, CCMode, MessageType
from ..utils.coerce import clamp, coerce_int
from .payload import Payload, payload_for

logger = logging.getLogger(__name__)

FIELD_NAMES = ("type", "number", "value", "channel", "timestamp")
DERIVED_NAMES = ("note", "velocity", "pressure", "cc", "program", "pitchbend")

# Shorthand tags accepted besides the canonical ones
TYPE_ALIASES = {"cc": MessageType.CC}


def coerce_type(value: Any) -> MessageType:
    """Map a type tag to a MessageType, falling back to UNKNOWN.

    Matching ignores case, underscores, hyphens and spaces, so ``"noteon"``,
    ``"NOTE_ON"`` and ``"note-on"`` are equivalent. ``"cc"`` is accepted as
    shorthand for control change.
    """
    if isinstance(value, MessageType):
        return value

    if isinstance(value, str):
        tag = value.strip().lower()
        for separator in ("_", "-", " "):
            tag = tag.replace(separator, "")

        if tag in TYPE_ALIASES:
            return TYPE_ALIASES[tag]

        try:
            return MessageType(tag)
        except ValueError:
            pass

    logger.debug("Unrecognized message type %r, using %s", value, MessageType.UNKNOWN)
    return MessageType.UNKNOWN


def _read_field(source: Any, name: str, default: Any = None) -> Any:
    """Read a field from a message-shaped object or mapping."""
    if isinstance(source, Mapping):
        return source.get(name, default)
    return getattr(source, name, default)


class MidiMessage(BaseModel):
    """A single MIDI channel-voice message.

    Construct directly with keyword arguments, or use ``create()`` for the
    positional shorthands (parameters, byte arrays, other messages and bare
    note numbers).

    Example:
        >>> msg = MidiMessage(type="noteon", number=60, value=64, channel=2)
        >>> msg.note, msg.velocity
        (60, 64)
        >>> msg.to_midi_array()
        [146, 60, 64]
        >>> msg.channel = 99
        >>> msg.channel
        16

    Attributes:
        type: Message variant
        channel: MIDI channel, clamped to 0-16
        number: Note, controller or program number; packed bend for pitch bend
        value: Velocity, pressure or controller value
        timestamp: Delay hint in milliseconds
    """

    model_config = ConfigDict(
        strict=False,
        # Every assignment goes through the setters below
        validate_assignment=True,
        extra="forbid",
    )

    type: MessageType = MessageType.UNKNOWN
    channel: int = 0
    number: int = 0
    value: int = 0
    timestamp: int = 0

    @field_validator("type", mode="before")
    @classmethod
    def _normalize_type(cls, value: Any) -> MessageType:
        return coerce_type(value)

    @field_validator("channel", mode="before")
    @classmethod
    def _normalize_channel(cls, value: Any) -> int:
        return clamp(coerce_int(value), MIN_CHANNEL, MAX_CHANNEL)

    @field_validator("number", "value", "timestamp", mode="before")
    @classmethod
    def _normalize_int(cls, value: Any) -> int:
        return coerce_int(value)

    @model_validator(mode="after")
    def _clamp_value(self) -> MidiMessage:
        """Clamp value for the current type.

        Runs after construction and after every assignment, so changing
        ``type`` or ``number`` re-clamps a value that was stored while the
        type was still unknown.
        """
        if self.type.is_voice:
            clamped = clamp(self.value, MIN_DATA, MAX_DATA)
            if clamped != self.value:
                # Write around __setattr__ to avoid re-entering validation
                self.__dict__["value"] = clamped
        return self

    # ------------------------------------------------------------------
    # Construction

    @classmethod
    def from_note(
        cls, note: Any, velocity: Any = MAX_DATA, channel: Any = 0, timestamp: Any = 0
    ) -> MidiMessage:
        """Build a note on message. Non-numeric velocity becomes 127."""
        return cls().reset(
            MessageType.NOTE_ON,
            note,
            coerce_int(velocity, default=MAX_DATA),
            channel,
            timestamp,
        )

    def reset(
        self,
        type: Any,
        number: Any = 0,
        value: Any = 0,
        channel: Any = 0,
        timestamp: Any = 0,
    ) -> MidiMessage:
        """Overwrite every field through the normalizing setters.

        Type is always set before value so the value clamp sees the new type.

        Returns:
            self, for chaining
        """
        self.timestamp = timestamp
        self.type = type
        self.channel = channel
        self.number = number
        self.value = value
        return self

    def copy_from(self, message: MidiMessage | Mapping[str, Any]) -> MidiMessage:
        """Copy fields from another message or message-shaped mapping.

        The copy is re-normalized, never taken verbatim.

        Returns:
            self, for chaining
        """
        return self.reset(
            _read_field(message, "type", MessageType.UNKNOWN),
            _read_field(message, "number", 0),
            _read_field(message, "value", 0),
            _read_field(message, "channel", 0),
            _read_field(message, "timestamp", 0),
        )

    def from_midi_array(
        self, data: Sequence[Any], timestamp: Any = 0, config: CodecConfig | None = None
    ) -> MidiMessage:
        """Decode a raw MIDI array into this message.

        Arrays shorter than two bytes are logged and leave the message
        unchanged.

        Returns:
            self, for chaining
        """
        return decode(data, timestamp, into=self, config=config)

    def from_midi_event(self, event: Any, config: CodecConfig | None = None) -> MidiMessage:
        """Decode an event exposing ``data`` and ``timestamp``.

        Accepts Web MIDI style event objects as well as mappings.

        Returns:
            self, for chaining
        """
        return self.from_midi_array(
            _read_field(event, "data"), _read_field(event, "timestamp", 0), config=config
        )

    # ------------------------------------------------------------------
    # Encoding

    def to_midi_array(self) -> list[int]:
        """Encode as a list of ints (2 or 3 entries for voice messages)."""
        return to_midi_array(self)

    def to_bytes(self) -> bytes:
        """Encode as raw MIDI bytes.

        Raises:
            EncodeError: If a byte falls outside 0-255
        """
        return encode(self)

    def to_dict(self) -> dict[str, Any]:
        """Return the stored fields plus the derived group for the current type."""
        record: dict[str, Any] = {name: getattr(self, name) for name in FIELD_NAMES}
        record["type"] = self.type.value

        for name in DERIVED_NAMES:
            derived = getattr(self, name)
            if derived is not None:
                record[name] = derived

        mode = self.cc_mode
        record["cc_mode"] = mode.value if mode is not None else None
        return record

    # ------------------------------------------------------------------
    # Derived fields

    @property
    def cc_mode(self) -> Optional[CCMode]:
        """Channel mode for control change 120-127, None otherwise."""
        if self.type is not MessageType.CC:
            return None
        return parse_channel_mode_message(self.number, self.value)

    @property
    def payload(self) -> Payload:
        """Typed view of this message for its current type."""
        return payload_for(self.type, self.number, self.value, self.cc_mode)

    def _derived(self, name: str) -> Optional[int]:
        return getattr(self.payload, name, None)

    @property
    def note(self) -> Optional[int]:
        return self._derived("note")

    @property
    def velocity(self) -> Optional[int]:
        return self._derived("velocity")

    @property
    def pressure(self) -> Optional[int]:
        return self._derived("pressure")

    @property
    def cc(self) -> Optional[int]:
        return self._derived("cc")

    @property
    def program(self) -> Optional[int]:
        return self._derived("program")

    @property
    def pitchbend(self) -> Optional[int]:
        return self._derived("pitchbend")
