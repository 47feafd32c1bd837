"""Unit tests for decoding raw MIDI arrays."""

from __future__ import annotations

import logging
from decimal import Decimal
from fractions import Fraction

import pytest

from midimessage import CCMode, CodecConfig, MessageType, MidiMessage, decode
from midimessage.codec import unpack, validate_array

PITCH_BEND_VALUE = 18546


class TestDecode:
    """Test decoding of each channel-voice family."""

    def test_unknown(self, message: MidiMessage) -> None:
        """Test unrecognized family codes decode as unknown."""
        message.from_midi_array([0, 0])

        assert message.type == "unknown"
        assert message.number == 0
        assert message.value == 0
        assert message.channel == 0

    def test_unknown_zeroes_data(self) -> None:
        """Test system messages decode as unknown with zeroed fields."""
        msg = decode([0xF8, 100, 100])

        assert msg.type is MessageType.UNKNOWN
        assert msg.number == 0
        assert msg.value == 0
        assert msg.channel == 8

    def test_note_on(self, message: MidiMessage) -> None:
        """Test note on decoding."""
        message.from_midi_array([146, 55, 113])

        assert message.type == "noteon"
        assert message.number == 55
        assert message.note == 55
        assert message.value == 113
        assert message.velocity == 113
        assert message.channel == 2

    def test_note_on_zero_velocity_is_note_off(self) -> None:
        """Test velocity 0 note on is reclassified as note off."""
        assert decode([0x90, 60, 0]).type is MessageType.NOTE_OFF
        assert decode([146, 55, 0]).type is MessageType.NOTE_OFF

    def test_note_on_masked_zero_velocity_is_note_off(self) -> None:
        """Test velocity is masked before the zero check."""
        assert decode([0x90, 60, 0x80]).type is MessageType.NOTE_OFF

    def test_note_off(self, message: MidiMessage) -> None:
        """Test note off decoding."""
        message.from_midi_array([130, 55, 0])

        assert message.type == "noteoff"
        assert message.note == 55
        assert message.velocity == 0
        assert message.channel == 2

    def test_note_off_forces_zero_value(self) -> None:
        """Test note off release velocity is dropped."""
        msg = decode([0x80, 60, 64])

        assert msg.type is MessageType.NOTE_OFF
        assert msg.value == 0

    def test_key_pressure(self, message: MidiMessage) -> None:
        """Test polyphonic key pressure decoding."""
        message.from_midi_array([162, 44, 34])

        assert message.type == "keypressure"
        assert message.number == 44
        assert message.note == 44
        assert message.value == 34
        assert message.velocity == 34
        assert message.pressure == 34
        assert message.channel == 2

    def test_cc(self, message: MidiMessage) -> None:
        """Test control change decoding."""
        message.from_midi_array([178, 3, 1])

        assert message.type == "controlchange"
        assert message.number == 3
        assert message.cc == 3
        assert message.value == 1
        assert message.channel == 2
        assert message.cc_mode is None

    def test_channel_pressure(self, message: MidiMessage) -> None:
        """Test channel pressure decoding."""
        message.from_midi_array([210, 17])

        assert message.type == "channelpressure"
        assert message.number == 17
        assert message.pressure == 17
        assert message.velocity == 17
        assert message.value == 0
        assert message.channel == 2

    def test_pitch_bend(self, message: MidiMessage) -> None:
        """Test pitch bend packs msb shifted by 8 bits."""
        message.from_midi_array([226, 114, 72])

        assert message.type == "pitchbend"
        assert message.number == PITCH_BEND_VALUE
        assert message.velocity == PITCH_BEND_VALUE
        assert message.pitchbend == PITCH_BEND_VALUE
        assert message.value == 0
        assert message.channel == 2

    def test_pitch_bend_two_bytes(self) -> None:
        """Test a truncated pitch bend uses msb 0."""
        assert decode([0xE0, 100]).number == 100

    def test_program_change(self, message: MidiMessage) -> None:
        """Test program change decoding."""
        message.from_midi_array([194, 19])

        assert message.type == "programchange"
        assert message.number == 19
        assert message.program == 19
        assert message.value == 0
        assert message.channel == 2

    def test_program_change_number_is_unmasked(self) -> None:
        """Test the program number skips the data byte mask."""
        msg = decode([0xC0, 0x85])

        assert msg.number == 0x85
        assert decode([0x90, 0x85, 1]).number == 0x05

    def test_program_change_drops_third_byte(self) -> None:
        """Test a program change value is always zero."""
        assert decode([0xC0, 5, 99]).value == 0

    def test_data_bytes_masked(self) -> None:
        """Test data bytes use only their low 7 bits."""
        msg = decode([0xB0, 0xFF, 0xFF])

        assert msg.number == 127
        assert msg.value == 127

    def test_bytes_input(self) -> None:
        """Test bytes objects decode like lists."""
        assert decode(b"\x92\x37\x71") == decode([146, 55, 113])

    def test_timestamp(self) -> None:
        """Test timestamp is stored."""
        assert decode([0x90, 60, 64], 300).timestamp == 300


class TestChannelModes:
    """Test channel mode detection while decoding."""

    @pytest.mark.parametrize(
        ("data", "mode"),
        [
            ([178, 120, 0], CCMode.ALL_SOUNDS_OFF),
            ([178, 121, 1], CCMode.RESET_ALL),
            ([178, 122, 1], CCMode.LOCAL_CONTROLLER_ON),
            ([178, 122, 0], CCMode.LOCAL_CONTROLLER_OFF),
            ([178, 123, 0], CCMode.ALL_NOTES_OFF),
            ([178, 124, 0], CCMode.OMNI_OFF),
            ([178, 125, 0], CCMode.OMNI_ON),
            ([178, 126, 1], CCMode.MONO_ON),
            ([178, 127, 1], CCMode.POLY_ON),
        ],
    )
    def test_modes(self, message: MidiMessage, data: list[int], mode: CCMode) -> None:
        """Test each channel mode message."""
        message.from_midi_array(data)

        assert message.type == "controlchange"
        assert message.number == data[1]
        assert message.cc == data[1]
        assert message.value == data[2]
        assert message.channel == 2
        assert message.cc_mode is mode

    def test_mode_tag_strings(self) -> None:
        """Test modes compare equal to their string tags."""
        assert decode([0xB2, 120, 0]).cc_mode == "allsoundsoff"
        assert decode([0xB2, 126, 1]).cc_mode == "monomodeon"

    def test_mono_ignores_voice_count(self) -> None:
        """Test mono mode matches any value."""
        for voices in (0, 1, 16, 127):
            assert decode([0xB2, 126, voices]).cc_mode is CCMode.MONO_ON

    def test_all_sounds_off_requires_zero(self) -> None:
        """Test non-zero value on cc 120 is a plain controller."""
        assert decode([0xB2, 120, 5]).cc_mode is None


class TestShortInput:
    """Test too-short arrays are a logged no-op."""

    def test_single_byte_leaves_message_unchanged(self) -> None:
        """Test decoding one byte leaves the target untouched."""
        msg = decode([0x90, 60, 64], 12)
        before = msg.model_copy()

        result = msg.from_midi_array([0x00])

        assert result is msg
        assert msg == before

    def test_short_input_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test a warning is logged."""
        with caplog.at_level(logging.WARNING, logger="midimessage"):
            decode([0x00])

        assert "Illegal MIDI message of length 1" in caplog.text

    def test_empty_and_none(self) -> None:
        """Test empty input yields an empty message."""
        assert decode([]) == MidiMessage()
        assert decode(None) == MidiMessage()

    def test_into_returned_unchanged(self, message: MidiMessage) -> None:
        """Test the target message is returned as-is."""
        message.reset("cc", 7, 100, 3)

        assert decode(b"\x90", into=message) is message
        assert message.cc == 7


class TestValidation:
    """Test the array validation toggle."""

    def test_validate_array(self) -> None:
        """Test non-numeric entries fail validation."""
        assert validate_array([0x90, 60, 64]) is True
        assert validate_array([0x90, "60", 64]) is True
        assert validate_array([0x90, "abc", 64]) is False
        assert validate_array([0x90, None, 64]) is False

    def test_other_real_numbers(self) -> None:
        """Test arrays of Decimal and Fraction decode like ints."""
        assert validate_array([Decimal(0x90), Fraction(60), 64]) is True

        msg = decode([Decimal(0x90), 60, Fraction(64)])

        assert msg.type is MessageType.NOTE_ON
        assert msg.number == 60
        assert msg.value == 64

    def test_non_finite_entry_rejected(self) -> None:
        """Test a NaN entry fails validation."""
        assert validate_array([0x90, Decimal("NaN"), 64]) is False
        assert decode([0x90, float("nan"), 64]) == MidiMessage()

    def test_invalid_array_ignored(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test invalid arrays are logged and ignored when validating."""
        with caplog.at_level(logging.WARNING, logger="midimessage"):
            msg = decode([0x90, "abc", 64])

        assert msg == MidiMessage()
        assert "not a valid MIDI data array" in caplog.text

    def test_invalid_array_coerced_without_validation(self) -> None:
        """Test non-numeric entries become 0 with validation off."""
        msg = decode([0x90, "abc", 64], config=CodecConfig(validate=False))

        assert msg.type is MessageType.NOTE_ON
        assert msg.number == 0
        assert msg.value == 64

    def test_unpack(self) -> None:
        """Test unpack returns raw fields."""
        assert unpack([0x92, 55, 113]) == (MessageType.NOTE_ON, 55, 113, 2)
        assert unpack([0x92]) is None
