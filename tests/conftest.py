"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from midimessage import MidiMessage


@pytest.fixture
def message() -> MidiMessage:
    """Empty message to decode into."""
    return MidiMessage()


@pytest.fixture
def note_on_bytes() -> list[int]:
    """Note on, channel 2, note 55, velocity 113."""
    return [146, 55, 113]


@pytest.fixture
def midi_event():
    """Web MIDI style event object."""

    class Event:
        data = bytes([146, 55, 113])
        timestamp = 207.6

    return Event()
