"""Unit tests for CodecConfig."""

from __future__ import annotations

import pytest

from midimessage import DEFAULT_CONFIG, CodecConfig, ConfigError, MidiMessageError


class TestCodecConfig:
    """Test configuration validation."""

    def test_defaults(self) -> None:
        """Test default values."""
        assert DEFAULT_CONFIG.validate is True
        assert DEFAULT_CONFIG.note_velocity == 127

    def test_validate_must_be_bool(self) -> None:
        """Test validate rejects non-bools."""
        with pytest.raises(ConfigError, match="validate must be a bool"):
            CodecConfig(validate="yes")  # type: ignore[arg-type]

    @pytest.mark.parametrize("velocity", [-1, 128, 1.5, True])
    def test_note_velocity_bounds(self, velocity: object) -> None:
        """Test note_velocity must be an int in 0-127."""
        with pytest.raises(ConfigError):
            CodecConfig(note_velocity=velocity)  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        """Test configs cannot be mutated."""
        with pytest.raises(AttributeError):
            DEFAULT_CONFIG.validate = False  # type: ignore[misc]

    def test_error_hierarchy(self) -> None:
        """Test ConfigError is a MidiMessageError."""
        assert issubclass(ConfigError, MidiMessageError)
