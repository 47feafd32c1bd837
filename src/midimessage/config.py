"""Codec configuration.

The validation toggle is an explicit value passed to the construction and
decode entry points rather than process-wide state.
"""

from __future__ import annotations

from dataclasses import dataclass

from .constants import MAX_DATA, MIN_DATA
from .exceptions import ConfigError


@dataclass(frozen=True)
class CodecConfig:
    """Configuration for message construction and decoding.

    Attributes:
        validate: Check raw arrays for non-numeric entries before decoding
            (default True). An invalid array is logged and ignored. Turn this
            off in hot paths where the byte source is already trusted; with
            validation off, non-numeric entries coerce to 0.

        note_velocity: Velocity given to messages built from a bare note
            number (default 127).

    Examples:
        ```python
        from midimessage import CodecConfig, create

        fast = CodecConfig(validate=False)
        msg = create([0x90, 60, 64], config=fast)

        soft = CodecConfig(note_velocity=40)
        create(60, config=soft).velocity  # 40
        ```
    """

    validate: bool = True
    note_velocity: int = MAX_DATA

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not isinstance(self.validate, bool):
            raise ConfigError(f"validate must be a bool, got {self.validate!r}")

        if isinstance(self.note_velocity, bool) or not isinstance(self.note_velocity, int):
            raise ConfigError(f"note_velocity must be an int, got {self.note_velocity!r}")

        if not MIN_DATA <= self.note_velocity <= MAX_DATA:
            raise ConfigError(
                f"note_velocity must be {MIN_DATA}-{MAX_DATA}, got {self.note_velocity}"
            )


DEFAULT_CONFIG = CodecConfig()
