"""Channel mode classification for control change messages.

Controller numbers 120-127 are reserved for channel mode messages, which
change global performance state instead of a continuous controller.

See:
    https://www.midi.org/specifications-old/item/table-1-summary-of-midi-message
    http://www.philrees.co.uk/articles/midimode.htm
"""

from __future__ import annotations

from ..constants import CCMode, CCModeValue


def parse_channel_mode_message(cc: int, value: int) -> CCMode | None:
    """Classify a control change as a channel mode message.

    Conditions are checked in controller order and the first match wins.
    Controllers 121, 126 and 127 match regardless of value; 122 splits on
    zero/non-zero; the remaining modes only match with a zero value.

    Args:
        cc: Controller number
        value: Controller value

    Returns:
        Matching CCMode, or None for ordinary controllers

    Examples:
        >>> parse_channel_mode_message(120, 0)
        <CCMode.ALL_SOUNDS_OFF: 'allsoundsoff'>
        >>> parse_channel_mode_message(120, 5) is None
        True
        >>> parse_channel_mode_message(126, 4)  # value is the voice count
        <CCMode.MONO_ON: 'monomodeon'>
    """
    if cc == CCModeValue.ALL_SOUNDS_OFF and value == 0:
        return CCMode.ALL_SOUNDS_OFF

    if cc == CCModeValue.RESET_ALL:
        return CCMode.RESET_ALL

    if cc == CCModeValue.LOCAL_CONTROLLER:
        return CCMode.LOCAL_CONTROLLER_OFF if value == 0 else CCMode.LOCAL_CONTROLLER_ON

    if cc == CCModeValue.ALL_NOTES_OFF and value == 0:
        return CCMode.ALL_NOTES_OFF

    if cc == CCModeValue.OMNI_OFF and value == 0:
        return CCMode.OMNI_OFF

    if cc == CCModeValue.OMNI_ON and value == 0:
        return CCMode.OMNI_ON

    # Value is the number of voices, not compared
    if cc == CCModeValue.MONO_ON:
        return CCMode.MONO_ON

    if cc == CCModeValue.POLY_ON:
        return CCMode.POLY_ON

    return None
