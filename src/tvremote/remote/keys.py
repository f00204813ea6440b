"""Key names accepted by the TV's ``/1/input/key`` endpoint."""

from __future__ import annotations

NAVIGATION_KEYS = (
    "CursorUp",
    "CursorDown",
    "CursorLeft",
    "CursorRight",
    "Confirm",
    "Back",
    "Home",
    "Options",
    "Info",
    "Find",
    "Adjust",
)

MEDIA_KEYS = (
    "PlayPause",
    "Pause",
    "Stop",
    "Rewind",
    "FastForward",
    "Record",
    "Next",
    "Previous",
)

VOLUME_KEYS = ("VolumeUp", "VolumeDown", "Mute")

CHANNEL_KEYS = ("ChannelStepUp", "ChannelStepDown", "WatchTV", "Source", "Online")

COLOUR_KEYS = ("RedColour", "GreenColour", "YellowColour", "BlueColour")

DIGIT_KEYS = tuple(f"Digit{n}" for n in range(10)) + ("Dot",)

MISC_KEYS = ("Standby", "Teletext", "Subtitle", "Viewmode", "AmbilightOnOff")

KNOWN_KEYS: tuple[str, ...] = (
    NAVIGATION_KEYS
    + MEDIA_KEYS
    + VOLUME_KEYS
    + CHANNEL_KEYS
    + COLOUR_KEYS
    + DIGIT_KEYS
    + MISC_KEYS
)


def is_known_key(key: str) -> bool:
    return key in KNOWN_KEYS
