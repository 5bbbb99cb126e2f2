# =============================================================================
# tones.py — Semantic colour tags
# =============================================================================
#
# The renderers only ever emit a Tone.  Mapping a Tone to an actual terminal
# style happens in TIO/terminal.py, at the output boundary.

from enum import Enum


class Tone(Enum):
    PRIMARY = "primary"
    INFO    = "info"
    WARNING = "warning"
    ERROR   = "error"
    DEBUG   = "debug"
    TITLE   = "title"
    ACCENT  = "accent"
    BANNER  = "banner"

    # waveform amplitude tiers
    HOT  = "hot"
    WARM = "warm"
    COOL = "cool"

    # band position tiers
    LOW  = "low"
    MID  = "mid"
    HIGH = "high"
