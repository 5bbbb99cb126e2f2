# =============================================================================
# constants.py — CFG fixed defaults
# =============================================================================
#
# Canvas geometry and colour cut-offs are part of the visual contract of the
# two panels.  Changing them changes every rendered frame.

APP_NAME    = "Terminal Music Visualizer"
APP_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# WAVEFORM PANEL
# -----------------------------------------------------------------------------
WAVEFORM_WIDTH  = 80
WAVEFORM_HEIGHT = 20
MIN_FIT_WIDTH   = 10      # floor for --fit when the terminal is tiny

# Three-tier colouring on the normalized (v + 1) / 2 value
WAVE_HOT_CUTOFF  = 0.8    # strictly greater → HOT
WAVE_WARM_CUTOFF = 0.6    # strictly greater → WARM, else COOL

WAVE_CELL   = "█"
WAVE_EMPTY  = " "
WAVE_LEFT   = "│"
WAVE_CORNER = "└"
WAVE_RULE   = "─"

# -----------------------------------------------------------------------------
# BAND PANEL
# -----------------------------------------------------------------------------
NUM_BARS       = 20
MAX_BAR_HEIGHT = 15

BAR_CELL  = "██"
BAR_EMPTY = "  "
BAR_RULE  = "──"
BAND_LEGEND = "Low Freq        Mid Freq        High Freq"

# -----------------------------------------------------------------------------
# DEMO SIGNAL
# (weight, frequency Hz) partials, decaying envelope with 5 Hz tremolo
# -----------------------------------------------------------------------------
DEMO_SAMPLE_RATE = 1_000      # Hz
DEMO_DURATION    = 2.0        # seconds → 2000 samples
DEMO_PARTIALS    = ((0.3, 100.0), (0.2, 300.0), (0.1, 800.0))
DEMO_DECAY       = 0.5        # exp(-DECAY * t)
DEMO_TREMOLO_HZ  = 5.0
DEMO_TREMOLO_DEPTH = 0.5

# -----------------------------------------------------------------------------
# DECODER
# -----------------------------------------------------------------------------
SUPPORTED_BITS       = (8, 16)
SUPPORTED_SUBTYPES   = {"PCM_U8": 8, "PCM_16": 16}
SUPPORTED_CONTAINERS = {"WAV", "WAVEX"}
PCM16_SCALE = 32768.0
PCM8_OFFSET = 128
PCM8_SCALE  = 128.0

# -----------------------------------------------------------------------------
# TERMINAL / ENVIRONMENT
# -----------------------------------------------------------------------------
DEFAULT_COLUMNS = 80
DEFAULT_LINES   = 24
CLEAR_FALLBACK_LINES = 50     # blank lines printed when ANSI is unavailable
BANNER_MIN_WIDTH     = 50

ENV_DEBUG    = "TMV_DEBUG"
ENV_DEMO_WAV = "TMV_DEMO_WAV"
ENV_NO_COLOR = "NO_COLOR"
ENV_TERM     = "TERM"
ENV_TERM_PROGRAM = "TERM_PROGRAM"
