# =============================================================================
# settings.py — Per-run settings (argv + environment)
# =============================================================================
#
# Built once by the CLI and passed down explicitly.  No module reads the
# environment on its own except through load_settings().
# =============================================================================

from __future__ import annotations
import argparse
import os
from typing import Mapping, NamedTuple

from TMV.CFG.constants import (
    WAVEFORM_WIDTH, WAVEFORM_HEIGHT, MIN_FIT_WIDTH,
    NUM_BARS, MAX_BAR_HEIGHT,
    ENV_DEBUG, ENV_DEMO_WAV, ENV_NO_COLOR,
)
from TMV.TIO.terminal import ansi_supported, terminal_size

_TRUTHY = {"1", "true", "yes", "on"}


class Settings(NamedTuple):
    wav:        str | None
    debug:      bool
    ansi:       bool
    columns:    int
    lines:      int
    width:      int
    height:     int
    bars:       int
    bar_height: int
    info:       bool
    clear:      bool
    demo_wav:   str | None


def env_flag(environ: Mapping[str, str], name: str) -> bool:
    return environ.get(name, "").strip().lower() in _TRUTHY


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {text!r}")
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be > 0, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tmv",
        description="Terminal Music Visualizer: draw a WAV file as ANSI art",
        exit_on_error=False,
    )
    parser.add_argument(
        "wav", nargs="?", default=None,
        help="Path to a PCM WAV file (8-bit or 16-bit). Omit for the demo.",
    )
    parser.add_argument(
        "--width", type=_positive_int, default=WAVEFORM_WIDTH,
        help=f"Waveform columns, default {WAVEFORM_WIDTH}",
    )
    parser.add_argument(
        "--height", type=_positive_int, default=WAVEFORM_HEIGHT,
        help=f"Waveform rows, default {WAVEFORM_HEIGHT}",
    )
    parser.add_argument(
        "--bars", type=_positive_int, default=NUM_BARS,
        help=f"Number of band bars, default {NUM_BARS}",
    )
    parser.add_argument(
        "--bar-height", type=_positive_int, default=MAX_BAR_HEIGHT,
        help=f"Band bar rows, default {MAX_BAR_HEIGHT}",
    )
    parser.add_argument(
        "--fit", action="store_true",
        help="Size the waveform to the terminal width (COLUMNS)",
    )
    parser.add_argument(
        "--info", action="store_true",
        help="Print the file's format summary before drawing",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help=f"Verbose logging (same as {ENV_DEBUG}=true)",
    )
    parser.add_argument(
        "--no-color", action="store_true",
        help=f"Plain text output (same as setting {ENV_NO_COLOR})",
    )
    parser.add_argument(
        "--no-clear", action="store_true",
        help="Do not clear the screen on startup",
    )
    return parser


def load_settings(
    args: argparse.Namespace,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Merge parsed CLI options with the environment."""
    if environ is None:
        environ = os.environ

    columns, lines = terminal_size()

    ansi = ansi_supported(environ)
    if args.no_color or ENV_NO_COLOR in environ:
        ansi = False

    width = args.width
    if args.fit:
        width = max(MIN_FIT_WIDTH, columns - 2)

    return Settings(
        wav=args.wav,
        debug=args.debug or env_flag(environ, ENV_DEBUG),
        ansi=ansi,
        columns=columns,
        lines=lines,
        width=width,
        height=args.height,
        bars=args.bars,
        bar_height=args.bar_height,
        info=args.info,
        clear=not args.no_clear,
        demo_wav=environ.get(ENV_DEMO_WAV) or None,
    )
