# =============================================================================
# terminal.py — Terminal output sink
# =============================================================================
#
# Renderers produce lines as lists of (text, Tone | None) segments.  This
# module is the output boundary: it resolves each Tone to a rich style and
# lets rich emit the ANSI sequences, or plain text when ANSI is off.
#
# ANSI probe (ansi_supported):
#   TERM in {dumb, unknown} with no TERM_PROGRAM  → off everywhere
#   Linux / macOS / BSD                           → on
#   Windows                                       → on if TERM_PROGRAM or TERM set
#   anything else                                 → on if TERM set
#
# The dumb-terminal rule applies on Linux / macOS too: TERM=dumb means plain
# text there even though those platforms otherwise default to on.
#
# Geometry (terminal_size):
#   COLUMNS / LINES override, then the real terminal, then 80 x 24.
# =============================================================================

from __future__ import annotations
import os
import shutil
import sys
from typing import Iterable, Mapping, Optional, TextIO, Tuple

from rich.cells import cell_len
from rich.console import Console
from rich.text import Text

from TMV.CFG.constants import (
    DEFAULT_COLUMNS, DEFAULT_LINES, CLEAR_FALLBACK_LINES, BANNER_MIN_WIDTH,
    ENV_TERM, ENV_TERM_PROGRAM,
)
from TMV.CFG.tones import Tone

Segment = Tuple[str, Optional[Tone]]

TONE_STYLES = {
    Tone.PRIMARY: "cyan",
    Tone.INFO:    "green",
    Tone.WARNING: "yellow",
    Tone.ERROR:   "red",
    Tone.DEBUG:   "cyan",
    Tone.TITLE:   "blue",
    Tone.ACCENT:  "magenta",
    Tone.BANNER:  "bright_yellow",
    Tone.HOT:     "red",
    Tone.WARM:    "yellow",
    Tone.COOL:    "green",
    Tone.LOW:     "red",
    Tone.MID:     "yellow",
    Tone.HIGH:    "cyan",
}

_DUMB_TERMS = {"dumb", "unknown"}


def ansi_supported(
    environ: Mapping[str, str] | None = None,
    platform: str | None = None,
) -> bool:
    if environ is None:
        environ = os.environ
    if platform is None:
        platform = sys.platform

    term = environ.get(ENV_TERM)
    term_program = environ.get(ENV_TERM_PROGRAM)

    if term in _DUMB_TERMS and not term_program:
        return False
    if platform.startswith(("linux", "darwin")) or "bsd" in platform:
        return True
    if platform.startswith("win"):
        return bool(term_program) or term is not None
    return term is not None


def terminal_size() -> tuple[int, int]:
    """(columns, lines), best effort."""
    size = shutil.get_terminal_size((DEFAULT_COLUMNS, DEFAULT_LINES))
    return size.columns, size.lines


class Terminal:
    """
    Styled text sink.

    Parameters
    ----------
    ansi : bool
        Emit ANSI colour / control sequences.  When False the output is
        plain text, byte-for-byte the same characters minus the styling.
    file : TextIO, optional
        Destination stream, stdout by default.
    """

    def __init__(self, ansi: bool, file: TextIO | None = None) -> None:
        self.ansi = ansi
        self.console = Console(
            file=file,
            force_terminal=ansi,
            no_color=not ansi,
            color_system="standard" if ansi else None,
            highlight=False,
            markup=False,
            emoji=False,
            soft_wrap=True,
        )

    # ── Segments ───────────────────────────────────────────────────────────

    @staticmethod
    def _text(segments: Iterable[Segment]) -> Text:
        text = Text()
        for chunk, tone in segments:
            text.append(chunk, style=TONE_STYLES.get(tone) if tone else None)
        return text

    def write(self, chunk: str, tone: Tone | None = None) -> None:
        self.console.print(self._text([(chunk, tone)]), end="")

    def line(self, segments: Iterable[Segment] = ()) -> None:
        self.console.print(self._text(segments))

    def lines(self, rows: Iterable[Iterable[Segment]]) -> None:
        for row in rows:
            self.line(row)

    def newline(self) -> None:
        self.console.print()

    def colorize(self, chunk: str, tone: Tone | None) -> str:
        """Return `chunk` wrapped in its escape sequences (or unchanged)."""
        with self.console.capture() as capture:
            self.write(chunk, tone)
        return capture.get()

    # ── Screen furniture ───────────────────────────────────────────────────

    def clear_screen(self) -> None:
        if self.ansi:
            self.console.clear()
        else:
            self.console.print("\n" * (CLEAR_FALLBACK_LINES - 1))

    def separator(self, width: int, char: str = "=", tone: Tone | None = None) -> None:
        self.line([(char * width, tone)])

    def banner(self, title: str) -> None:
        """
        ═══════════════════════
        ║       title         ║
        ═══════════════════════
        """
        title_len = cell_len(title)
        width = max(title_len + 4, BANNER_MIN_WIDTH)
        padding = (width - title_len - 2) // 2

        self.separator(width, "═", Tone.PRIMARY)
        self.line([
            ("║" + " " * padding, None),
            (title, Tone.BANNER),
            (" " * (width - title_len - padding - 2) + "║", None),
        ])
        self.separator(width, "═", Tone.PRIMARY)
