# =============================================================================
# visualizer.py — AudioVisualizer
# =============================================================================
#
# Glues the pure renderers to a Terminal.  An empty or None buffer is not an
# error: it logs a warning and draws nothing.
# =============================================================================

from __future__ import annotations
import logging
from typing import Sequence

from TMV.CFG.constants import (
    WAVEFORM_WIDTH, WAVEFORM_HEIGHT, NUM_BARS, MAX_BAR_HEIGHT,
)
from TMV.CFG.tones import Tone
from TMV.SViz.band_bars import render_bands
from TMV.SViz.demo_signal import generate_sample_audio
from TMV.SViz.waveform import render_waveform
from TMV.TIO.terminal import Terminal

WAVEFORM_TITLE = "🌊 Waveform Visualization"
BANDS_TITLE    = "📊 Frequency Bars"


class AudioVisualizer:
    """
    Draws the waveform and band panels for a sample buffer.

    Usage:
        viz = AudioVisualizer(Terminal(ansi=True))
        viz.visualize(samples)
    """

    def __init__(
        self,
        terminal: Terminal,
        log: logging.Logger | None = None,
        width: int = WAVEFORM_WIDTH,
        height: int = WAVEFORM_HEIGHT,
        num_bars: int = NUM_BARS,
        max_bar_height: int = MAX_BAR_HEIGHT,
    ) -> None:
        self.terminal       = terminal
        self.log            = log or logging.getLogger("tmv.visualizer")
        self.width          = width
        self.height         = height
        self.num_bars       = num_bars
        self.max_bar_height = max_bar_height

    def visualize(self, samples: Sequence[float] | None) -> None:
        if not self._has_data(samples):
            return
        self.log.info("Visualizing %d audio samples", len(samples))
        self.visualize_waveform(samples)
        self.terminal.newline()
        self.visualize_frequency_bars(samples)

    def visualize_waveform(self, samples: Sequence[float] | None) -> None:
        if not self._has_data(samples):
            return
        self.terminal.line([(WAVEFORM_TITLE, Tone.TITLE)])
        self.terminal.lines(render_waveform(samples, self.width, self.height))

    def visualize_frequency_bars(self, samples: Sequence[float] | None) -> None:
        if not self._has_data(samples):
            return
        self.terminal.line([(BANDS_TITLE, Tone.ACCENT)])
        self.terminal.lines(render_bands(samples, self.num_bars, self.max_bar_height))

    def visualize_sample(self) -> None:
        self.log.info("Generating sample visualization...")
        self.visualize(generate_sample_audio())

    def _has_data(self, samples) -> bool:
        if samples is None or len(samples) == 0:
            self.log.warning("No audio data to visualize")
            return False
        return True
