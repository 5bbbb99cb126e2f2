# =============================================================================
# TMV/SViz/__init__.py — Signal Visualizer Module
# =============================================================================
#
# Pure renderers: a sample buffer goes in, a list of lines comes out.  Each
# line is a list of (text, Tone | None) segments; nothing here knows about
# escape codes.  AudioVisualizer hands the lines to a TIO Terminal.
#
# Sub-modules:
#   waveform.py     — abs-mean downsample + row-threshold raster
#   band_bars.py    — block-average "frequency" bands + bar raster
#   demo_signal.py  — deterministic 3-partial demo buffer
#   visualizer.py   — AudioVisualizer: titles, empty-buffer guard, output
# =============================================================================

from TMV.SViz.waveform import downsample, render_waveform
from TMV.SViz.band_bars import band_edges, band_magnitudes, render_bands
from TMV.SViz.demo_signal import generate_sample_audio
from TMV.SViz.visualizer import AudioVisualizer

__all__ = [
    "downsample", "render_waveform",
    "band_edges", "band_magnitudes", "render_bands",
    "generate_sample_audio", "AudioVisualizer",
]
