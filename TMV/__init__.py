# =============================================================================
# Terminal Music Visualizer (TMV)
# Reads a PCM WAV file and draws it in the terminal as ANSI text.
# =============================================================================
#
# ── DATA FLOW (strictly left to right, no feedback) ──────────────────────────
#
#   path ──► ADM (decode) ──► float64 samples in [-1, 1] ──► SViz (render)
#                                                              │
#                                     TIO (ANSI / plain text) ◄┘
#
# RESPONSIBLE for:
#   - PCM WAV decoding, 8-bit unsigned and 16-bit signed, either byte order
#   - Waveform panel   (abs-mean downsample, row threshold raster)
#   - Band bar panel   (block-average magnitude per contiguous band)
#   - Deterministic demo signal when no file is given
#
# NOT responsible for:
#   - Spectral analysis.  The "frequency bands" are time-domain blocks of
#     the sample buffer, NOT an FFT.  Keep it that way.
#   - Streaming / real-time input, non-WAV containers, compressed codecs.
#
# ── Module layout ─────────────────────────────────────────────────────────────
#   CFG/   — constants, semantic tones, runtime settings (env + argv)
#   ADM/   — Audio Decode Module: WAV probe / decode / describe
#   SViz/  — Signal Visualizer: waveform + band panels, demo generator
#   TIO/   — Terminal I/O: rich-backed output sink, log handler
#   cli.py — argparse entry point (`tmv`, `python -m TMV`)
# =============================================================================

from TMV.CFG.constants import APP_VERSION as __version__
