# =============================================================================
# band_bars.py — "Frequency" band panel
# =============================================================================
#
# NOTE: despite the name these are NOT spectral bands.  The buffer is cut
# into num_bars contiguous time-domain blocks and each bar is the mean
# |sample| of its block.  No FFT is performed, on purpose.
#
# Partition (L samples, N bars, per = L // N):
#   band b        → [b*per, min((b+1)*per, L))
#   band N-1      → [(N-1)*per, L)      absorbs the L % N remainder
#   L < N         → per == 0, every band is empty (all bars flat)
#   empty band    → magnitude 0
#
# Raster, row = max_bar_height .. 1:
#   magnitude * max_bar_height >= row → "██", else "  "
#   tone by position: b < N//3 LOW, b < 2N//3 MID, else HIGH
# =============================================================================

from __future__ import annotations
from typing import Sequence

import numpy as np

from TMV.CFG.constants import (
    NUM_BARS, MAX_BAR_HEIGHT,
    BAR_CELL, BAR_EMPTY, BAR_RULE, BAND_LEGEND,
)
from TMV.CFG.tones import Tone


def band_edges(n_samples: int, num_bands: int) -> list[tuple[int, int]]:
    per = n_samples // num_bands
    if per == 0:
        return [(0, 0)] * num_bands

    edges = []
    for band in range(num_bands):
        start = band * per
        if band == num_bands - 1:
            end = n_samples
        else:
            end = min((band + 1) * per, n_samples)
        edges.append((start, end))
    return edges


def band_magnitudes(samples: Sequence[float], num_bands: int = NUM_BARS) -> np.ndarray:
    mags  = np.abs(np.asarray(samples, dtype=np.float64))
    bands = np.zeros(num_bands, dtype=np.float64)
    for band, (start, end) in enumerate(band_edges(len(mags), num_bands)):
        if end > start:
            bands[band] = mags[start:end].mean()
    return bands


def band_tone(band: int, num_bands: int) -> Tone:
    if band < num_bands // 3:
        return Tone.LOW
    if band < 2 * num_bands // 3:
        return Tone.MID
    return Tone.HIGH


def render_bands(
    samples: Sequence[float],
    num_bars: int = NUM_BARS,
    max_bar_height: int = MAX_BAR_HEIGHT,
) -> list[list[tuple[str, Tone | None]]]:
    """Return the panel body: bar rows, the rule, then the low/mid/high legend."""
    heights = band_magnitudes(samples, num_bars) * max_bar_height

    rows = []
    for row in range(max_bar_height, 0, -1):
        line = []
        for band, bar_height in enumerate(heights):
            if bar_height >= row:
                line.append((BAR_CELL, band_tone(band, num_bars)))
            else:
                line.append((BAR_EMPTY, None))
        rows.append(line)

    rows.append([(BAR_RULE * num_bars, None)])
    rows.append([(BAND_LEGEND, None)])
    return rows
