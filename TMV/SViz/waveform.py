# =============================================================================
# waveform.py — Waveform panel
# =============================================================================
#
# Step 1 — downsample to W points
#   Bin i covers samples [floor(i*len/W), floor((i+1)*len/W)).  Its value is
#   the mean of |sample| over the bin, so sign is discarded and every point
#   is >= 0.  If len <= W the buffer is returned untouched (signs included)
#   and only len columns are drawn.
#
# Step 2 — raster, top row (H-1) down to row 0
#   level     = (v + 1) / 2       applied to the already non-negative v,
#                                 which lifts every column into the upper half
#   threshold = row / H
#   level >= threshold → "█", toned HOT (> 0.8) / WARM (> 0.6) / COOL
#   otherwise          → " "
#
# Step 3 — "└" + W x "─"
# =============================================================================

from __future__ import annotations
from typing import Sequence

import numpy as np

from TMV.CFG.constants import (
    WAVEFORM_WIDTH, WAVEFORM_HEIGHT,
    WAVE_HOT_CUTOFF, WAVE_WARM_CUTOFF,
    WAVE_CELL, WAVE_EMPTY, WAVE_LEFT, WAVE_CORNER, WAVE_RULE,
)
from TMV.CFG.tones import Tone


def downsample(samples: Sequence[float], target_width: int) -> np.ndarray:
    data = np.asarray(samples, dtype=np.float64)
    n = len(data)
    if n <= target_width:
        return data

    edges  = (np.arange(target_width + 1, dtype=np.int64) * n) // target_width
    counts = np.diff(edges)
    sums   = np.add.reduceat(np.abs(data), edges[:-1])
    # n > target_width guarantees every bin holds at least one sample
    return sums / counts


def level_tone(level: float) -> Tone:
    if level > WAVE_HOT_CUTOFF:
        return Tone.HOT
    if level > WAVE_WARM_CUTOFF:
        return Tone.WARM
    return Tone.COOL


def render_waveform(
    samples: Sequence[float],
    width: int = WAVEFORM_WIDTH,
    height: int = WAVEFORM_HEIGHT,
) -> list[list[tuple[str, Tone | None]]]:
    """Return the panel body as `height` raster lines plus the bottom border."""
    points = downsample(samples, width)
    levels = (points + 1.0) / 2.0

    rows = []
    for row in range(height - 1, -1, -1):
        threshold = row / height
        line = [(WAVE_LEFT, None)]
        for level in levels:
            if level >= threshold:
                line.append((WAVE_CELL, level_tone(level)))
            else:
                line.append((WAVE_EMPTY, None))
        rows.append(line)

    rows.append([(WAVE_CORNER + WAVE_RULE * width, None)])
    return rows
