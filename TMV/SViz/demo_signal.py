# =============================================================================
# demo_signal.py — Deterministic demo buffer
# =============================================================================
#
#   x(t) = [0.3 sin(2π·100t) + 0.2 sin(2π·300t) + 0.1 sin(2π·800t)]
#          · e^(-0.5t) · (1 + 0.5 sin(2π·5t))
#
#   t = i / sample_rate,  i = 0 .. int(sample_rate * duration) - 1
#
# Defaults (1000 Hz, 2 s) give 2000 samples with x(0) = 0.
# At 1 kHz the 800 Hz partial is above Nyquist and folds to 200 Hz.
# =============================================================================

from __future__ import annotations

import numpy as np

from TMV.CFG.constants import (
    DEMO_SAMPLE_RATE, DEMO_DURATION, DEMO_PARTIALS,
    DEMO_DECAY, DEMO_TREMOLO_HZ, DEMO_TREMOLO_DEPTH,
)


def generate_sample_audio(
    sample_rate: int = DEMO_SAMPLE_RATE,
    duration: float = DEMO_DURATION,
) -> np.ndarray:
    n_samples = int(sample_rate * duration)
    t = np.arange(n_samples, dtype=np.float64) / sample_rate

    mix = np.zeros(n_samples, dtype=np.float64)
    for weight, freq in DEMO_PARTIALS:
        mix += weight * np.sin(2 * np.pi * freq * t)

    envelope = np.exp(-DEMO_DECAY * t) * (
        1 + DEMO_TREMOLO_DEPTH * np.sin(2 * np.pi * DEMO_TREMOLO_HZ * t)
    )
    return mix * envelope
