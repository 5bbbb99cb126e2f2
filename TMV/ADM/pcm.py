# =============================================================================
# pcm.py — PCM byte → normalized sample conversion
# =============================================================================
#
# Exact rules (must not drift, the renderers depend on the scale):
#
#   16-bit : two bytes per sample in the declared byte order
#              big-endian    → high byte first
#              little-endian → low byte first
#            read as two's-complement, then / 32768.0
#              [0x7F, 0xFF] BE →  32767 / 32768
#              [0x80, 0x00] BE → -1.0
#
#    8-bit : unsigned byte, (b - 128) / 128.0
#              0   → -1.0
#              255 →  127 / 128
#
#   Sample count = len(raw) // bytes_per_sample.  A trailing partial sample
#   is dropped (truncation, never rounding or padding).
#
#   Any other bit depth is rejected with UnsupportedFormatError.
# =============================================================================

from __future__ import annotations
from typing import NamedTuple

import numpy as np

from TMV.CFG.constants import (
    SUPPORTED_BITS, PCM16_SCALE, PCM8_OFFSET, PCM8_SCALE,
)
from TMV.ADM.errors import UnsupportedFormatError


class AudioFormat(NamedTuple):
    sample_rate:     float   # Hz (= frame rate for PCM)
    channels:        int
    bits_per_sample: int     # 8 or 16
    big_endian:      bool
    frame_count:     int
    encoding:        str     # human-readable, e.g. "Signed 16 bit PCM"

    @property
    def bytes_per_sample(self) -> int:
        return self.bits_per_sample // 8

    @property
    def frame_size(self) -> int:
        return self.bytes_per_sample * self.channels

    @property
    def duration(self) -> float:
        """Seconds of audio = frame_count / frame rate."""
        return self.frame_count / self.sample_rate

    def summary(self) -> str:
        layout = {1: "mono", 2: "stereo"}.get(self.channels, f"{self.channels} channels")
        order = "big-endian" if self.big_endian else "little-endian"
        return (
            f"{self.encoding} {self.sample_rate:.1f} Hz, {self.bits_per_sample} bit, "
            f"{layout}, {self.frame_size} bytes/frame, {order}"
        )


def pcm_to_samples(raw: bytes, bits_per_sample: int, big_endian: bool) -> np.ndarray:
    """
    Convert raw interleaved PCM bytes into float64 samples in [-1.0, 1.0].

    Args:
        raw:             PCM payload (the WAV ``data`` chunk body)
        bits_per_sample: 8 or 16
        big_endian:      byte order of 16-bit samples (ignored for 8-bit)

    Returns:
        1-D float64 array of len(raw) // (bits_per_sample // 8) samples.
    """
    if bits_per_sample not in SUPPORTED_BITS:
        raise UnsupportedFormatError(
            f"unsupported sample size: {bits_per_sample} bits "
            f"(supported: {', '.join(str(b) for b in SUPPORTED_BITS)})"
        )

    bytes_per_sample = bits_per_sample // 8
    n_samples = len(raw) // bytes_per_sample
    payload = memoryview(bytes(raw))[: n_samples * bytes_per_sample]

    if bits_per_sample == 16:
        ints = np.frombuffer(payload, dtype=">i2" if big_endian else "<i2")
        return ints.astype(np.float64) / PCM16_SCALE

    ints = np.frombuffer(payload, dtype=np.uint8)
    return (ints.astype(np.float64) - PCM8_OFFSET) / PCM8_SCALE
