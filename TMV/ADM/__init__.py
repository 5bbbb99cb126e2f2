# =============================================================================
# TMV/ADM/__init__.py — Audio Decode Module
# =============================================================================
#
# Turns a file-system path into a normalized float64 sample buffer, or fails
# with a typed AudioReadError.
#
#   probe(path)    -> bool          never raises
#   decode(path)   -> np.ndarray    raises AudioReadError subclasses
#   describe(path) -> str           never raises; failures start with "Error"
#
# libsndfile (via soundfile) is the gate that decides whether a file is a
# readable PCM WAV stream.  The raw frame bytes are then pulled out of the
# RIFF / RIFX container and normalized by pcm.py, so the byte-level decode
# is fully under our control.
#
# Sub-modules:
#   errors.py      — AudioReadError hierarchy
#   pcm.py         — AudioFormat + pure byte → sample conversion
#   wav_reader.py  — WavReader (probe / decode / read_format / describe)
# =============================================================================

from TMV.ADM.errors import (
    AudioReadError, InvalidInputError, AudioIOError,
    AudioNotFoundError, UnsupportedFormatError,
)
from TMV.ADM.pcm import AudioFormat, pcm_to_samples
from TMV.ADM.wav_reader import WavReader

__all__ = [
    "AudioReadError", "InvalidInputError", "AudioIOError",
    "AudioNotFoundError", "UnsupportedFormatError",
    "AudioFormat", "pcm_to_samples", "WavReader",
]
