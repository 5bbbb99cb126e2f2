# =============================================================================
# errors.py — ADM error hierarchy
# =============================================================================
#
#   AudioReadError
#    ├── InvalidInputError       None / blank path        (also ValueError)
#    ├── AudioIOError            cannot open or read       (also OSError)
#    │    └── AudioNotFoundError path does not exist
#    └── UnsupportedFormatError  not PCM WAV, or bits ∉ {8, 16}
# =============================================================================


class AudioReadError(Exception):
    """Base class for every failure raised by the decoder."""


class InvalidInputError(AudioReadError, ValueError):
    pass


class AudioIOError(AudioReadError, OSError):
    pass


class AudioNotFoundError(AudioIOError):
    pass


class UnsupportedFormatError(AudioReadError):
    pass
