# =============================================================================
# wav_reader.py — PCM WAV reader
# =============================================================================
#
# Two layers:
#
#   1. Gate    — soundfile.info() (libsndfile) must recognise the file as a
#                WAV / WAVEX container with PCM_U8 or PCM_16 samples.
#                Anything libsndfile rejects is UnsupportedFormatError.
#   2. Extract — the RIFF / RIFX chunk list is walked with struct to find
#                the declared byte order, the bit depth (fmt ) and the raw
#                frame bytes (data).  pcm.py normalizes those bytes.
#
# Chunk layout (all sizes in the container's byte order):
#
#   "RIFF"|"RIFX"  u32 size  "WAVE"
#     "fmt "  u32 n  u16 tag  u16 channels  u32 rate  u32 byte_rate
#                    u16 block_align  u16 bits_per_sample  [...]
#     "data"  u32 n  <n bytes of interleaved PCM>
#
# Chunks are word-aligned: an odd-sized body is followed by one pad byte.
# A data chunk that claims more bytes than the file holds is read up to EOF.
#
# Every file handle is opened in a `with` block so it is released on every
# exit path: success, format error, or I/O error.
# =============================================================================

from __future__ import annotations
import logging
import os
import struct
from pathlib import Path
from typing import BinaryIO, NamedTuple

import numpy as np
import soundfile as sf

from TMV.CFG.constants import SUPPORTED_SUBTYPES, SUPPORTED_CONTAINERS
from TMV.ADM.errors import (
    AudioReadError, InvalidInputError, AudioIOError,
    AudioNotFoundError, UnsupportedFormatError,
)
from TMV.ADM.pcm import AudioFormat, pcm_to_samples

_RIFF_HEADER = 12
_CHUNK_HEADER = 8
_FMT_MIN_SIZE = 16


class PcmLocation(NamedTuple):
    big_endian:      bool
    bits_per_sample: int
    data_offset:     int   # file offset of the first PCM byte
    data_size:       int   # declared data chunk size (may exceed the file)


def locate_pcm(fh: BinaryIO) -> PcmLocation:
    """
    Walk a RIFF / RIFX WAVE chunk list and return where the PCM bytes live.

    Raises UnsupportedFormatError if the header or chunk list is malformed.
    """
    header = fh.read(_RIFF_HEADER)
    if len(header) < _RIFF_HEADER or header[8:12] != b"WAVE":
        raise UnsupportedFormatError("missing RIFF/WAVE header")

    magic = header[:4]
    if magic == b"RIFF":
        order = "<"
    elif magic == b"RIFX":
        order = ">"
    else:
        raise UnsupportedFormatError(f"unknown container magic {magic!r}")

    bits = None
    while True:
        head = fh.read(_CHUNK_HEADER)
        if len(head) < _CHUNK_HEADER:
            break
        chunk_id, size = struct.unpack(f"{order}4sI", head)
        body_start = fh.tell()

        if chunk_id == b"fmt ":
            body = fh.read(min(size, _FMT_MIN_SIZE))
            if len(body) < _FMT_MIN_SIZE:
                raise UnsupportedFormatError("truncated fmt chunk")
            bits = struct.unpack(f"{order}HHIIHH", body)[5]
        elif chunk_id == b"data":
            if bits is None:
                raise UnsupportedFormatError("data chunk precedes fmt chunk")
            return PcmLocation(order == ">", bits, body_start, size)

        fh.seek(body_start + size + (size & 1))

    raise UnsupportedFormatError("no data chunk found")


class WavReader:
    """
    Reads PCM WAV files into normalized sample buffers.

    Parameters
    ----------
    log : logging.Logger, optional
        Where diagnostics go.  Defaults to the "tmv.reader" logger.
    """

    def __init__(self, log: logging.Logger | None = None) -> None:
        self.log = log or logging.getLogger("tmv.reader")

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def probe(self, path) -> bool:
        """True if `path` is an existing PCM WAV file we can decode.  Never raises."""
        try:
            self.read_format(path)
        except InvalidInputError:
            self.log.warning("Audio file path is null or empty")
            return False
        except AudioNotFoundError:
            self.log.warning("Audio file does not exist: %s", path)
            return False
        except UnsupportedFormatError as exc:
            self.log.error("Unsupported audio file format: %s (%s)", path, exc)
            return False
        except AudioIOError as exc:
            self.log.error("IO error reading file: %s (%s)", path, exc)
            return False
        return True

    def read_format(self, path) -> AudioFormat:
        """Return the AudioFormat of `path` without reading the PCM payload."""
        wav_path = self._require_path(path)
        with self._open(wav_path) as fh:
            fmt, _ = self._inspect(fh, wav_path)
        return fmt

    def decode(self, path) -> np.ndarray:
        """
        Decode every sample of `path`, in file order, into [-1.0, 1.0].

        Multi-channel files come back interleaved (L, R, L, R, ...).

        Raises
        ------
        InvalidInputError       path is None or blank
        AudioNotFoundError      path does not exist
        AudioIOError            file cannot be opened or read
        UnsupportedFormatError  not a PCM WAV, or bit depth outside {8, 16}
        """
        wav_path = self._require_path(path)
        with self._open(wav_path) as fh:
            fmt, loc = self._inspect(fh, wav_path)
            self.log.info("Audio format: %s", fmt.summary())
            try:
                fh.seek(loc.data_offset)
                raw = fh.read(loc.data_size)
            except OSError as exc:
                raise AudioIOError(f"failed reading {wav_path}: {exc}") from exc

        if len(raw) < loc.data_size:
            self.log.debug(
                "data chunk declares %d bytes, file holds %d", loc.data_size, len(raw),
            )
        self.log.info("Read %d bytes of audio data", len(raw))

        samples = pcm_to_samples(raw, fmt.bits_per_sample, fmt.big_endian)
        self.log.info("Converted %d audio samples", len(samples))
        return samples

    def describe(self, path) -> str:
        """Human-readable format summary, or a string starting with "Error"."""
        try:
            fmt = self.read_format(path)
        except AudioReadError as exc:
            return f"Error reading file information: {exc}"

        return "\n".join([
            f"File: {Path(os.fspath(path)).name}",
            f"Format: {fmt.encoding}",
            f"Sample Rate: {fmt.sample_rate:.1f} Hz",
            f"Channels: {fmt.channels}",
            f"Sample Size: {fmt.bits_per_sample} bits",
            f"Byte Order: {'big-endian' if fmt.big_endian else 'little-endian'}",
            f"Frame Length: {fmt.frame_count}",
            f"Duration: {fmt.duration:.2f} seconds",
        ])

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _require_path(path) -> Path:
        if path is None:
            raise InvalidInputError("Audio file path cannot be null or empty")
        try:
            text = os.fspath(path)
        except TypeError as exc:
            raise InvalidInputError(
                f"Audio file path must be str or PathLike, got {type(path).__name__}"
            ) from exc
        if isinstance(text, bytes):
            text = os.fsdecode(text)
        if not text.strip():
            raise InvalidInputError("Audio file path cannot be null or empty")
        return Path(text)

    @staticmethod
    def _open(wav_path: Path) -> BinaryIO:
        if not wav_path.exists():
            raise AudioNotFoundError(f"Audio file does not exist: {wav_path}")
        try:
            return open(wav_path, "rb")
        except OSError as exc:
            raise AudioIOError(f"cannot open {wav_path}: {exc}") from exc

    def _inspect(self, fh: BinaryIO, wav_path: Path) -> tuple[AudioFormat, PcmLocation]:
        try:
            info = sf.info(str(wav_path))
        except RuntimeError as exc:   # soundfile.LibsndfileError
            raise UnsupportedFormatError(f"not a readable audio file: {exc}") from exc

        if info.format not in SUPPORTED_CONTAINERS:
            raise UnsupportedFormatError(f"not a WAV container: {info.format_info}")
        if info.subtype not in SUPPORTED_SUBTYPES:
            raise UnsupportedFormatError(
                f"unsupported sample format: {info.subtype_info} "
                f"(supported: 8-bit unsigned or 16-bit signed PCM)"
            )

        try:
            loc = locate_pcm(fh)
        except (OSError, struct.error) as exc:
            raise AudioIOError(f"failed reading {wav_path}: {exc}") from exc

        if loc.bits_per_sample != SUPPORTED_SUBTYPES[info.subtype]:
            raise UnsupportedFormatError(
                f"fmt chunk declares {loc.bits_per_sample} bits, "
                f"libsndfile reports {info.subtype}"
            )

        self.log.debug(
            "%s: data chunk at offset %d, %d bytes", wav_path.name, loc.data_offset, loc.data_size,
        )

        fmt = AudioFormat(
            sample_rate=float(info.samplerate),
            channels=info.channels,
            bits_per_sample=loc.bits_per_sample,
            big_endian=loc.big_endian,
            frame_count=info.frames,
            encoding=info.subtype_info,
        )
        return fmt, loc
