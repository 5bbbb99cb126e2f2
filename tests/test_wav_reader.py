import gc
import io
import logging
import sys
import tempfile
import unittest
import warnings
from pathlib import Path

import numpy as np
import soundfile as sf

# Allow `import TMV.*` from repo root without installing.
_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))
sys.path.insert(0, str(Path(__file__).resolve().parent))

from TMV.ADM import (
    AudioIOError, AudioNotFoundError, InvalidInputError,
    UnsupportedFormatError, WavReader,
)
from TMV.ADM.wav_reader import locate_pcm
from wavfixtures import int16_pcm, wav_bytes, write_wav

_QUIET = logging.getLogger("tmv.test.reader")
_QUIET.addHandler(logging.NullHandler())
_QUIET.propagate = False


class _TempDirCase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)
        self.reader = WavReader(_QUIET)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _text_file(self, name: str = "not_audio.wav") -> Path:
        path = self.tmp / name
        path.write_text("This is not an audio file")
        return path


class TestProbe(_TempDirCase):
    def test_rejects_null_and_blank_paths(self) -> None:
        for path in (None, "", "   "):
            self.assertFalse(self.reader.probe(path))

    def test_rejects_missing_file(self) -> None:
        self.assertFalse(self.reader.probe("/path/to/nonexistent/file.wav"))

    def test_rejects_non_audio_file(self) -> None:
        self.assertFalse(self.reader.probe(str(self._text_file())))

    def test_rejects_empty_file(self) -> None:
        path = self.tmp / "empty.wav"
        path.touch()
        self.assertFalse(self.reader.probe(str(path)))

    def test_rejects_directory(self) -> None:
        self.assertFalse(self.reader.probe(str(self.tmp)))

    def test_rejects_24_bit(self) -> None:
        path = self.tmp / "deep.wav"
        sf.write(str(path), np.zeros(100), 8000, subtype="PCM_24")
        self.assertFalse(self.reader.probe(str(path)))

    def test_accepts_pcm16(self) -> None:
        path = write_wav(self.tmp / "ok.wav", int16_pcm([0, 1, -1, 100]))
        self.assertTrue(self.reader.probe(str(path)))
        self.assertTrue(self.reader.probe(path))

    def test_logs_the_reason(self) -> None:
        with self.assertLogs(_QUIET, level="WARNING") as logs:
            self.reader.probe("/path/to/nonexistent/file.wav")
        self.assertIn("does not exist", logs.output[0])

    def test_leaves_no_open_handles(self) -> None:
        cases = [None, "", "/path/to/nonexistent/file.wav", str(self._text_file())]
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", ResourceWarning)
            for path in cases:
                self.assertFalse(self.reader.probe(path))
            gc.collect()
        leaks = [w for w in caught if issubclass(w.category, ResourceWarning)]
        self.assertEqual(leaks, [])


class TestDecode(_TempDirCase):
    def test_null_and_empty_path_raise_invalid_input(self) -> None:
        for path in (None, ""):
            with self.assertRaises(InvalidInputError):
                self.reader.decode(path)
        with self.assertRaises(ValueError):
            self.reader.decode("")

    def test_missing_file_raises_io_failure(self) -> None:
        with self.assertRaises(AudioNotFoundError) as ctx:
            self.reader.decode("/path/to/nonexistent/file.wav")
        self.assertIsInstance(ctx.exception, AudioIOError)
        self.assertIsInstance(ctx.exception, OSError)

    def test_non_audio_raises_unsupported(self) -> None:
        with self.assertRaises(UnsupportedFormatError):
            self.reader.decode(str(self._text_file()))

    def test_float_wav_raises_unsupported(self) -> None:
        path = self.tmp / "float.wav"
        sf.write(str(path), np.zeros(50), 8000, subtype="FLOAT")
        with self.assertRaises(UnsupportedFormatError):
            self.reader.decode(str(path))

    def test_pcm16_little_endian(self) -> None:
        path = write_wav(self.tmp / "le.wav", int16_pcm([16384, -16384, 32767, -32768]))
        samples = self.reader.decode(str(path))
        self.assertEqual(samples.tolist(), [0.5, -0.5, 32767 / 32768.0, -1.0])

    def test_pcm16_rifx_big_endian(self) -> None:
        pcm = int16_pcm([16384, -16384, 32767, -32768], big_endian=True)
        path = write_wav(self.tmp / "be.wav", pcm, big_endian=True)
        samples = self.reader.decode(str(path))
        self.assertEqual(samples.tolist(), [0.5, -0.5, 32767 / 32768.0, -1.0])
        self.assertTrue(self.reader.read_format(str(path)).big_endian)

    def test_soundfile_written_rifx_matches_soundfile_read(self) -> None:
        path = self.tmp / "sf_be.wav"
        data = np.linspace(-0.9, 0.9, 256)
        sf.write(str(path), data, 11025, subtype="PCM_16", endian="BIG")
        expected = sf.read(str(path), dtype="int16")[0] / 32768.0
        np.testing.assert_array_equal(self.reader.decode(str(path)), expected)

    def test_pcm8_unsigned(self) -> None:
        path = write_wav(self.tmp / "u8.wav", bytes([0, 128, 255, 192]), bits=8)
        samples = self.reader.decode(str(path))
        self.assertEqual(samples.tolist(), [-1.0, 0.0, 127 / 128.0, 0.5])

    def test_stereo_is_interleaved(self) -> None:
        pcm = int16_pcm([8192, -8192, 16384, -16384])
        path = write_wav(self.tmp / "st.wav", pcm, channels=2)
        samples = self.reader.decode(str(path))
        self.assertEqual(samples.tolist(), [0.25, -0.25, 0.5, -0.5])

    def test_skips_unrelated_chunks(self) -> None:
        pcm = int16_pcm([16384, 0])
        path = write_wav(self.tmp / "junk.wav", pcm, extra_chunks=[(b"JUNK", b"\x00" * 4)])
        self.assertEqual(self.reader.decode(str(path)).tolist(), [0.5, 0.0])

    def test_empty_data_chunk_gives_empty_buffer(self) -> None:
        path = write_wav(self.tmp / "silent.wav", b"")
        samples = self.reader.decode(str(path))
        self.assertEqual(len(samples), 0)

    def test_all_samples_normalized(self) -> None:
        path = self.tmp / "noise.wav"
        rng = np.random.default_rng(7)
        sf.write(str(path), rng.uniform(-1, 1, 4000), 8000, subtype="PCM_16")
        samples = self.reader.decode(str(path))
        self.assertEqual(len(samples), 4000)
        self.assertTrue(np.all(samples >= -1.0))
        self.assertTrue(np.all(samples <= 1.0))


class TestDescribe(_TempDirCase):
    def test_missing_file_reports_error(self) -> None:
        info = self.reader.describe("/path/to/nonexistent/file.wav")
        self.assertIsNotNone(info)
        self.assertIn("Error", info)

    def test_invalid_file_reports_error(self) -> None:
        path = self.tmp / "invalid.wav"
        path.touch()
        self.assertIn("Error", self.reader.describe(str(path)))

    def test_null_path_reports_error(self) -> None:
        self.assertTrue(self.reader.describe(None).startswith("Error"))
        self.assertTrue(self.reader.describe("").startswith("Error"))

    def test_valid_file_summary(self) -> None:
        path = write_wav(self.tmp / "tone.wav", int16_pcm([0] * 8000), channels=2, rate=8000)
        info = self.reader.describe(str(path))
        self.assertIn("File: tone.wav", info)
        self.assertIn("Sample Rate: 8000.0 Hz", info)
        self.assertIn("Channels: 2", info)
        self.assertIn("Sample Size: 16 bits", info)
        self.assertIn("Frame Length: 4000", info)
        self.assertIn("Duration: 0.50 seconds", info)
        self.assertNotIn("Error", info)


class TestLocatePcm(unittest.TestCase):
    def test_odd_chunk_is_padded(self) -> None:
        raw = wav_bytes(int16_pcm([1, 2]), extra_chunks=[(b"note", b"abc")])
        loc = locate_pcm(io.BytesIO(raw))
        self.assertEqual(raw[loc.data_offset:loc.data_offset + loc.data_size], int16_pcm([1, 2]))
        self.assertFalse(loc.big_endian)
        self.assertEqual(loc.bits_per_sample, 16)

    def test_rifx_sizes_are_big_endian(self) -> None:
        raw = wav_bytes(bytes([1, 2, 3, 4]), bits=8, big_endian=True)
        loc = locate_pcm(io.BytesIO(raw))
        self.assertTrue(loc.big_endian)
        self.assertEqual(loc.bits_per_sample, 8)
        self.assertEqual(loc.data_size, 4)

    def test_oversized_data_chunk_is_reported_as_declared(self) -> None:
        raw = wav_bytes(int16_pcm([5, 6]), declared_data_size=1000)
        fh = io.BytesIO(raw)
        loc = locate_pcm(fh)
        fh.seek(loc.data_offset)
        self.assertEqual(loc.data_size, 1000)
        self.assertEqual(fh.read(loc.data_size), int16_pcm([5, 6]))

    def test_rejects_bad_header(self) -> None:
        for raw in (b"", b"RIFF\x00\x00\x00\x00AVI ", b"FORM\x00\x00\x00\x04WAVE"):
            with self.assertRaises(UnsupportedFormatError):
                locate_pcm(io.BytesIO(raw))

    def test_rejects_missing_data_chunk(self) -> None:
        raw = wav_bytes(b"")[:-8]   # drop the empty data chunk header
        with self.assertRaises(UnsupportedFormatError):
            locate_pcm(io.BytesIO(raw))


if __name__ == "__main__":
    unittest.main()
