import io
import wave
from pathlib import Path

import pytest

from zxtestkit.fixtures import (
    border_filename,
    fingerprint,
    normalize_sample,
    save_actual_data,
    screen_filename,
    sound_filename,
    text_filename,
    wav_bytes,
)


def test_fingerprint_of_empty_data():
    assert fingerprint(b"") == "47DEQpj8HBSa+/TImW+5JCeuQeRkm5NMpJWZG3hSuFU="


def test_fingerprint_shape_and_sensitivity():
    a = fingerprint(b"frame")
    b = fingerprint(b"frame!")
    assert len(a) == 44 and a.endswith("=")
    assert a != b
    assert fingerprint(b"frame") == a


def test_filenames():
    assert screen_filename("result") == Path("result.screen.png")
    assert border_filename("empty") == Path("empty.border.png")
    assert sound_filename("beeper_plus_ay") == Path("beeper_plus_ay.wav")
    assert text_filename("log") == Path("log.txt")


def test_filename_replaces_existing_extension():
    assert text_filename("log.old") == Path("log.txt")


@pytest.mark.parametrize(
    "sample, expected",
    [(0.0, 0), (1.0, 32767), (-1.0, -32767), (2.0, 32767), (-2.0, -32768), (float("nan"), 0)],
)
def test_normalize_sample(sample, expected):
    assert normalize_sample(sample) == expected


def test_wav_round_trip():
    samples = [0, 1, -1, 32767, -32768, 100]
    data = wav_bytes(samples, 44100, 2)
    assert data[:4] == b"RIFF"
    assert data[8:12] == b"WAVE"
    with wave.open(io.BytesIO(data), "rb") as reader:
        assert reader.getnchannels() == 2
        assert reader.getsampwidth() == 2
        assert reader.getframerate() == 44100
        assert reader.getnframes() == 3
        frames = reader.readframes(3)
    decoded = [int.from_bytes(frames[i : i + 2], "little", signed=True) for i in range(0, 12, 2)]
    assert decoded == samples


def test_wav_out_of_range_sample():
    with pytest.raises(OverflowError):
        wav_bytes([40000])


def test_save_actual_data(tmp_path):
    folder = tmp_path / "actual" / "some_test"
    path = save_actual_data(folder, "result.screen.png", b"\x01\x02")
    assert path == folder / "result.screen.png"
    assert path.read_bytes() == b"\x01\x02"