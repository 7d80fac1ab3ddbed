import pytest

from notebuilder.errors import DecodeError, DetectionError, InvalidInputError
from notebuilder.models.note_event import ClassifierConfig, Direction
from notebuilder.services.pipeline import build_chart, detect_onsets, run_pipeline

from conftest import FakeDecoder, FakeDetector, onsets


def test_detect_onsets_uses_decoder_and_detector(tmp_path):
    decoder = FakeDecoder()
    events = onsets((0.1, 3.0), (0.2, 4.0))
    assert detect_onsets(tmp_path / "song.wav", decoder, FakeDetector(events)) == events
    assert decoder.opened == [tmp_path / "song.wav"]


def test_build_chart_applies_config(tmp_path):
    detector = FakeDetector(onsets((0.0, 9.0), (0.05, 75.0)))
    notes = build_chart(tmp_path / "a.wav", FakeDecoder(), detector, ClassifierConfig(amplitude_upper_bound=80))
    assert [n.direction for n in notes] == [Direction.L, Direction.L]


def test_run_pipeline_writes_chart(tmp_path):
    out = tmp_path / "out.txt"
    detector = FakeDetector(onsets((0.0, 9.0), (0.05, 75.0)))
    notes = run_pipeline(tmp_path / "a.wav", out, FakeDecoder(), detector)
    assert len(notes) == 2
    assert out.read_text() == "0 L\n50 U\n"


def test_run_pipeline_writes_nothing_without_onsets(tmp_path):
    out = tmp_path / "out.txt"
    with pytest.raises(InvalidInputError):
        run_pipeline(tmp_path / "a.wav", out, FakeDecoder(), FakeDetector([]))
    assert not out.exists()


def test_decode_and_detection_errors_propagate(tmp_path):
    with pytest.raises(DecodeError):
        build_chart(tmp_path / "a.wav", FakeDecoder(error=DecodeError("bad")), FakeDetector())
    with pytest.raises(DetectionError):
        build_chart(tmp_path / "a.wav", FakeDecoder(), FakeDetector(error=DetectionError("bad")))
