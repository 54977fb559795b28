"""Tests for the detection service."""

import numpy as np
import pytest

from gaussvad.domain.models import DetectionConfig
from gaussvad.domain_service import DetectionService
from gaussvad.engine.exceptions import (
    ConfigurationError,
    DecodeError,
    InsufficientDataError,
)
from gaussvad.engine.vad import GaussianVAD

CONFIG = DetectionConfig(frame_length=256, hop_length=128)


class FakeAudioConverter:
    """Converter returning fixed samples."""

    def __init__(self, audio: np.ndarray) -> None:
        self.audio = audio
        self.calls: list[bytes] = []

    def decode(self, data: bytes) -> tuple[np.ndarray, int]:
        self.calls.append(data)
        if data == b"bad":
            raise DecodeError("bad audio")
        return self.audio, 16000

    def load_file(self, file_path: str) -> tuple[np.ndarray, int]:
        return self.audio, 16000


@pytest.fixture
def converter(noise_then_tone_audio: np.ndarray) -> FakeAudioConverter:
    """Create fake converter."""
    return FakeAudioConverter(noise_then_tone_audio)


@pytest.fixture
def service(converter: FakeAudioConverter) -> DetectionService:
    """Create service with small-frame detectors."""
    return DetectionService(
        detectors={
            "reference": GaussianVAD(CONFIG, transform="reference"),
            "fast": GaussianVAD(CONFIG, transform="fast"),
        },
        audio_converter=converter,
    )


class TestDetectionService:
    """Tests for DetectionService class."""

    def test_detect(
        self, service: DetectionService, noise_then_tone_audio: np.ndarray
    ) -> None:
        """Test a single fast run."""
        run = service.detect(noise_then_tone_audio)

        assert run.transform == "fast"
        assert run.result.frame_count == (20480 - 256) // 128 + 1
        assert run.elapsed_seconds >= 0

    def test_detect_reference(
        self, service: DetectionService, noise_then_tone_audio: np.ndarray
    ) -> None:
        """Test selecting the reference transform."""
        run = service.detect(noise_then_tone_audio, transform="reference")
        assert run.transform == "reference"

    def test_detect_unknown_transform_raises(
        self, service: DetectionService, noise_then_tone_audio: np.ndarray
    ) -> None:
        """Test a misspelled transform is rejected instead of running fast."""
        with pytest.raises(ConfigurationError, match="refrence"):
            service.detect(noise_then_tone_audio, transform="refrence")

    def test_detect_bytes_unknown_transform_raises(
        self, service: DetectionService
    ) -> None:
        """Test the bytes entry point rejects unknown transforms too."""
        with pytest.raises(ConfigurationError):
            service.detect_bytes(b"audio", transform="slow")

    def test_compare_requires_both_detectors(
        self, converter: FakeAudioConverter, noise_then_tone_audio: np.ndarray
    ) -> None:
        """Test comparison fails when the reference detector is missing."""
        service = DetectionService(
            detectors={"fast": GaussianVAD(CONFIG, transform="fast")},
            audio_converter=converter,
        )
        with pytest.raises(ConfigurationError):
            service.compare(noise_then_tone_audio)

    def test_detect_downmixes_stereo(
        self, service: DetectionService, noise_then_tone_audio: np.ndarray
    ) -> None:
        """Test multi-channel input is collapsed to mono."""
        stereo = np.stack([noise_then_tone_audio, noise_then_tone_audio])

        stereo_run = service.detect(stereo)
        mono_run = service.detect(noise_then_tone_audio)

        assert stereo_run.result.speech_frames == mono_run.result.speech_frames

    def test_detect_bytes(
        self, service: DetectionService, converter: FakeAudioConverter
    ) -> None:
        """Test bytes are decoded before detection."""
        run = service.detect_bytes(b"audio", threshold=2.0)

        assert converter.calls == [b"audio"]
        assert run.result.frame_count > 0

    def test_detect_bytes_decode_error(self, service: DetectionService) -> None:
        """Test decode errors propagate."""
        with pytest.raises(DecodeError):
            service.detect_bytes(b"bad")

    def test_detect_too_short(self, service: DetectionService) -> None:
        """Test audio shorter than a frame propagates InsufficientDataError."""
        with pytest.raises(InsufficientDataError):
            service.detect(np.zeros(100, dtype=np.float32))

    def test_compare(
        self, service: DetectionService, noise_then_tone_audio: np.ndarray
    ) -> None:
        """Test both variants run and agree."""
        comparison = service.compare(noise_then_tone_audio)

        assert comparison.reference.transform == "reference"
        assert comparison.fast.transform == "fast"
        assert comparison.agreement == 1.0
        assert comparison.speedup >= 0

    def test_compare_bytes(self, service: DetectionService) -> None:
        """Test comparison from encoded bytes."""
        comparison = service.compare_bytes(b"audio")
        assert comparison.fast.result.frame_count == comparison.reference.result.frame_count
