"""Tests for domain models."""

import pytest

from gaussvad.domain.models import DecisionResult, DetectionConfig, SpeechSegment


class TestDetectionConfig:
    """Tests for DetectionConfig class."""

    def test_defaults(self) -> None:
        """Test default detection parameters."""
        config = DetectionConfig()
        assert config.frame_length == 1024
        assert config.hop_length == 512
        assert config.sample_rate == 16000
        assert config.noise_frame_count == 10
        assert config.alpha == 0.98
        assert config.threshold == 0.5

    def test_bin_count(self) -> None:
        """Test only the non-redundant half spectrum is kept."""
        assert DetectionConfig().bin_count == 513
        assert DetectionConfig(frame_length=256).bin_count == 129

    def test_frozen(self) -> None:
        """Test configs are immutable."""
        config = DetectionConfig()
        with pytest.raises(AttributeError):
            config.frame_length = 512  # type: ignore[misc]


class TestDecisionResult:
    """Tests for DecisionResult class."""

    @pytest.fixture
    def result(self) -> DecisionResult:
        """Five frames with two speech runs."""
        return DecisionResult(
            speech_frames=[False, True, True, False, True],
            log_likelihood=[-1.0, 2.0, 3.0, -2.0, 1.5],
            frame_length=1024,
            hop_length=512,
            sample_rate=16000,
        )

    def test_counts(self, result: DecisionResult) -> None:
        """Test frame and speech counts."""
        assert result.frame_count == 5
        assert result.speech_frame_count == 3
        assert result.speech_ratio == pytest.approx(0.6)
        assert result.speech_percentage == pytest.approx(60.0)

    def test_frame_times(self, result: DecisionResult) -> None:
        """Test frame start times in seconds."""
        assert result.frame_times() == pytest.approx([0.0, 0.032, 0.064, 0.096, 0.128])

    def test_speech_segments(self, result: DecisionResult) -> None:
        """Test consecutive speech frames merge into segments."""
        segments = result.speech_segments()

        assert len(segments) == 2
        assert segments[0].start_time == pytest.approx(512 / 16000)
        assert segments[0].end_time == pytest.approx((2 * 512 + 1024) / 16000)
        assert segments[1].start_time == pytest.approx(2048 / 16000)
        assert segments[1].end_time == pytest.approx((4 * 512 + 1024) / 16000)

    def test_no_speech_segments(self) -> None:
        """Test all non-speech frames give no segments."""
        result = DecisionResult(speech_frames=[False, False], log_likelihood=[-1, -1])
        assert result.speech_segments() == []
        assert result.speech_ratio == 0.0

    def test_to_dict(self, result: DecisionResult) -> None:
        """Test serialization to the external output shape."""
        data = result.to_dict()
        assert data == {
            "speechFrames": [False, True, True, False, True],
            "logLikelihood": [-1.0, 2.0, 3.0, -2.0, 1.5],
        }

    def test_length_mismatch_raises(self) -> None:
        """Test parallel sequences must have equal length."""
        with pytest.raises(ValueError):
            DecisionResult(speech_frames=[True], log_likelihood=[1.0, 2.0])


class TestSpeechSegment:
    """Tests for SpeechSegment class."""

    def test_duration(self) -> None:
        """Test segment duration."""
        assert SpeechSegment(start_time=0.5, end_time=1.25).duration == pytest.approx(0.75)
