"""Detection result models."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SpeechSegment:
    """A contiguous run of speech frames."""

    start_time: float  # seconds
    end_time: float  # seconds

    @property
    def duration(self) -> float:
        """Segment duration in seconds."""
        return self.end_time - self.start_time


@dataclass(frozen=True)
class DecisionResult:
    """Per-frame speech decisions and average log-likelihoods.

    Both sequences are parallel and in chronological frame order.
    """

    speech_frames: list[bool]
    log_likelihood: list[float]
    frame_length: int = 1024
    hop_length: int = 512
    sample_rate: int = 16000

    def __post_init__(self) -> None:
        if len(self.speech_frames) != len(self.log_likelihood):
            raise ValueError(
                f"speech_frames ({len(self.speech_frames)}) and log_likelihood "
                f"({len(self.log_likelihood)}) must have the same length"
            )

    @property
    def frame_count(self) -> int:
        """Number of analysed frames."""
        return len(self.speech_frames)

    @property
    def speech_frame_count(self) -> int:
        """Number of frames classified as speech."""
        return sum(self.speech_frames)

    @property
    def speech_ratio(self) -> float:
        """Fraction of frames classified as speech."""
        if not self.speech_frames:
            return 0.0
        return self.speech_frame_count / self.frame_count

    @property
    def speech_percentage(self) -> float:
        """Percentage of frames classified as speech."""
        return self.speech_ratio * 100

    def frame_times(self) -> list[float]:
        """Start time of every frame in seconds."""
        return [i * self.hop_length / self.sample_rate for i in range(self.frame_count)]

    def speech_segments(self) -> list[SpeechSegment]:
        """Merge runs of consecutive speech frames into segments.

        A segment ends where its last frame ends, so overlapping frames
        extend it by the full frame length.
        """
        segments: list[SpeechSegment] = []
        run_start: int | None = None

        for i, is_speech in enumerate([*self.speech_frames, False]):
            if is_speech and run_start is None:
                run_start = i
            elif not is_speech and run_start is not None:
                last = i - 1
                segments.append(
                    SpeechSegment(
                        start_time=run_start * self.hop_length / self.sample_rate,
                        end_time=(last * self.hop_length + self.frame_length)
                        / self.sample_rate,
                    )
                )
                run_start = None

        return segments

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the external output shape."""
        return {
            "speechFrames": list(self.speech_frames),
            "logLikelihood": list(self.log_likelihood),
        }
