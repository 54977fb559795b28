"""Request and response schemas."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from gaussvad.domain.models import SpeechSegment
from gaussvad.domain_service import ComparisonResult, DetectorRun


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SegmentSchema(_CamelModel):
    """A detected speech segment."""

    start: float = Field(..., description="Segment start (seconds)")
    end: float = Field(..., description="Segment end (seconds)")

    @classmethod
    def from_segment(cls, segment: SpeechSegment) -> "SegmentSchema":
        return cls(start=segment.start_time, end=segment.end_time)


class DetectionResponse(_CamelModel):
    """Per-frame speech detection result."""

    transform: str = Field(..., description="Transform variant used")
    frame_count: int = Field(..., description="Number of analysis frames")
    speech_frames: list[bool] = Field(..., description="Speech flag per frame")
    log_likelihood: list[float] = Field(
        ..., description="Average log likelihood ratio per frame"
    )
    frame_times: list[float] = Field(..., description="Frame start times (seconds)")
    speech_percentage: float = Field(..., description="Share of speech frames (%)")
    segments: list[SegmentSchema] = Field(..., description="Merged speech runs")
    elapsed_seconds: float = Field(..., description="Detection wall-clock time")

    @classmethod
    def from_run(cls, run: DetectorRun) -> "DetectionResponse":
        result = run.result
        return cls(
            transform=run.transform,
            frame_count=result.frame_count,
            speech_frames=result.speech_frames,
            log_likelihood=result.log_likelihood,
            frame_times=result.frame_times(),
            speech_percentage=result.speech_percentage,
            segments=[SegmentSchema.from_segment(s) for s in result.speech_segments()],
            elapsed_seconds=run.elapsed_seconds,
        )


class DetectorSummary(_CamelModel):
    """Summary of one detector run in a comparison."""

    transform: str
    speech_percentage: float
    elapsed_seconds: float
    speech_frames: list[bool]

    @classmethod
    def from_run(cls, run: DetectorRun) -> "DetectorSummary":
        return cls(
            transform=run.transform,
            speech_percentage=run.result.speech_percentage,
            elapsed_seconds=run.elapsed_seconds,
            speech_frames=run.result.speech_frames,
        )


class ComparisonResponse(_CamelModel):
    """Reference vs fast detector comparison."""

    reference: DetectorSummary
    fast: DetectorSummary
    speedup: float = Field(..., description="Reference time / fast time")
    agreement: float = Field(..., description="Fraction of matching decisions")

    @classmethod
    def from_comparison(cls, comparison: ComparisonResult) -> "ComparisonResponse":
        return cls(
            reference=DetectorSummary.from_run(comparison.reference),
            fast=DetectorSummary.from_run(comparison.fast),
            speedup=comparison.speedup,
            agreement=comparison.agreement,
        )
