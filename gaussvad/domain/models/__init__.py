"""Domain models."""

from gaussvad.domain.models.config import DetectionConfig
from gaussvad.domain.models.decision import DecisionResult, SpeechSegment

__all__ = ["DecisionResult", "DetectionConfig", "SpeechSegment"]
