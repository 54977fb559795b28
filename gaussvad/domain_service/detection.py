"""Detection service for uploaded recordings.

Manages the detection flow:
1. Decode uploaded audio to mono PCM
2. Run one or both transform variants of the detector
3. Summarize speech coverage and timing
"""

import logging
import time
from collections.abc import Mapping
from dataclasses import dataclass

import numpy as np

from gaussvad.audio import ensure_mono
from gaussvad.domain.models import DecisionResult
from gaussvad.domain.protocols import AudioConverterProtocol, VADProtocol
from gaussvad.engine.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass
class DetectorRun:
    """One detector invocation with its wall-clock cost."""

    transform: str
    result: DecisionResult
    elapsed_seconds: float


@dataclass
class ComparisonResult:
    """Reference and fast detector runs over the same audio."""

    reference: DetectorRun
    fast: DetectorRun

    @property
    def speedup(self) -> float:
        """How many times faster the fast transform ran."""
        if self.fast.elapsed_seconds <= 0:
            return 0.0
        return self.reference.elapsed_seconds / self.fast.elapsed_seconds

    @property
    def agreement(self) -> float:
        """Fraction of frames where both detectors made the same decision."""
        pairs = list(
            zip(self.reference.result.speech_frames, self.fast.result.speech_frames)
        )
        if not pairs:
            return 0.0
        return sum(a == b for a, b in pairs) / len(pairs)


class DetectionService:
    """Service running speech detection over decoded recordings."""

    def __init__(
        self,
        detectors: Mapping[str, VADProtocol],
        audio_converter: AudioConverterProtocol,
    ) -> None:
        """Initialize detection service.

        Args:
            detectors: Detectors keyed by transform kind. Comparison needs
                both "reference" and "fast".
            audio_converter: Decoder for uploaded audio bytes.
        """
        self.detectors = detectors
        self.audio_converter = audio_converter

    def _select(self, transform: str) -> VADProtocol:
        try:
            return self.detectors[transform]
        except KeyError:
            raise ConfigurationError(
                f"Unknown transform {transform!r}, expected one of "
                f"{sorted(self.detectors)}"
            ) from None

    def _run(
        self,
        transform: str,
        audio: np.ndarray,
        threshold: float | None = None,
    ) -> DetectorRun:
        started = time.perf_counter()
        result = self._select(transform).detect(audio, threshold)
        elapsed = time.perf_counter() - started
        return DetectorRun(transform=transform, result=result, elapsed_seconds=elapsed)

    def detect(
        self,
        audio: np.ndarray,
        threshold: float | None = None,
        transform: str = "fast",
    ) -> DetectorRun:
        """Run one detector over PCM samples.

        Args:
            audio: Audio samples, mono or multi-channel.
            threshold: Likelihood threshold. Defaults to the detector's.
            transform: "fast" or "reference".

        Returns:
            DetectorRun with the decision result and elapsed time.

        Raises:
            ConfigurationError: If no detector is registered for transform.
        """
        run = self._run(transform, ensure_mono(audio), threshold)
        logger.info(
            f"Detected speech in {run.result.speech_percentage:.1f}% of "
            f"{run.result.frame_count} frames ({transform}, "
            f"{run.elapsed_seconds:.3f}s)"
        )
        return run

    def detect_bytes(
        self,
        data: bytes,
        threshold: float | None = None,
        transform: str = "fast",
    ) -> DetectorRun:
        """Decode audio bytes and run one detector.

        Raises:
            DecodeError: If the audio cannot be decoded.
            InsufficientDataError: If the audio is shorter than one frame.
        """
        audio, _ = self.audio_converter.decode(data)
        return self.detect(audio, threshold, transform)

    def compare(self, audio: np.ndarray) -> ComparisonResult:
        """Run both detectors over the same samples.

        Args:
            audio: Audio samples, mono or multi-channel.

        Returns:
            ComparisonResult with both runs.
        """
        samples = ensure_mono(audio)
        comparison = ComparisonResult(
            reference=self._run("reference", samples),
            fast=self._run("fast", samples),
        )
        logger.info(
            f"Reference {comparison.reference.elapsed_seconds:.3f}s, fast "
            f"{comparison.fast.elapsed_seconds:.3f}s, speedup "
            f"{comparison.speedup:.2f}x, agreement {comparison.agreement:.1%}"
        )
        return comparison

    def compare_bytes(self, data: bytes) -> ComparisonResult:
        """Decode audio bytes and run both detectors.

        Raises:
            DecodeError: If the audio cannot be decoded.
            InsufficientDataError: If the audio is shorter than one frame.
        """
        audio, _ = self.audio_converter.decode(data)
        return self.compare(audio)
