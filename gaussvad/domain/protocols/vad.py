"""VAD (Voice Activity Detection) Protocol."""

from typing import Protocol

import numpy as np

from gaussvad.domain.models import DecisionResult, SpeechSegment


class VADProtocol(Protocol):
    """Protocol for frame-level Voice Activity Detection."""

    def detect(self, audio: np.ndarray, threshold: float | None = None) -> DecisionResult:
        """Classify every analysis frame of the audio.

        Args:
            audio: Audio samples as float32 numpy array (mono).
            threshold: Likelihood threshold. Defaults to the configured one.

        Returns:
            DecisionResult with one decision and log-likelihood per frame.
        """
        ...

    def is_speech(self, audio: np.ndarray) -> bool:
        """Check if audio contains speech.

        Args:
            audio: Audio samples as float32 numpy array (mono).

        Returns:
            True if any frame is classified as speech, False otherwise.
        """
        ...

    def get_speech_segments(self, audio: np.ndarray) -> list[SpeechSegment]:
        """Get speech segments from audio.

        Args:
            audio: Audio samples as float32 numpy array (mono).

        Returns:
            Speech segments in chronological order.
        """
        ...
