"""Audio decoding Protocol."""

from pathlib import Path
from typing import Protocol

import numpy as np


class AudioConverterProtocol(Protocol):
    """Protocol for decoding audio containers into PCM samples."""

    def decode(self, data: bytes) -> tuple[np.ndarray, int]:
        """Decode encoded audio bytes to PCM numpy array.

        Args:
            data: Raw encoded audio bytes (wav, webm, mp3, ...).

        Returns:
            Tuple of (audio samples as float32 numpy array, sample rate).
        """
        ...

    def load_file(self, file_path: str | Path) -> tuple[np.ndarray, int]:
        """Load an audio file and return PCM samples.

        Args:
            file_path: Path to the audio file.

        Returns:
            Tuple of (audio samples as float32 numpy array, sample rate).
        """
        ...
