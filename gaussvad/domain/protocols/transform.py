"""Transform engine Protocol."""

from typing import Protocol

import numpy as np


class TransformProtocol(Protocol):
    """Protocol for a fixed-size real-input Fourier transform."""

    @property
    def size(self) -> int:
        """Transform size N."""
        ...

    def forward(self, frame: np.ndarray) -> np.ndarray:
        """Compute the magnitude spectrum of a real frame.

        Args:
            frame: Real-valued samples of length N.

        Returns:
            Magnitudes |X[k]| for k in [0, N). Only the first N/2 + 1 values
            are meaningful for real input.
        """
        ...
