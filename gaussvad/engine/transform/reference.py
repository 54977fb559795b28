"""Direct O(N^2) discrete Fourier transform."""

import numpy as np

from gaussvad.engine.transform.base import as_frame, freeze, validate_size


class ReferenceDFT:
    """Reference DFT evaluating X[k] = sum_j x[j] * exp(-2*pi*i*j*k/N) directly.

    Implements TransformProtocol from gaussvad.domain.protocols.transform.
    Used to cross-check FastFFT; far too slow for long recordings.
    """

    def __init__(self, size: int) -> None:
        """Initialize transform tables.

        Args:
            size: Transform size. Must be a positive power of two so that
                both transform variants accept the same configurations.

        Raises:
            ConfigurationError: If size is not a positive power of two.
        """
        self._size = validate_size(size)

        # (j * k) mod N keeps the angles exact for large products
        n = np.arange(self._size, dtype=np.int64)
        angles = 2 * np.pi * (np.outer(n, n) % self._size) / self._size
        self._cos_matrix = freeze(np.cos(angles))
        self._sin_matrix = freeze(np.sin(angles))

    @property
    def size(self) -> int:
        """Transform size."""
        return self._size

    def forward(self, frame: np.ndarray) -> np.ndarray:
        """Compute the magnitude spectrum of a real frame.

        Args:
            frame: Real-valued samples, length equal to the transform size.

        Returns:
            Magnitudes |X[k]| for k in [0, N) as float64 numpy array.

        Raises:
            InputSizeMismatchError: If the frame length differs from the size.
        """
        samples = as_frame(frame, self._size)

        real = self._cos_matrix @ samples
        imag = -(self._sin_matrix @ samples)

        return np.sqrt(real * real + imag * imag)
