"""Radix-2 Cooley-Tukey fast Fourier transform."""

import numpy as np

from gaussvad.engine.transform.base import as_frame, freeze, validate_size


def _bit_reversal_permutation(size: int) -> np.ndarray:
    """Index permutation that reorders input for in-place decimation in time."""
    bits = size.bit_length() - 1
    indices = np.arange(size, dtype=np.intp)
    reversed_indices = np.zeros(size, dtype=np.intp)
    for bit in range(bits):
        reversed_indices |= ((indices >> bit) & 1) << (bits - 1 - bit)
    return reversed_indices


class FastFFT:
    """Iterative radix-2 decimation-in-time FFT.

    Implements TransformProtocol from gaussvad.domain.protocols.transform.
    Bit-reversal permutation and twiddle factors are computed once and are
    read-only afterwards, so one instance can serve concurrent runs.
    """

    def __init__(self, size: int) -> None:
        """Initialize transform tables.

        Args:
            size: Transform size (positive power of two).

        Raises:
            ConfigurationError: If size is not a positive power of two.
        """
        self._size = validate_size(size)
        self._permutation = freeze(_bit_reversal_permutation(self._size))
        self._twiddles = freeze(
            np.exp(-2j * np.pi * np.arange(self._size // 2) / self._size)
        )

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
        spectrum = samples[self._permutation].astype(np.complex128)

        half = 1
        while half < self._size:
            step = self._size // (2 * half)
            twiddles = self._twiddles[::step]
            blocks = spectrum.reshape(-1, 2 * half)
            even = blocks[:, :half]
            odd = blocks[:, half:] * twiddles
            spectrum = np.concatenate((even + odd, even - odd), axis=1).reshape(-1)
            half *= 2

        return np.abs(spectrum)
