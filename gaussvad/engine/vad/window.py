"""Hann window taper."""

import numpy as np

from gaussvad.engine.exceptions import ConfigurationError


def hann_window(length: int) -> np.ndarray:
    """Symmetric Hann window w[i] = 0.5 * (1 - cos(2*pi*i / (L - 1))).

    A single-sample window is [1.0].
    """
    if length <= 0:
        raise ConfigurationError(f"Window length must be positive, got {length}")
    if length == 1:
        return np.ones(1)

    i = np.arange(length)
    return 0.5 * (1 - np.cos(2 * np.pi * i / (length - 1)))


def apply_window(frames: np.ndarray) -> np.ndarray:
    """Multiply a frame, or each row of a frame stack, by a Hann window.

    Args:
        frames: One frame (1-D) or frames stacked as rows (2-D).

    Returns:
        Windowed copy with the same shape, as float64.
    """
    samples = np.asarray(frames, dtype=np.float64)
    return samples * hann_window(samples.shape[-1])
