"""Shared validation for transform engines."""

import numpy as np

from gaussvad.engine.exceptions import ConfigurationError, InputSizeMismatchError


def is_power_of_two(size: int) -> bool:
    """Check if size is a positive power of two."""
    return size > 0 and (size & (size - 1)) == 0


def validate_size(size: int) -> int:
    """Validate a transform size.

    Raises:
        ConfigurationError: If size is not a positive power of two.
    """
    if not isinstance(size, (int, np.integer)) or not is_power_of_two(int(size)):
        raise ConfigurationError(
            f"Transform size must be a positive power of 2, got {size!r}"
        )
    return int(size)


def as_frame(frame: np.ndarray, size: int) -> np.ndarray:
    """Coerce a frame to float64 and check its length.

    Raises:
        InputSizeMismatchError: If the frame is not 1-D with `size` samples.
    """
    samples = np.asarray(frame, dtype=np.float64)
    if samples.ndim != 1 or samples.shape[0] != size:
        raise InputSizeMismatchError(
            f"Input size must match transform size ({size}), got shape {samples.shape}"
        )
    return samples


def freeze(array: np.ndarray) -> np.ndarray:
    """Mark a precomputed table read-only."""
    array.flags.writeable = False
    return array
