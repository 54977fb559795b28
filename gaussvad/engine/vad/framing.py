"""Frame segmentation of a continuous sample sequence."""

import numpy as np

from gaussvad.engine.exceptions import (
    ConfigurationError,
    InputSizeMismatchError,
    InsufficientDataError,
)


def _validate_lengths(frame_length: int, hop_length: int) -> None:
    if frame_length <= 0:
        raise ConfigurationError(f"Frame length must be positive, got {frame_length}")
    if hop_length <= 0:
        raise ConfigurationError(f"Hop length must be positive, got {hop_length}")


def frame_count(signal_length: int, frame_length: int, hop_length: int) -> int:
    """Number of complete frames that fit in a signal.

    Args:
        signal_length: Number of samples in the signal.
        frame_length: Samples per frame.
        hop_length: Samples between successive frame starts.

    Returns:
        floor((signal_length - frame_length) / hop_length) + 1, or 0 if the
        signal is shorter than one frame.
    """
    _validate_lengths(frame_length, hop_length)
    if signal_length < frame_length:
        return 0
    return (signal_length - frame_length) // hop_length + 1


def frame_offsets(signal_length: int, frame_length: int, hop_length: int) -> np.ndarray:
    """Start sample offset of every complete frame."""
    count = frame_count(signal_length, frame_length, hop_length)
    return np.arange(count, dtype=np.intp) * hop_length


def frame_signal(signal: np.ndarray, frame_length: int, hop_length: int) -> np.ndarray:
    """Slice a signal into overlapping fixed-length frames.

    Frames start at 0, hop_length, 2 * hop_length, ... and the trailing
    partial frame is dropped, never padded.

    Args:
        signal: Mono audio samples.
        frame_length: Samples per frame.
        hop_length: Samples between successive frame starts.

    Returns:
        float32 array of shape (n_frames, frame_length). Rows are copies,
        the source signal is never written through.

    Raises:
        InputSizeMismatchError: If the signal is not one-dimensional.
        InsufficientDataError: If the signal is shorter than one frame.
        ConfigurationError: If frame_length or hop_length is not positive.
    """
    samples = np.asarray(signal, dtype=np.float32)
    if samples.ndim != 1:
        raise InputSizeMismatchError(
            f"Expected mono samples (1-D), got shape {samples.shape}"
        )

    _validate_lengths(frame_length, hop_length)
    if len(samples) < frame_length:
        raise InsufficientDataError(
            f"Audio is too short for analysis: {len(samples)} samples, "
            f"need at least {frame_length}"
        )

    offsets = frame_offsets(len(samples), frame_length, hop_length)
    indices = offsets[:, None] + np.arange(frame_length)[None, :]
    return samples[indices]
