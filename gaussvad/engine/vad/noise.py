"""Noise floor estimation from a silent lead-in."""

import numpy as np

from gaussvad.engine.exceptions import InsufficientDataError

# Substituted for zero noise power before any division
EPSILON = np.finfo(np.float64).eps


def floor_noise_power(noise_power: np.ndarray) -> np.ndarray:
    """Replace zero noise power bins by EPSILON."""
    noise_power = np.asarray(noise_power, dtype=np.float64)
    return np.where(noise_power == 0, EPSILON, noise_power)


def estimate_noise(spectra: np.ndarray, n_noise_frames: int = 10) -> np.ndarray:
    """Estimate per-bin noise power from the leading frames.

    The recording is assumed to start with noise only. Speech in the
    lead-in is not detected here; it inflates the estimate and lowers
    detection accuracy for the whole run.

    Args:
        spectra: Magnitude spectra, shape (n_frames, n_bins).
        n_noise_frames: Leading frames to average, clamped to n_frames.

    Returns:
        Mean squared magnitude per bin, shape (n_bins,).

    Raises:
        InsufficientDataError: If no frames are available.
    """
    spectra = np.asarray(spectra, dtype=np.float64)
    frames_to_use = min(n_noise_frames, len(spectra))
    if frames_to_use <= 0:
        raise InsufficientDataError("Not enough frames for noise estimation")

    return np.mean(np.square(spectra[:frames_to_use]), axis=0)
