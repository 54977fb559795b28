"""Decision-directed a-priori SNR estimation."""

import numpy as np

from gaussvad.engine.exceptions import (
    ConfigurationError,
    InputSizeMismatchError,
    InsufficientDataError,
)
from gaussvad.engine.vad.noise import floor_noise_power


def snr_step(
    previous: np.ndarray | None,
    spectrum: np.ndarray,
    noise_power: np.ndarray,
    alpha: float,
) -> np.ndarray:
    """Advance the a-priori SNR estimate by one frame.

    Args:
        previous: Estimate for the preceding frame, or None for frame 0.
        spectrum: Magnitude spectrum of the current frame.
        noise_power: Per-bin noise power.
        alpha: Smoothing factor; higher adapts more slowly.

    Returns:
        A-priori SNR per bin for the current frame, never negative.
    """
    noise = floor_noise_power(noise_power)
    gamma = np.square(spectrum) / noise
    instantaneous = np.maximum(gamma - 1, 0)

    if previous is None:
        return instantaneous

    amp_prev = np.sqrt(previous * noise)
    return alpha * (np.square(amp_prev) / noise) + (1 - alpha) * instantaneous


def estimate_priori_snr(
    spectra: np.ndarray,
    noise_power: np.ndarray,
    alpha: float = 0.98,
) -> np.ndarray:
    """Estimate the a-priori SNR of every frame.

    Frames are folded in order through snr_step; frame m depends only on
    frame m - 1, so this cannot be split across frames.

    Args:
        spectra: Magnitude spectra, shape (n_frames, n_bins).
        noise_power: Per-bin noise power, shape (n_bins,).
        alpha: Smoothing factor in (0, 1).

    Returns:
        A-priori SNR matrix with the same shape as spectra.

    Raises:
        ConfigurationError: If alpha is outside (0, 1).
        InsufficientDataError: If there are no frames.
        InputSizeMismatchError: If bin counts differ.
    """
    if not 0 < alpha < 1:
        raise ConfigurationError(f"alpha must be in (0, 1), got {alpha}")

    spectra = np.asarray(spectra, dtype=np.float64)
    noise_power = np.asarray(noise_power, dtype=np.float64)
    if len(spectra) == 0:
        raise InsufficientDataError("No frames for SNR estimation")
    if spectra.shape[1:] != noise_power.shape:
        raise InputSizeMismatchError(
            f"Spectra bins {spectra.shape[1:]} do not match noise power "
            f"bins {noise_power.shape}"
        )

    xi = np.empty_like(spectra)
    previous: np.ndarray | None = None
    for m, spectrum in enumerate(spectra):
        previous = snr_step(previous, spectrum, noise_power, alpha)
        xi[m] = previous

    return xi
