"""Gaussian likelihood ratio speech decision."""

import math

import numpy as np

from gaussvad.engine.exceptions import (
    ConfigurationError,
    InputSizeMismatchError,
)
from gaussvad.engine.vad.noise import EPSILON, floor_noise_power

_MAX_LIKELIHOOD = np.finfo(np.float64).max


def frame_log_likelihood(
    spectrum: np.ndarray,
    xi: np.ndarray,
    noise_power: np.ndarray,
) -> float:
    """Average per-bin log likelihood ratio of speech vs noise for one frame.

    Per bin:
        L = 1 / (1 + xi') * exp(gamma * xi' / (1 + xi'))
    where gamma is the a-posteriori SNR and xi' is recomputed from the
    estimated speech power xi * noise_power.
    """
    noise_power = np.asarray(noise_power, dtype=np.float64)
    noise = floor_noise_power(noise_power)

    sigma_s = xi * noise_power
    gamma = np.square(spectrum) / noise
    xi_j = sigma_s / noise

    with np.errstate(over="ignore", invalid="ignore"):
        likelihood = (1 / (1 + xi_j)) * np.exp(gamma * xi_j / (1 + xi_j))
    likelihood = np.nan_to_num(likelihood, nan=0.0, posinf=_MAX_LIKELIHOOD)

    return float(np.mean(np.log(np.maximum(likelihood, EPSILON))))


def decide(
    spectra: np.ndarray,
    xi: np.ndarray,
    noise_power: np.ndarray,
    threshold: float = 0.5,
) -> tuple[list[bool], list[float]]:
    """Classify every frame as speech or non-speech.

    A frame is speech iff its average log likelihood exceeds log(threshold).
    The threshold is given in likelihood space.

    Args:
        spectra: Magnitude spectra, shape (n_frames, n_bins).
        xi: A-priori SNR matrix, same shape as spectra.
        noise_power: Per-bin noise power, shape (n_bins,).
        threshold: Likelihood ratio threshold, must be positive.

    Returns:
        Tuple of (speech flag per frame, average log likelihood per frame).

    Raises:
        ConfigurationError: If threshold is not positive.
        InputSizeMismatchError: If shapes are inconsistent.
    """
    if threshold <= 0:
        raise ConfigurationError(f"threshold must be positive, got {threshold}")

    spectra = np.asarray(spectra, dtype=np.float64)
    xi = np.asarray(xi, dtype=np.float64)
    if spectra.shape != xi.shape:
        raise InputSizeMismatchError(
            f"Spectra shape {spectra.shape} does not match SNR shape {xi.shape}"
        )
    if spectra.shape[1:] != np.shape(noise_power):
        raise InputSizeMismatchError(
            f"Spectra bins {spectra.shape[1:]} do not match noise power "
            f"bins {np.shape(noise_power)}"
        )

    log_threshold = math.log(threshold)
    speech_frames: list[bool] = []
    log_likelihood: list[float] = []

    for spectrum, frame_xi in zip(spectra, xi):
        avg_log_l = frame_log_likelihood(spectrum, frame_xi, noise_power)
        log_likelihood.append(avg_log_l)
        speech_frames.append(avg_log_l > log_threshold)

    return speech_frames, log_likelihood
