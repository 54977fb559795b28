"""Tests for noise estimation."""

import numpy as np
import pytest

from gaussvad.engine.exceptions import InsufficientDataError
from gaussvad.engine.transform import FastFFT
from gaussvad.engine.vad.framing import frame_signal
from gaussvad.engine.vad.noise import EPSILON, estimate_noise, floor_noise_power
from gaussvad.engine.vad.window import hann_window


def _complex_noise_magnitudes(
    rng: np.random.Generator, n_frames: int, n_bins: int, variance: float
) -> np.ndarray:
    """Magnitudes whose squares have mean `variance`."""
    real = rng.normal(0.0, np.sqrt(variance / 2), (n_frames, n_bins))
    imag = rng.normal(0.0, np.sqrt(variance / 2), (n_frames, n_bins))
    return np.hypot(real, imag)


class TestEstimateNoise:
    """Tests for estimate_noise function."""

    def test_mean_of_squares(self) -> None:
        """Test estimate is the mean squared magnitude per bin."""
        spectra = np.array([[1.0, 2.0], [3.0, 0.0]])
        np.testing.assert_allclose(estimate_noise(spectra, 2), [5.0, 2.0])

    def test_uses_leading_frames_only(self) -> None:
        """Test frames after the noise window are ignored."""
        spectra = np.array([[1.0], [1.0], [100.0]])
        np.testing.assert_allclose(estimate_noise(spectra, 2), [1.0])

    def test_clamped_to_available_frames(self) -> None:
        """Test more noise frames than available uses all frames."""
        spectra = np.array([[2.0, 4.0], [4.0, 2.0]])
        np.testing.assert_allclose(estimate_noise(spectra, 10), [10.0, 10.0])

    def test_empty_raises(self) -> None:
        """Test no frames raises."""
        with pytest.raises(InsufficientDataError):
            estimate_noise(np.empty((0, 5)))

    def test_zero_noise_frames_raises(self) -> None:
        """Test a zero-frame noise window raises."""
        with pytest.raises(InsufficientDataError):
            estimate_noise(np.ones((4, 5)), 0)

    def test_converges_to_variance(self, rng: np.random.Generator) -> None:
        """Test estimate approaches the true power as frames grow."""
        variance = 0.01
        few = _complex_noise_magnitudes(rng, 5, 257, variance)
        many = _complex_noise_magnitudes(rng, 2000, 257, variance)

        few_error = np.mean(np.abs(estimate_noise(few, 5) / variance - 1))
        many_estimate = estimate_noise(many, 2000)

        np.testing.assert_allclose(many_estimate, variance, rtol=0.1)
        assert np.mean(np.abs(many_estimate / variance - 1)) < few_error

    def test_windowed_white_noise_power(self, rng: np.random.Generator) -> None:
        """Test Hann-windowed white noise gives variance * sum(w^2) per bin."""
        variance = 0.01
        frame_length = 256
        signal = rng.normal(0.0, np.sqrt(variance), 400 * frame_length)

        window = hann_window(frame_length)
        fft = FastFFT(frame_length)
        frames = frame_signal(signal, frame_length, frame_length)
        spectra = np.array(
            [fft.forward(f * window)[: frame_length // 2 + 1] for f in frames]
        )

        estimate = estimate_noise(spectra, len(spectra))
        expected = variance * np.sum(window**2)

        assert np.mean(estimate) == pytest.approx(expected, rel=0.05)


class TestFloorNoisePower:
    """Tests for floor_noise_power function."""

    def test_replaces_zero_bins(self) -> None:
        """Test zero bins become EPSILON and others are kept."""
        floored = floor_noise_power(np.array([0.0, 2.0]))
        np.testing.assert_array_equal(floored, [EPSILON, 2.0])
