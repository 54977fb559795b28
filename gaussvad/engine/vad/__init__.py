"""Gaussian VAD pipeline stages."""

from gaussvad.engine.vad.decision import decide, frame_log_likelihood
from gaussvad.engine.vad.framing import frame_count, frame_offsets, frame_signal
from gaussvad.engine.vad.gaussian import GaussianVAD
from gaussvad.engine.vad.noise import EPSILON, estimate_noise, floor_noise_power
from gaussvad.engine.vad.snr import estimate_priori_snr, snr_step
from gaussvad.engine.vad.window import apply_window, hann_window

__all__ = [
    "EPSILON",
    "GaussianVAD",
    "apply_window",
    "decide",
    "estimate_noise",
    "estimate_priori_snr",
    "floor_noise_power",
    "frame_count",
    "frame_log_likelihood",
    "frame_offsets",
    "frame_signal",
    "hann_window",
    "snr_step",
]
