"""Engine layer - signal processing implementations."""

from gaussvad.engine.transform import FastFFT, ReferenceDFT, create_transform
from gaussvad.engine.vad import GaussianVAD

__all__ = [
    "FastFFT",
    "GaussianVAD",
    "ReferenceDFT",
    "create_transform",
]
