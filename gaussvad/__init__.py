"""GaussVAD - Gaussian likelihood ratio voice activity detection.

This package provides:
- Fourier transforms (direct reference DFT and radix-2 FFT)
- Framing, Hann windowing and noise floor estimation
- Decision-directed a-priori SNR estimation
- Per-frame speech / non-speech decisions
- Audio decoding (PyAV) and an HTTP API (FastAPI)

Usage:
    from gaussvad import GaussianVAD

    vad = GaussianVAD()
    result = vad.detect(samples)  # float32 mono, noise-only lead-in
    print(f"Speech frames: {result.speech_percentage:.1f}%")
    print(result.to_dict())  # {"speechFrames": [...], "logLikelihood": [...]}
"""

__version__ = "0.1.0"

from gaussvad.domain.models import DecisionResult, DetectionConfig, SpeechSegment
from gaussvad.engine import FastFFT, GaussianVAD, ReferenceDFT, create_transform
from gaussvad.engine.exceptions import (
    ConfigurationError,
    DecodeError,
    EngineError,
    InputSizeMismatchError,
    InsufficientDataError,
)
from gaussvad.engine.settings import EngineSettings, settings

__all__ = [
    "__version__",
    # Settings
    "EngineSettings",
    "settings",
    # Exceptions
    "EngineError",
    "ConfigurationError",
    "InsufficientDataError",
    "InputSizeMismatchError",
    "DecodeError",
    # Models
    "DetectionConfig",
    "DecisionResult",
    "SpeechSegment",
    # Transforms
    "FastFFT",
    "ReferenceDFT",
    "create_transform",
    # VAD
    "GaussianVAD",
]
