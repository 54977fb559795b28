"""Pytest fixtures for GaussVAD tests."""

import io

import numpy as np
import pytest
import soundfile as sf

FRAME_LENGTH = 1024
HOP_LENGTH = 512
# 10 frames of noise followed by 10 frames of tone
LEAD_IN_SAMPLES = 10 * FRAME_LENGTH
TONE_SAMPLES = 10 * FRAME_LENGTH
TONE_HZ = 1000.0  # bin 64 at 1024 / 16 kHz


@pytest.fixture
def sample_rate() -> int:
    """Standard sample rate."""
    return 16000


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random generator."""
    return np.random.default_rng(42)


@pytest.fixture
def silence_audio(sample_rate: int) -> np.ndarray:
    """Generate 1 second of silence."""
    return np.zeros(sample_rate, dtype=np.float32)


@pytest.fixture
def noise_audio(sample_rate: int, rng: np.random.Generator) -> np.ndarray:
    """Generate 1 second of white noise with variance 0.01."""
    return rng.normal(0.0, 0.1, sample_rate).astype(np.float32)


@pytest.fixture
def noise_then_tone_audio(sample_rate: int, rng: np.random.Generator) -> np.ndarray:
    """White noise lead-in (variance 0.01) followed by a unit amplitude tone."""
    noise = rng.normal(0.0, 0.1, LEAD_IN_SAMPLES)
    t = np.arange(TONE_SAMPLES) / sample_rate
    tone = np.sin(2 * np.pi * TONE_HZ * t)
    return np.concatenate([noise, tone]).astype(np.float32)


@pytest.fixture
def wav_bytes(noise_then_tone_audio: np.ndarray, sample_rate: int) -> bytes:
    """Noise-then-tone audio encoded as a 16-bit WAV file."""
    buffer = io.BytesIO()
    sf.write(
        buffer,
        np.clip(noise_then_tone_audio, -1.0, 0.99),
        sample_rate,
        format="WAV",
        subtype="PCM_16",
    )
    return buffer.getvalue()


@pytest.fixture
def short_wav_bytes(sample_rate: int) -> bytes:
    """WAV file shorter than one analysis frame."""
    buffer = io.BytesIO()
    sf.write(
        buffer,
        np.zeros(FRAME_LENGTH // 2, dtype=np.float32),
        sample_rate,
        format="WAV",
        subtype="PCM_16",
    )
    return buffer.getvalue()
