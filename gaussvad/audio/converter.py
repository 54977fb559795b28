"""Audio decoding using PyAV."""

import io
import logging
from pathlib import Path
from typing import Any

import av
import numpy as np

from gaussvad.engine.exceptions import DecodeError
from gaussvad.engine.settings import settings

logger = logging.getLogger(__name__)


def ensure_mono(audio: np.ndarray) -> np.ndarray:
    """Ensure audio is mono (single channel).

    Args:
        audio: Input audio, possibly multi-channel. Channels may be either
            axis; the shorter axis is taken as channels.

    Returns:
        Mono audio as float32 numpy array.

    Raises:
        DecodeError: If the array has more than two dimensions.
    """
    audio = np.asarray(audio)
    if audio.ndim == 1:
        return audio.astype(np.float32, copy=False)

    if audio.ndim == 2:
        channel_axis = 0 if audio.shape[0] <= audio.shape[1] else 1
        return np.mean(audio, axis=channel_axis).astype(np.float32)

    raise DecodeError(f"Unexpected audio shape: {audio.shape}")


class AudioConverter:
    """Decode audio containers into mono float32 PCM.

    Implements AudioConverterProtocol from gaussvad.domain.protocols.audio.
    """

    def __init__(self, sample_rate: int | None = None) -> None:
        """Initialize converter.

        Args:
            sample_rate: Output sample rate. Defaults to settings value.
        """
        self._sample_rate = sample_rate or settings.sample_rate

    @property
    def sample_rate(self) -> int:
        """Output sample rate."""
        return self._sample_rate

    def _decode_container(self, source: Any, name: str) -> tuple[np.ndarray, int]:
        container = av.open(source)
        try:
            audio_stream = next(
                (s for s in container.streams if s.type == "audio"), None
            )
            if audio_stream is None:
                raise DecodeError(f"No audio stream found in {name}")

            resampler = av.AudioResampler(
                format="s16",
                layout="mono",
                rate=self._sample_rate,
            )

            samples_list: list[np.ndarray] = []
            for frame in container.decode(audio_stream):
                for resampled in resampler.resample(frame):
                    samples_list.append(resampled.to_ndarray().flatten())

            # Drain samples buffered inside the resampler
            for resampled in resampler.resample(None):
                samples_list.append(resampled.to_ndarray().flatten())
        finally:
            container.close()

        if not samples_list:
            raise DecodeError(f"No audio samples decoded from {name}")

        samples = np.concatenate(samples_list)

        # Convert from int16 to float32 normalized to [-1, 1]
        samples = samples.astype(np.float32) / 32768.0

        return samples, self._sample_rate

    def decode(self, data: bytes) -> tuple[np.ndarray, int]:
        """Decode encoded audio bytes to PCM numpy array.

        Args:
            data: Raw encoded audio bytes (wav, webm, mp3, ...).

        Returns:
            Tuple of (audio samples as float32 numpy array, sample rate).

        Raises:
            DecodeError: If decoding fails.
        """
        if not data:
            raise DecodeError("Audio data is empty")

        try:
            return self._decode_container(io.BytesIO(data), "audio data")
        except DecodeError:
            raise
        except Exception as e:
            logger.error(f"Failed to decode audio data: {e}")
            raise DecodeError(
                "Failed to decode audio file. Please ensure it's a valid audio format."
            ) from e

    def load_file(self, file_path: str | Path) -> tuple[np.ndarray, int]:
        """Load an audio file and return PCM samples.

        Args:
            file_path: Path to the audio file.

        Returns:
            Tuple of (audio samples as float32 numpy array, sample rate).

        Raises:
            DecodeError: If loading fails.
        """
        try:
            return self._decode_container(str(file_path), str(file_path))
        except DecodeError:
            raise
        except Exception as e:
            logger.error(f"Failed to load audio file {file_path}: {e}")
            raise DecodeError(f"Failed to load audio file: {e}") from e
