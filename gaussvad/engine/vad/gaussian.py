"""Voice Activity Detection using a Gaussian statistical model on DFT spectra."""

import logging

import numpy as np

from gaussvad.domain.models import DecisionResult, DetectionConfig, SpeechSegment
from gaussvad.engine.settings import settings
from gaussvad.engine.transform import create_transform
from gaussvad.engine.transform.base import freeze
from gaussvad.engine.vad.decision import decide
from gaussvad.engine.vad.framing import frame_signal
from gaussvad.engine.vad.noise import estimate_noise
from gaussvad.engine.vad.snr import estimate_priori_snr
from gaussvad.engine.vad.window import hann_window

logger = logging.getLogger(__name__)


class GaussianVAD:
    """Frame-level speech detector based on likelihood ratio tests.

    Implements VADProtocol from gaussvad.domain.protocols.vad.

    The pipeline is: frame -> Hann window -> transform -> keep N/2 + 1 bins
    -> noise estimate from the leading frames -> decision-directed a-priori
    SNR -> per-frame average log likelihood ratio against a threshold.

    The transform and window tables are built once per instance and are
    read-only, so an instance may be shared between threads.
    """

    def __init__(
        self,
        config: DetectionConfig | None = None,
        transform: str | None = None,
    ) -> None:
        """Initialize detector.

        Args:
            config: Detection parameters. Defaults to settings values.
            transform: "fast" or "reference". Defaults to settings value.

        Raises:
            ConfigurationError: If the frame length is not a power of two or
                the transform kind is unknown.
        """
        self._config = config or settings.to_detection_config()
        self._transform_kind = transform or settings.transform
        self._transform = create_transform(
            self._transform_kind, self._config.frame_length
        )
        self._window = freeze(hann_window(self._config.frame_length))

    @property
    def config(self) -> DetectionConfig:
        """Detection parameters."""
        return self._config

    @property
    def transform_kind(self) -> str:
        """Name of the transform variant in use."""
        return self._transform_kind

    def extract_spectra(self, audio: np.ndarray) -> np.ndarray:
        """Compute the magnitude spectrum of every frame.

        Args:
            audio: Audio samples as float32 numpy array (mono).

        Returns:
            Array of shape (n_frames, frame_length // 2 + 1).

        Raises:
            InsufficientDataError: If audio is shorter than one frame.
            InputSizeMismatchError: If audio is not one-dimensional.
        """
        frames = frame_signal(
            audio, self._config.frame_length, self._config.hop_length
        )
        bins = self._config.bin_count

        spectra = np.empty((len(frames), bins), dtype=np.float64)
        for i, frame in enumerate(frames):
            spectra[i] = self._transform.forward(frame * self._window)[:bins]

        return spectra

    def detect(
        self, audio: np.ndarray, threshold: float | None = None
    ) -> DecisionResult:
        """Classify every analysis frame of the audio.

        Args:
            audio: Audio samples as float32 numpy array (mono). The first
                noise_frame_count frames must be noise only.
            threshold: Likelihood threshold. Defaults to the configured one.

        Returns:
            DecisionResult with one decision and log-likelihood per frame.

        Raises:
            InsufficientDataError: If audio is shorter than one frame.
            ConfigurationError: If alpha or threshold is out of range.
        """
        if threshold is None:
            threshold = self._config.threshold

        spectra = self.extract_spectra(audio)
        noise_power = estimate_noise(spectra, self._config.noise_frame_count)
        xi = estimate_priori_snr(spectra, noise_power, self._config.alpha)
        speech_frames, log_likelihood = decide(spectra, xi, noise_power, threshold)

        result = DecisionResult(
            speech_frames=speech_frames,
            log_likelihood=log_likelihood,
            frame_length=self._config.frame_length,
            hop_length=self._config.hop_length,
            sample_rate=self._config.sample_rate,
        )
        logger.debug(
            f"{self._transform_kind} transform: {result.speech_frame_count}/"
            f"{result.frame_count} speech frames ({result.speech_percentage:.1f}%)"
        )
        return result

    def is_speech(self, audio: np.ndarray) -> bool:
        """Check if audio contains speech.

        Args:
            audio: Audio samples as float32 numpy array (mono).

        Returns:
            True if any frame is classified as speech, False otherwise.
        """
        return any(self.detect(audio).speech_frames)

    def get_speech_segments(self, audio: np.ndarray) -> list[SpeechSegment]:
        """Get speech segments from audio.

        Args:
            audio: Audio samples as float32 numpy array (mono).

        Returns:
            Speech segments in chronological order.
        """
        return self.detect(audio).speech_segments()
