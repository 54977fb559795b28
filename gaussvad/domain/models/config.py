"""Detection configuration model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DetectionConfig:
    """Immutable parameters for one Gaussian VAD detector."""

    frame_length: int = 1024  # samples, power of two
    hop_length: int = 512  # samples
    sample_rate: int = 16000  # Hz, used only for time conversion
    noise_frame_count: int = 10
    alpha: float = 0.98  # a-priori SNR smoothing
    threshold: float = 0.5  # likelihood space

    @property
    def bin_count(self) -> int:
        """Number of non-redundant frequency bins."""
        return self.frame_length // 2 + 1
