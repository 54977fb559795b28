"""Engine settings."""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from gaussvad.domain.models import DetectionConfig


class EngineSettings(BaseSettings):
    """Signal processing engine settings."""

    model_config = SettingsConfigDict(
        env_prefix="GAUSSVAD_ENGINE_",
        env_file=".env",
        extra="ignore",
    )

    # Framing
    frame_length: int = 1024  # samples, power of two
    hop_length: int = 512  # samples

    # Audio settings
    sample_rate: int = 16000

    # Noise estimation
    noise_frame_count: int = 10  # leading frames assumed noise-only

    # Decision-directed a-priori SNR smoothing
    snr_alpha: float = 0.98

    # Likelihood ratio threshold (likelihood space, not log space)
    decision_threshold: float = 0.5

    # Transform variant used by default
    transform: Literal["fast", "reference"] = "fast"

    def to_detection_config(self) -> DetectionConfig:
        """Build an immutable detection config from these settings."""
        return DetectionConfig(
            frame_length=self.frame_length,
            hop_length=self.hop_length,
            sample_rate=self.sample_rate,
            noise_frame_count=self.noise_frame_count,
            alpha=self.snr_alpha,
            threshold=self.decision_threshold,
        )


settings = EngineSettings()
