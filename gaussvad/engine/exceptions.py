"""Engine exceptions."""


class EngineError(Exception):
    """Base exception for engine."""

    pass


class ConfigurationError(EngineError):
    """Invalid detector or transform configuration."""

    pass


class InsufficientDataError(EngineError):
    """Not enough samples or frames for analysis."""

    pass


class InputSizeMismatchError(EngineError):
    """Input length does not match the configured transform size."""

    pass


class DecodeError(EngineError):
    """Failed to decode audio into PCM samples."""

    pass
