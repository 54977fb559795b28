"""Audio decoding collaborators."""

from gaussvad.audio.converter import AudioConverter, ensure_mono

__all__ = ["AudioConverter", "ensure_mono"]
