"""Domain protocols."""

from gaussvad.domain.protocols.audio import AudioConverterProtocol
from gaussvad.domain.protocols.transform import TransformProtocol
from gaussvad.domain.protocols.vad import VADProtocol

__all__ = [
    "AudioConverterProtocol",
    "TransformProtocol",
    "VADProtocol",
]
