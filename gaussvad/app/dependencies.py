"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends

from gaussvad.audio import AudioConverter
from gaussvad.domain_service import DetectionService

from .detector_loader import DetectorLoader, get_detector_loader


def get_audio_converter() -> AudioConverter:
    """Get audio converter instance."""
    return AudioConverter()


def get_detection_service(
    loader: Annotated[DetectorLoader, Depends(get_detector_loader)],
    audio_converter: Annotated[AudioConverter, Depends(get_audio_converter)],
) -> DetectionService:
    """Get detection service with the shared detectors."""
    return DetectionService(loader.load_all(), audio_converter)


# Type aliases for dependency injection
AudioConverterDep = Annotated[AudioConverter, Depends(get_audio_converter)]
DetectionServiceDep = Annotated[DetectionService, Depends(get_detection_service)]
