"""Domain service layer."""

from gaussvad.domain_service.detection import (
    ComparisonResult,
    DetectionService,
    DetectorRun,
)

__all__ = [
    "ComparisonResult",
    "DetectionService",
    "DetectorRun",
]
