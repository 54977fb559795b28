"""Shared detectors, one per transform kind."""

import threading

from gaussvad.domain.models import DetectionConfig
from gaussvad.engine.exceptions import ConfigurationError
from gaussvad.engine.transform import TRANSFORMS
from gaussvad.engine.vad import GaussianVAD


class DetectorLoader:
    """Lazily builds and caches one GaussianVAD per transform kind.

    Transform tables are read-only once built, so the cached detectors
    serve every request.
    """

    def __init__(self, config: DetectionConfig | None = None) -> None:
        self._config = config
        self._detectors: dict[str, GaussianVAD] = {}
        self._lock = threading.Lock()

    def get(self, kind: str) -> GaussianVAD:
        """Get the detector for a transform kind, building it on first use.

        Raises:
            ConfigurationError: If the kind is not a known transform.
        """
        if kind not in TRANSFORMS:
            raise ConfigurationError(
                f"Unknown transform {kind!r}, expected one of {sorted(TRANSFORMS)}"
            )

        detector = self._detectors.get(kind)
        if detector is None:
            with self._lock:
                detector = self._detectors.get(kind)
                if detector is None:
                    detector = GaussianVAD(self._config, transform=kind)
                    self._detectors[kind] = detector
        return detector

    def load_all(self) -> dict[str, GaussianVAD]:
        """Build every detector and return them keyed by transform kind."""
        return {kind: self.get(kind) for kind in TRANSFORMS}


_loader = DetectorLoader()


def get_detector_loader() -> DetectorLoader:
    """Get the process-wide detector loader."""
    return _loader
