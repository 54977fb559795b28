"""Transform engine implementations."""

from gaussvad.domain.protocols.transform import TransformProtocol
from gaussvad.engine.exceptions import ConfigurationError
from gaussvad.engine.transform.base import is_power_of_two
from gaussvad.engine.transform.fast import FastFFT
from gaussvad.engine.transform.reference import ReferenceDFT

TRANSFORMS: dict[str, type[FastFFT] | type[ReferenceDFT]] = {
    "fast": FastFFT,
    "reference": ReferenceDFT,
}


def create_transform(kind: str, size: int) -> TransformProtocol:
    """Create a transform engine of the given kind.

    Args:
        kind: "fast" or "reference".
        size: Transform size (positive power of two).

    Raises:
        ConfigurationError: If the kind is unknown or the size is invalid.
    """
    try:
        transform_cls = TRANSFORMS[kind]
    except KeyError:
        raise ConfigurationError(
            f"Unknown transform {kind!r}, expected one of {sorted(TRANSFORMS)}"
        ) from None
    return transform_cls(size)


__all__ = [
    "FastFFT",
    "ReferenceDFT",
    "TRANSFORMS",
    "create_transform",
    "is_power_of_two",
]
