"""Speech detection routes."""

import logging
from typing import Annotated, Literal

from fastapi import APIRouter, File, HTTPException, Query, UploadFile

from ..dependencies import DetectionServiceDep
from ..schemas import ComparisonResponse, DetectionResponse
from ..settings import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["detection"])


def _read_audio_upload(file: UploadFile) -> bytes:
    """Read an uploaded audio file, rejecting non-audio content."""
    content_type = file.content_type or ""
    if not content_type.startswith("audio/"):
        raise HTTPException(
            status_code=415,
            detail="Please provide a valid audio file.",
        )

    data = file.file.read(settings.max_upload_bytes + 1)
    if len(data) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"Audio file exceeds {settings.max_upload_bytes} bytes",
        )

    logger.info(f"Received {file.filename} ({content_type}, {len(data)} bytes)")
    return data


@router.post("/detect", response_model=DetectionResponse)
def detect_speech(
    service: DetectionServiceDep,
    file: Annotated[UploadFile, File(description="Audio file")],
    threshold: Annotated[float | None, Query(gt=0)] = None,
    transform: Literal["fast", "reference"] = "fast",
) -> DetectionResponse:
    """Classify every frame of an uploaded recording as speech or noise."""
    data = _read_audio_upload(file)
    run = service.detect_bytes(data, threshold=threshold, transform=transform)
    return DetectionResponse.from_run(run)


@router.post("/compare", response_model=ComparisonResponse)
def compare_detectors(
    service: DetectionServiceDep,
    file: Annotated[UploadFile, File(description="Audio file")],
) -> ComparisonResponse:
    """Run the reference and fast detectors over an uploaded recording."""
    data = _read_audio_upload(file)
    comparison = service.compare_bytes(data)
    return ComparisonResponse.from_comparison(comparison)
