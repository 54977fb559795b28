"""Exception handlers translating engine errors to HTTP responses."""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from gaussvad.engine.exceptions import (
    ConfigurationError,
    DecodeError,
    InputSizeMismatchError,
    InsufficientDataError,
)


async def unprocessable_audio_handler(request: Request, exc: Exception) -> JSONResponse:
    """DecodeError / InsufficientDataError to 422 response."""
    assert isinstance(exc, (DecodeError, InsufficientDataError))
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc)},
    )


async def bad_parameters_handler(request: Request, exc: Exception) -> JSONResponse:
    """ConfigurationError / InputSizeMismatchError to 400 response."""
    assert isinstance(exc, (ConfigurationError, InputSizeMismatchError))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc)},
    )
