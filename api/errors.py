"""
Map application exceptions onto HTTP errors.

Routers catch HevySpotterError at the boundary and re-raise the result of
to_http_exception(), so every endpoint reports failures the same way.
"""

import logging

from fastapi import HTTPException, status

from application.exceptions import (
    AuthError,
    HevySpotterError,
    ParseError,
    RemoteError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def to_http_exception(exc: HevySpotterError) -> HTTPException:
    """
    Translate an application error into an HTTPException.

    - AuthError -> 401
    - ValidationError -> 422
    - ParseError -> 502
    - RemoteError -> 502, with the upstream status and body in the detail
    """
    if isinstance(exc, AuthError):
        return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc))
    if isinstance(exc, ValidationError):
        return HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc))
    if isinstance(exc, RemoteError):
        logger.error(f"Upstream failure: {exc}")
        return HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={
                "message": str(exc),
                "upstream_status": exc.status_code,
                "body": exc.body,
            },
        )
    if isinstance(exc, ParseError):
        logger.error(f"Malformed upstream response: {exc}")
        return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))
