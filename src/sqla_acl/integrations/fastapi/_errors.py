"""Exception handlers for FastAPI integration."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from sqla_acl.exceptions import AclError

__all__ = ["install_error_handlers"]


def install_error_handlers(app: FastAPI) -> None:
    """Install an exception handler for sqla-acl errors on a FastAPI app.

    Every ``AclError`` becomes a JSON response using the error's
    ``status_code``:

    - ``AclRejected`` -> 403 Forbidden
    - ``MissingAuthError`` -> 401 Unauthorized
    - ``AclFault`` subclasses -> 500 Internal Server Error

    Args:
        app: The FastAPI application instance.

    Example::

        app = FastAPI()
        install_error_handlers(app)
    """

    @app.exception_handler(AclError)
    async def acl_error_handler(  # pyright: ignore[reportUnusedFunction]
        request: object, exc: AclError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": str(exc)},
        )
