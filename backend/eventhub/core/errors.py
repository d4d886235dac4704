import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """A database statement failed; details stay in the server log."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, action: str):
        super().__init__(action)
        self.action = action

    @property
    def public_message(self) -> str:
        return f"Error {self.action}"


class ConstraintViolation(StoreError):
    """The store rejected a write (unique or foreign key constraint)."""

    status_code = 422

    @property
    def public_message(self) -> str:
        return f"Rejected while {self.action}"


class CredentialError(Exception):
    """Profile resolution failure: absent token, bad token or vanished user."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


async def _store_error_handler(request: Request, exc: StoreError):
    if isinstance(exc, ConstraintViolation):
        logger.warning("%s %s: %s (%s)", request.method, request.url.path, exc.public_message, exc.__cause__)
    else:
        logger.error("%s %s: %s", request.method, request.url.path, exc.public_message, exc_info=exc.__cause__ or exc)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.public_message})


async def _credential_error_handler(request: Request, exc: CredentialError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message, "user": None})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StoreError, _store_error_handler)
    app.add_exception_handler(CredentialError, _credential_error_handler)
