"""Domain errors and the handlers that turn them into JSON responses.

Services raise the typed errors below. ``setup_exception_handlers`` maps every
one of them to a status code and a stable body::

    {"success": false, "error": "<code>", "detail": "<message>", "request_id": "...", ...}

Extra machine-readable flags (``limit_reached``, ``needs_action``, ...) are
merged into the body.
"""

from typing import Any

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.notekeep.core.config import get_settings
from src.notekeep.core.logging import get_logger

logger = get_logger(__name__)


class NoteKeepError(Exception):
    """Base class for errors that are reported to the caller."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "internal_error"
    default_detail: str = "Internal server error"

    def __init__(self, detail: str | None = None, **extra: Any):
        self.detail = detail or self.default_detail
        self.extra = extra
        super().__init__(self.detail)

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": False,
            "error": self.code,
            "detail": self.detail,
            **self.extra,
        }


class InvalidInputError(NoteKeepError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "validation_error"
    default_detail = "Invalid input"


class InvalidOrExpiredInvitationError(InvalidInputError):
    code = "invalid_or_expired_invitation"
    default_detail = "Invalid or expired invitation"


class SlugAllocationFailedError(InvalidInputError):
    code = "slug_allocation_failed"
    default_detail = "Unable to generate unique organization URL. Please try a different name."


class UnauthenticatedError(NoteKeepError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "unauthenticated"
    default_detail = "Access token required"


class InvalidCredentialError(UnauthenticatedError):
    code = "invalid_credential"
    default_detail = "Invalid or expired token"


class UnknownSubjectError(UnauthenticatedError):
    code = "unknown_subject"
    default_detail = "User not found"


class InvalidLoginError(UnauthenticatedError):
    code = "invalid_login"
    default_detail = "Invalid credentials"


class ForbiddenError(NoteKeepError):
    status_code = status.HTTP_403_FORBIDDEN
    code = "forbidden"
    default_detail = "Insufficient permissions"


class SelfRemovalError(ForbiddenError):
    """Admins may never remove their own account. Reported as 400."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "self_removal_forbidden"
    default_detail = "You cannot remove your own account"


class QuotaExceededError(ForbiddenError):
    code = "quota_exceeded"
    default_detail = "Note limit reached. Upgrade to Pro for unlimited notes."

    def __init__(self, detail: str | None = None, **extra: Any):
        super().__init__(detail, limit_reached=True, **extra)


class QuotaBlocksTransitionError(ForbiddenError):
    code = "quota_blocks_transition"

    def __init__(self, current_count: int, limit: int):
        super().__init__(
            f"Cannot downgrade: tenant has {current_count} notes, "
            f"the free plan allows {limit}. Delete notes and try again.",
            needs_action=True,
            current_count=current_count,
            limit=limit,
        )


class NotFoundError(NoteKeepError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"
    default_detail = "Not found"


class ConflictError(NoteKeepError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "conflict"
    default_detail = "Resource already exists"


class InvalidTransitionError(ConflictError):
    code = "invalid_transition"
    default_detail = "Tenant is already on the requested plan"


class InternalError(NoteKeepError):
    pass


def _error_response(exc: NoteKeepError) -> JSONResponse:
    content = exc.to_dict()
    content["request_id"] = correlation_id.get()
    return JSONResponse(status_code=exc.status_code, content=content)


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers that include request_id in responses."""

    @app.exception_handler(NoteKeepError)
    async def notekeep_error_handler(request: Request, exc: NoteKeepError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("Request failed", error=exc.code, path=request.url.path)
        return _error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = jsonable_encoder(exc.errors(), exclude={"ctx", "input", "url"})
        return _error_response(InvalidInputError("Validation failed", errors=errors))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "success": False,
                "error": "http_error",
                "detail": exc.detail,
                "request_id": correlation_id.get(),
            },
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        request_id = correlation_id.get()
        logger.exception(
            "Unhandled exception",
            exc_info=exc,
            request_id=request_id,
            path=request.url.path,
        )
        detail = str(exc) if get_settings().debug else InternalError.default_detail
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "success": False,
                "error": InternalError.code,
                "detail": detail,
                "request_id": request_id,
            },
        )
