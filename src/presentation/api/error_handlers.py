"""
Exception handlers.
Convertem exceções em respostas no envelope {success: false, error, ...}.
"""
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.application.dtos import ApiResponse
from src.domain.exceptions import DomainException


def _envelope(status_code: int, response: ApiResponse, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=response.to_content(), headers=headers)


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    """Erros de domínio: status e código definidos pela própria exceção."""
    if exc.status_code >= 500:
        logger.error(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}")
    else:
        logger.warning(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}")

    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return _envelope(
        exc.status_code,
        ApiResponse.fail(error=exc.message, code=exc.code),
        headers=headers
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Erros de validação do FastAPI/pydantic -> 400 com detalhes por campo."""
    details = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path", "form")]
        details.append({
            "field": ".".join(location) or "body",
            "message": error.get("msg", "Invalid value")
        })

    logger.warning(f"Validation error on {request.method} {request.url.path}: {details}")
    return _envelope(
        status.HTTP_400_BAD_REQUEST,
        ApiResponse.fail(error="Validation error", code="VALIDATION_ERROR", details=details)
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return _envelope(
            status.HTTP_404_NOT_FOUND,
            ApiResponse.fail(
                error="Route not found",
                message=f"Route {request.method} {request.url.path} not found",
                code="NOT_FOUND"
            )
        )
    return _envelope(
        exc.status_code,
        ApiResponse.fail(error=str(exc.detail)),
        headers=getattr(exc, "headers", None)
    )


async def rate_limit_exception_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    logger.warning(f"⚠️ Rate limit exceeded: {request.method} {request.url.path} ({exc.detail})")
    return _envelope(
        status.HTTP_429_TOO_MANY_REQUESTS,
        ApiResponse.fail(
            error="Too many requests",
            message=f"Rate limit exceeded: {exc.detail}",
            code="RATE_LIMITED"
        )
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handler global para exceções não tratadas."""
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}: {str(exc)}")
    return _envelope(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ApiResponse.fail(error="Internal server error", code="INTERNAL_ERROR")
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
