"""Tradução de exceções para respostas JSON `{"error": mensagem}`.

Toda falha é capturada na borda; nenhuma derruba o processo.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from utils.errors import (
    ConfigurationError,
    InferenceError,
    MalformedModelOutputError,
    NotFoundError,
    StoreUnavailableError,
    ValidationError,
)

logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "Corpo da requisição inválido."
INTERNAL_ERROR_MESSAGE = "Erro interno do servidor."

ERROR_STATUS: dict[type[Exception], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConfigurationError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    InferenceError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    MalformedModelOutputError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    StoreUnavailableError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _status_for(exc: Exception) -> int:
    for exc_class in type(exc).__mro__:
        if exc_class in ERROR_STATUS:
            return ERROR_STATUS[exc_class]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def _handle_known_error(request: Request, exc: Exception) -> JSONResponse:
    status_code = _status_for(exc)
    log = logger.warning if status_code >= 500 else logger.info
    log(
        "request_failed",
        extra={
            "path": request.url.path,
            "method": request.method,
            "status_code": status_code,
            "error_type": type(exc).__name__,
        },
    )
    return error_response(status_code, str(exc))


async def _handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(
        "request_body_invalid",
        extra={"path": request.url.path, "error_count": len(exc.errors())},
    )
    return error_response(status.HTTP_400_BAD_REQUEST, INVALID_BODY_MESSAGE)


async def _handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "request_unhandled_error",
        extra={"path": request.url.path, "method": request.method},
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    """Registra os handlers de erro na aplicação."""
    for exc_class in ERROR_STATUS:
        app.add_exception_handler(exc_class, _handle_known_error)
    app.add_exception_handler(RequestValidationError, _handle_request_validation)
    app.add_exception_handler(Exception, _handle_unexpected)
