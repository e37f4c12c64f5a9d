"""
Middleware para logging de requisições.
Registra início e fim de cada requisição HTTP e o tempo de processamento.
"""
import time
import uuid
from typing import Callable
from fastapi import Request, Response
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware para logging de requisições HTTP."""

    async def dispatch(
        self,
        request: Request,
        call_next: Callable
    ) -> Response:
        """
        Processa a requisição e registra logs.

        Adiciona os headers X-Request-ID e X-Process-Time à resposta.
        """
        start_time = time.time()
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex[:12]
        request.state.request_id = request_id

        client_host = request.client.host if request.client else "unknown"
        logger.info(
            f"Request started: {request.method} {request.url.path} "
            f"from {client_host} [{request_id}]"
        )

        try:
            response = await call_next(request)
        except Exception as e:
            process_time = time.time() - start_time
            logger.error(
                f"Request failed: {request.method} {request.url.path} "
                f"error={str(e)} time={process_time:.3f}s [{request_id}]"
            )
            raise

        process_time = time.time() - start_time
        logger.info(
            f"Request completed: {request.method} {request.url.path} "
            f"status={response.status_code} time={process_time:.3f}s [{request_id}]"
        )

        response.headers["X-Process-Time"] = f"{process_time:.4f}"
        response.headers["X-Request-ID"] = request_id
        return response
