"""
Rotas de sistema.
Banner da API e health check.
"""
import time
from datetime import datetime, timezone
from fastapi import APIRouter, Depends

from src.config import settings
from src.application.dtos import ApiResponse, HealthDataDTO
from src.domain.interfaces import IStorageService
from src.infrastructure.realtime import ConnectionManager
from src.presentation.api.dependencies import get_connection_manager, get_storage_service

router = APIRouter(tags=["System"])

# Tempo de início da aplicação
_start_time = time.time()


@router.get("/", summary="API banner")
async def root() -> dict:
    return ApiResponse.ok(
        data={
            "name": settings.app_name,
            "version": settings.app_version,
            "docs": "/docs",
            "health": f"{settings.api_prefix}/health"
        },
        message=f"{settings.app_name} is running"
    ).to_content()


@router.get(
    f"{settings.api_prefix}/health",
    summary="Health check",
    description="Returns the API health status, uptime and storage usage"
)
async def health_check(
    storage: IStorageService = Depends(get_storage_service),
    manager: ConnectionManager = Depends(get_connection_manager)
) -> dict:
    """
    Verifica o status de saúde da API.

    Retorna versão, tempo de atividade, uso do diretório de uploads e
    número de clientes conectados ao canal de feedback.
    """
    storage_usage = await storage.get_storage_usage()
    health = HealthDataDTO(
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=settings.app_version,
        environment=settings.app_environment,
        uptime_seconds=round(time.time() - _start_time, 2),
        storage_usage=storage_usage,
        realtime=manager.get_stats()
    )
    return ApiResponse.ok(data=health.model_dump(), message="API is healthy").to_content()
