"""
FastAPI Application - Main Entry Point
Configuração principal da API seguindo Clean Architecture e SOLID.
"""
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from loguru import logger

from src.config import settings
from src.presentation.api.routes import (
    ai,
    auth,
    catalog,
    feedback,
    projects,
    system,
    templates,
    user_progress,
    videos,
    workspaces
)
from src.presentation.api.middlewares import LoggingMiddleware
from src.presentation.api.dependencies import (
    UPLOADS_URL_PREFIX,
    get_cleanup_use_case,
    get_connection_manager
)
from src.presentation.api.error_handlers import register_exception_handlers
from src.presentation.api.rate_limit import limiter


# Configurar logging
logger.remove()
logger.add(
    sys.stderr,
    format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
    level=settings.log_level,
    serialize=settings.log_format == "json"
)

if settings.log_file:
    try:
        Path(settings.log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            settings.log_file,
            rotation="100 MB",
            retention="10 days",
            level=settings.log_level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            serialize=settings.log_format == "json"
        )
        logger.info(f"File logging configured: {settings.log_file}")
    except OSError as e:
        logger.error(f"Failed to configure file logging: {e}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Gerencia o ciclo de vida da aplicação.
    Executado no startup e shutdown.
    """
    # Startup
    logger.info("=" * 60)
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.app_environment}")
    logger.info(f"Upload Directory: {settings.upload_dir}")
    logger.info(f"Allowed Formats: {settings.allowed_video_formats} (max {settings.max_upload_size_mb}MB)")
    logger.info(f"Rate Limiting: {'enabled' if settings.enable_rate_limit else 'disabled'}")
    logger.info("=" * 60)

    if settings.cleanup_on_startup:
        logger.info("Performing startup cleanup...")
        result = await get_cleanup_use_case().execute()
        logger.info(f"Startup cleanup completed: {result}")

    logger.info("Application startup complete!")

    yield

    # Shutdown
    stats = get_connection_manager().get_stats()
    logger.info(f"Feedback channel stats: {stats}")
    logger.info("Application shutdown complete")
    logger.info("=" * 60)


# Criar aplicação FastAPI
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    API REST do Clueso: projetos, vídeos, gravações de tela e feedback.

    ## Características

    * 🎥 Upload de gravações de tela (multipart)
    * 🤖 Endpoints de IA simulados (roteiro, resumo, tags, legendas)
    * 💬 Feedback com atualização em tempo real via WebSocket (/ws/feedback)
    * 🔐 Autenticação com access/refresh tokens
    * 🧹 Limpeza automática de uploads antigos
    """,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Rate limiting (slowapi)
app.state.limiter = limiter

register_exception_handlers(app)

# Configurar CORS
if settings.enable_cors:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    logger.info(f"CORS enabled: {settings.get_cors_origins()}")

# Adicionar middleware de logging
app.add_middleware(LoggingMiddleware)

# Registrar rotas
app.include_router(system.router)
app.include_router(auth.router)
app.include_router(projects.router)
app.include_router(workspaces.router)
app.include_router(videos.router)
app.include_router(ai.router)
app.include_router(catalog.router)
app.include_router(templates.router)
app.include_router(user_progress.router)
app.include_router(feedback.router)
app.include_router(feedback.ws_router)

if settings.serve_uploads:
    Path(settings.upload_dir).mkdir(parents=True, exist_ok=True)
    app.mount(UPLOADS_URL_PREFIX, StaticFiles(directory=settings.upload_dir), name="uploads")

logger.info("Routes registered successfully")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.presentation.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level.lower()
    )
