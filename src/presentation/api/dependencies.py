"""
Dependency Injection Container.
Gerencia a criação e injeção de dependências seguindo SOLID.

Todos os serviços são SINGLETON: repositórios em memória e o canal de
tempo real precisam ser os mesmos em todas as requisições.
"""
from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from loguru import logger

from src.config import settings
from src.domain.entities import User
from src.domain.exceptions import AuthenticationError
from src.domain.interfaces import (
    IFeedbackRepository,
    IStorageService,
    ITokenService,
    IUserProgressRepository,
    IVideoRegistry
)
from src.infrastructure.demo import DemoCatalog
from src.infrastructure.persistence import (
    InMemoryFeedbackRepository,
    InMemoryUserProgressRepository,
    InMemoryVideoRegistry
)
from src.infrastructure.realtime import ConnectionManager
from src.infrastructure.security import InMemoryTokenService
from src.infrastructure.storage import LocalStorageService, VideoUploadService
from src.application.use_cases import (
    AuthUseCase,
    CleanupOldUploadsUseCase,
    ContentEnhancementUseCase,
    FeedbackStatsUseCase,
    GlobalSearchUseCase,
    ListFeedbackUseCase,
    SubmitFeedbackUseCase,
    TemplateLibraryUseCase,
    UpdateFeedbackStatusUseCase,
    UploadRecordingUseCase,
    UserProgressUseCase,
    VideoCatalogUseCase
)

UPLOADS_URL_PREFIX = "/uploads"


class Container:
    """
    Container de injeção de dependências com SINGLETON pattern.
    Cada serviço é criado na primeira solicitação e reutilizado depois.
    """

    _storage_service: IStorageService = None
    _feedback_repository: IFeedbackRepository = None
    _video_registry: IVideoRegistry = None
    _user_progress_repository: IUserProgressRepository = None
    _token_service: ITokenService = None
    _connection_manager: ConnectionManager = None
    _catalog: DemoCatalog = None

    @classmethod
    def get_storage_service(cls) -> IStorageService:
        if cls._storage_service is None:
            logger.debug("[CONTAINER] Creating StorageService singleton")
            cls._storage_service = LocalStorageService(upload_dir=settings.upload_dir)
        return cls._storage_service

    @classmethod
    def get_feedback_repository(cls) -> IFeedbackRepository:
        if cls._feedback_repository is None:
            logger.debug("[CONTAINER] Creating FeedbackRepository singleton")
            cls._feedback_repository = InMemoryFeedbackRepository()
        return cls._feedback_repository

    @classmethod
    def get_video_registry(cls) -> IVideoRegistry:
        if cls._video_registry is None:
            cls._video_registry = InMemoryVideoRegistry()
        return cls._video_registry

    @classmethod
    def get_user_progress_repository(cls) -> IUserProgressRepository:
        if cls._user_progress_repository is None:
            cls._user_progress_repository = InMemoryUserProgressRepository()
        return cls._user_progress_repository

    @classmethod
    def get_token_service(cls) -> ITokenService:
        if cls._token_service is None:
            logger.debug("[CONTAINER] Creating TokenService singleton")
            cls._token_service = InMemoryTokenService(
                access_ttl_seconds=settings.access_token_ttl_minutes * 60,
                refresh_ttl_seconds=settings.refresh_token_ttl_days * 24 * 3600
            )
        return cls._token_service

    @classmethod
    def get_connection_manager(cls) -> ConnectionManager:
        """Canal de tempo real compartilhado pelas rotas de feedback e pelo WebSocket."""
        if cls._connection_manager is None:
            logger.debug("[CONTAINER] Creating ConnectionManager singleton")
            cls._connection_manager = ConnectionManager()
        return cls._connection_manager

    @classmethod
    def get_catalog(cls) -> DemoCatalog:
        if cls._catalog is None:
            cls._catalog = DemoCatalog()
        return cls._catalog

    @classmethod
    def reset(cls) -> None:
        """Descarta todos os singletons (usado nos testes)."""
        cls._storage_service = None
        cls._feedback_repository = None
        cls._video_registry = None
        cls._user_progress_repository = None
        cls._token_service = None
        cls._connection_manager = None
        cls._catalog = None


# Funções de dependência para FastAPI

def get_storage_service() -> IStorageService:
    return Container.get_storage_service()


def get_connection_manager() -> ConnectionManager:
    return Container.get_connection_manager()


def get_catalog() -> DemoCatalog:
    return Container.get_catalog()


def get_auth_use_case() -> AuthUseCase:
    return AuthUseCase(Container.get_token_service(), Container.get_catalog())


def get_video_catalog_use_case() -> VideoCatalogUseCase:
    return VideoCatalogUseCase(Container.get_catalog(), Container.get_video_registry())


def get_upload_recording_use_case() -> UploadRecordingUseCase:
    upload_service = VideoUploadService(
        storage_service=Container.get_storage_service(),
        allowed_formats=settings.get_allowed_formats(),
        max_size_bytes=settings.max_upload_size_bytes
    )
    return UploadRecordingUseCase(
        upload_service=upload_service,
        registry=Container.get_video_registry(),
        public_prefix=UPLOADS_URL_PREFIX
    )


def get_template_library_use_case() -> TemplateLibraryUseCase:
    return TemplateLibraryUseCase(Container.get_catalog())


def get_user_progress_use_case() -> UserProgressUseCase:
    return UserProgressUseCase(Container.get_user_progress_repository(), Container.get_catalog())


def get_content_enhancement_use_case() -> ContentEnhancementUseCase:
    return ContentEnhancementUseCase()


def get_global_search_use_case() -> GlobalSearchUseCase:
    return GlobalSearchUseCase(Container.get_catalog(), Container.get_video_registry())


def get_submit_feedback_use_case() -> SubmitFeedbackUseCase:
    return SubmitFeedbackUseCase(
        Container.get_feedback_repository(),
        Container.get_connection_manager()
    )


def get_list_feedback_use_case() -> ListFeedbackUseCase:
    return ListFeedbackUseCase(Container.get_feedback_repository())


def get_feedback_stats_use_case() -> FeedbackStatsUseCase:
    return FeedbackStatsUseCase(Container.get_feedback_repository())


def get_update_feedback_status_use_case() -> UpdateFeedbackStatusUseCase:
    return UpdateFeedbackStatusUseCase(
        Container.get_feedback_repository(),
        Container.get_connection_manager()
    )


def get_cleanup_use_case() -> CleanupOldUploadsUseCase:
    return CleanupOldUploadsUseCase(
        storage_service=Container.get_storage_service(),
        max_age_hours=settings.max_upload_age_hours
    )


# Autenticação

bearer_scheme = HTTPBearer(auto_error=False)


def get_access_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)
) -> str:
    """Extrai o bearer token do header Authorization."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Access token required")
    return credentials.credentials


def get_current_user(access_token: str = Depends(get_access_token)) -> User:
    """
    Dependency para rotas protegidas.

    Raises:
        AuthenticationError: token ausente, inválido ou expirado (401)
    """
    return Container.get_token_service().authenticate(access_token)
