"""
Exceções customizadas para a aplicação.
Cada exceção de domínio é mapeada para um status HTTP na camada de apresentação.
"""
from typing import Any, Dict, List, Optional


class DomainException(Exception):
    """Exceção base para erros de domínio."""

    status_code: int = 500
    error: str = "Internal server error"
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: Optional[str] = None, details: Optional[Any] = None):
        self.message = message or self.error
        self.details = details
        super().__init__(self.message)


class ValidationError(DomainException):
    """Erro de validação."""

    status_code = 400
    error = "Validation error"
    code = "VALIDATION_ERROR"


class AuthenticationError(DomainException):
    """Token ausente, inválido ou expirado."""

    status_code = 401
    error = "Authentication required"
    code = "AUTHENTICATION_ERROR"


class ResourceNotFoundError(DomainException):
    """Recurso não encontrado."""

    status_code = 404
    error = "Resource not found"
    code = "NOT_FOUND"

    def __init__(self, resource: str, resource_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource} not found")


class StorageError(DomainException):
    """Erro de armazenamento."""


class UploadError(DomainException):
    """Erro durante upload de gravação."""

    status_code = 400
    error = "Upload failed"
    code = "VALIDATION_ERROR"


class UnsupportedFormatError(UploadError):
    """Formato de arquivo não suportado."""

    def __init__(self, extension: str, allowed: List[str]):
        self.extension = extension
        self.allowed = allowed
        super().__init__(
            f"Unsupported file format '{extension}'. Allowed: {', '.join(allowed)}"
        )


class FileTooLargeError(UploadError):
    """Arquivo excede tamanho máximo permitido."""

    def __init__(self, size_bytes: int, max_bytes: int):
        self.size_bytes = size_bytes
        self.max_bytes = max_bytes
        super().__init__(
            f"File too large: exceeds maximum of {max_bytes / (1024 * 1024):.0f}MB"
        )


class InvalidStateTransitionError(DomainException):
    """Transição de estado inválida na sessão de gravação."""

    status_code = 409
    error = "Invalid state transition"
    code = "CONFLICT"

    def __init__(self, current: str, action: str):
        self.current = current
        self.action = action
        super().__init__(f"Cannot {action} while recording is '{current}'")


class NetworkError(DomainException):
    """Erro de rede ao comunicar com a API."""

    status_code = 503
    error = "Network error"

    def __init__(self, service: str, reason: str):
        self.service = service
        self.reason = reason
        super().__init__(f"Network error communicating with {service}: {reason}")


class ApiError(DomainException):
    """Resposta de erro (envelope success=false) recebida pelo cliente HTTP."""

    def __init__(
        self,
        status_code: int,
        error: str,
        message: Optional[str] = None,
        details: Optional[Any] = None
    ):
        self.status_code = status_code
        self.error = error
        super().__init__(message or error, details)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status_code": self.status_code,
            "error": self.error,
            "message": self.message,
            "details": self.details
        }
