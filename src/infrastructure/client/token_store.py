"""
Token Store - estado de autenticação do cliente.

Guarda o par de tokens e o usuário logado. Quando um caminho é informado,
o estado é persistido em JSON e recarregado na próxima execução.
"""
import json
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Union
from loguru import logger


class TokenStore:
    """Tokens de acesso/refresh + usuário, com persistência opcional."""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path else None
        self.access_token: Optional[str] = None
        self.refresh_token: Optional[str] = None
        self.user: Optional[Dict[str, Any]] = None
        self._lock = threading.RLock()
        if self.path is not None:
            self.load()

    @property
    def is_authenticated(self) -> bool:
        return self.access_token is not None

    def set_tokens(
        self,
        access_token: str,
        refresh_token: str,
        user: Optional[Dict[str, Any]] = None
    ) -> None:
        with self._lock:
            self.access_token = access_token
            self.refresh_token = refresh_token
            if user is not None:
                self.user = user
            self._persist()

    def clear(self) -> None:
        with self._lock:
            self.access_token = None
            self.refresh_token = None
            self.user = None
            if self.path is not None and self.path.exists():
                self.path.unlink()
        logger.debug("Auth state cleared")

    def load(self) -> bool:
        """
        Carrega o estado salvo.

        Returns:
            bool: True se havia tokens válidos no arquivo
        """
        if self.path is None or not self.path.exists():
            return False
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                state = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable auth state {self.path}: {e}")
            return False
        if not isinstance(state, dict):
            logger.warning(f"Ignoring malformed auth state {self.path}: expected an object")
            return False

        with self._lock:
            self.access_token = state.get("accessToken")
            self.refresh_token = state.get("refreshToken")
            self.user = state.get("user")
        return self.is_authenticated

    def _persist(self) -> None:
        if self.path is None:
            return
        state = {
            "accessToken": self.access_token,
            "refreshToken": self.refresh_token,
            "user": self.user
        }
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(state, f, indent=2)
