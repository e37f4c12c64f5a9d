"""
Cliente HTTP da API Clueso.

Anexa o bearer token, renova a sessão uma única vez ao receber 401 e
converte o envelope {success, data, error} em exceções de domínio.
"""
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple
import httpx
from loguru import logger

from src.domain.exceptions import ApiError, AuthenticationError, NetworkError
from src.infrastructure.client.token_store import TokenStore

REFRESH_PATH = "/auth/refresh"
SERVICE_NAME = "Clueso API"

ProgressCallback = Callable[[int], None]


class ProgressStream:
    """
    Corpo de requisição que reporta o progresso do envio (0..100).

    Não é um generator: cada iteração recomeça do início, então o mesmo
    corpo pode ser reenviado depois de um refresh de token.
    """

    def __init__(
        self,
        body: bytes,
        on_progress: Optional[ProgressCallback] = None,
        chunk_size: int = 64 * 1024
    ):
        self.body = body
        self.on_progress = on_progress
        self.chunk_size = chunk_size

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self) -> Iterator[bytes]:
        total = len(self.body)
        if total == 0:
            self._report(100)
            return

        self._report(0)
        last = 0
        sent = 0
        for offset in range(0, total, self.chunk_size):
            chunk = self.body[offset:offset + self.chunk_size]
            yield chunk
            sent += len(chunk)
            percent = sent * 100 // total
            if percent != last:
                self._report(percent)
                last = percent

    def _report(self, percent: int) -> None:
        if self.on_progress is not None:
            self.on_progress(percent)


class CluesoApiClient:
    """Cliente síncrono da API (httpx)."""

    def __init__(
        self,
        base_url: str = "http://localhost:5000/api/v1",
        token_store: Optional[TokenStore] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None
    ):
        self.base_url = base_url.rstrip("/")
        self.token_store = token_store or TokenStore()
        self._client = httpx.Client(base_url=self.base_url, timeout=timeout, transport=transport)

    def __enter__(self) -> "CluesoApiClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    # ----- Core -----

    def request(
        self,
        method: str,
        path: str,
        headers: Optional[Dict[str, str]] = None,
        **kwargs
    ) -> Dict[str, Any]:
        """
        Executa a requisição e retorna o envelope decodificado.

        Raises:
            AuthenticationError: sessão expirada e refresh falhou
            ApiError: resposta com success=false ou status de erro
            NetworkError: falha de transporte
        """
        response = self._send(method, path, headers, **kwargs)

        if (
            response.status_code == 401
            and path != REFRESH_PATH
            and self.token_store.refresh_token
        ):
            logger.info(f"401 on {method} {path}, refreshing session")
            self._refresh_tokens()
            response = self._send(method, path, headers, **kwargs)

        return self._parse(response)

    def _send(
        self,
        method: str,
        path: str,
        headers: Optional[Dict[str, str]] = None,
        **kwargs
    ) -> httpx.Response:
        merged = dict(headers or {})
        if self.token_store.access_token:
            merged["Authorization"] = f"Bearer {self.token_store.access_token}"
        try:
            return self._client.request(method, path, headers=merged, **kwargs)
        except httpx.TransportError as e:
            logger.error(f"Request {method} {path} failed: {e}")
            raise NetworkError(SERVICE_NAME, str(e)) from e

    def _refresh_tokens(self) -> None:
        refresh_token = self.token_store.refresh_token
        try:
            response = self._client.post(REFRESH_PATH, json={"refreshToken": refresh_token})
        except httpx.TransportError as e:
            self.token_store.clear()
            raise AuthenticationError(f"Session refresh failed: {e}") from e

        if response.status_code != 200:
            self.token_store.clear()
            raise AuthenticationError("Session expired, please log in again")

        try:
            data = response.json()["data"]
            tokens = data["tokens"]
            access_token, new_refresh_token = tokens["accessToken"], tokens["refreshToken"]
        except (ValueError, KeyError, TypeError) as e:
            self.token_store.clear()
            raise AuthenticationError("Session refresh returned an invalid response") from e

        self.token_store.set_tokens(access_token, new_refresh_token, data.get("user"))
        logger.info("Session refreshed")

    @staticmethod
    def _parse(response: httpx.Response) -> Dict[str, Any]:
        try:
            payload = response.json()
        except ValueError:
            raise ApiError(response.status_code, response.reason_phrase or "Invalid response")

        if response.is_error or not payload.get("success", False):
            raise ApiError(
                response.status_code,
                payload.get("error") or payload.get("message") or response.reason_phrase,
                payload.get("message"),
                payload.get("details")
            )
        return payload

    def _data(self, method: str, path: str, **kwargs) -> Any:
        return self.request(method, path, **kwargs).get("data")

    # ----- Auth -----

    def login(self, email: str, password: str) -> Dict[str, Any]:
        data = self._data("POST", "/auth/login", json={"email": email, "password": password})
        self._store_session(data)
        return data["user"]

    def register(self, email: str, password: str, first_name: str, last_name: str) -> Dict[str, Any]:
        data = self._data("POST", "/auth/register", json={
            "email": email,
            "password": password,
            "firstName": first_name,
            "lastName": last_name
        })
        self._store_session(data)
        return data["user"]

    def logout(self) -> None:
        try:
            if self.token_store.access_token:
                self.request("POST", "/auth/logout")
        finally:
            self.token_store.clear()

    def me(self) -> Dict[str, Any]:
        return self._data("GET", "/auth/me")

    def _store_session(self, data: Dict[str, Any]) -> None:
        tokens = data["tokens"]
        self.token_store.set_tokens(tokens["accessToken"], tokens["refreshToken"], data.get("user"))

    # ----- Catalog -----

    def health(self) -> Dict[str, Any]:
        return self._data("GET", "/health")

    def list_projects(self, page: int = 1, limit: int = 10) -> Dict[str, Any]:
        return self._data("GET", "/projects", params={"page": page, "limit": limit})

    def get_project(self, project_id: str) -> Dict[str, Any]:
        return self._data("GET", f"/projects/{project_id}")

    def get_project_activity(self, project_id: str) -> Any:
        return self._data("GET", f"/projects/{project_id}/activity")

    def create_project(
        self,
        name: str,
        description: Optional[str] = None,
        workspace_id: Optional[str] = None
    ) -> Dict[str, Any]:
        return self._data("POST", "/projects", json={
            "name": name,
            "description": description,
            "workspaceId": workspace_id
        })

    def list_workspaces(self, page: int = 1, limit: int = 10) -> Dict[str, Any]:
        return self._data("GET", "/workspaces", params={"page": page, "limit": limit})

    def get_workspace(self, workspace_id: str) -> Dict[str, Any]:
        return self._data("GET", f"/workspaces/{workspace_id}")

    def create_workspace(self, name: str, description: Optional[str] = None) -> Dict[str, Any]:
        return self._data("POST", "/workspaces", json={"name": name, "description": description})

    def list_videos(
        self,
        page: int = 1,
        limit: int = 10,
        status: Optional[str] = None,
        project_id: Optional[str] = None
    ) -> Dict[str, Any]:
        params: Dict[str, Any] = {"page": page, "limit": limit}
        if status:
            params["status"] = status
        if project_id:
            params["projectId"] = project_id
        return self._data("GET", "/videos", params=params)

    def get_video(self, video_id: str) -> Dict[str, Any]:
        return self._data("GET", f"/videos/{video_id}")

    def get_video_progress(self, video_id: str) -> Dict[str, Any]:
        return self._data("GET", f"/videos/{video_id}/progress")

    def export_video(self, video_id: str, export_format: str = "mp4", quality: str = "high") -> Dict[str, Any]:
        return self._data("POST", f"/videos/{video_id}/export", json={
            "format": export_format,
            "quality": quality
        })

    def upload_video(
        self,
        data: bytes,
        filename: str,
        title: str,
        project_id: Optional[str] = None,
        mime_type: str = "video/webm",
        on_progress: Optional[ProgressCallback] = None
    ) -> Dict[str, Any]:
        """
        Envia um vídeo em uma única requisição multipart.

        O corpo é montado antes do envio para que o progresso seja
        reportado sobre o tamanho real (Content-Length explícito).
        """
        fields = {"title": title}
        if project_id:
            fields["projectId"] = project_id

        encoded = httpx.Request(
            "POST",
            f"{self.base_url}/videos/upload",
            data=fields,
            files={"video": (filename, data, mime_type)}
        )
        body = encoded.read()
        headers = {
            "Content-Type": encoded.headers["Content-Type"],
            "Content-Length": str(len(body))
        }
        logger.info(f"Uploading {filename} ({len(body)} bytes)")
        return self._data(
            "POST",
            "/videos/upload",
            headers=headers,
            content=ProgressStream(body, on_progress)
        )

    # ----- AI -----

    def enhance_script(self, text: str) -> Dict[str, Any]:
        return self._data("POST", "/ai/enhance-script", json={"text": text})

    def generate_summary(self, text: str) -> Dict[str, Any]:
        return self._data("POST", "/ai/generate-summary", json={"text": text})

    def generate_tags(self, text: str, title: Optional[str] = None) -> Dict[str, Any]:
        return self._data("POST", "/ai/generate-tags", json={"text": text, "title": title})

    def generate_captions(self, text: str) -> Dict[str, Any]:
        return self._data("POST", "/ai/generate-captions", json={"text": text})

    # ----- Misc -----

    def analytics_overview(self) -> Dict[str, Any]:
        return self._data("GET", "/analytics/overview")

    def list_templates(self, category: Optional[str] = None, search: Optional[str] = None) -> Dict[str, Any]:
        params = {k: v for k, v in {"category": category, "search": search}.items() if v}
        return self._data("GET", "/templates", params=params)

    def featured_templates(self) -> List[Dict[str, Any]]:
        return self._data("GET", "/templates/featured")["templates"]

    def popular_templates(self) -> List[Dict[str, Any]]:
        return self._data("GET", "/templates/popular")["templates"]

    def get_template(self, template_id: str) -> Dict[str, Any]:
        return self._data("GET", f"/templates/{template_id}")["template"]

    def use_template(
        self,
        template_id: str,
        project_name: Optional[str] = None,
        project_description: Optional[str] = None
    ) -> Dict[str, Any]:
        body = {"projectName": project_name, "projectDescription": project_description}
        return self._data(
            "POST",
            f"/templates/{template_id}/use",
            json={k: v for k, v in body.items() if v}
        )

    def rate_template(self, template_id: str, rating: float) -> Dict[str, Any]:
        return self._data("POST", f"/templates/{template_id}/rate", json={"rating": rating})

    def search(self, query: str, limit: Optional[int] = None, types: Optional[str] = None) -> Dict[str, Any]:
        params: Dict[str, Any] = {"q": query}
        if limit:
            params["limit"] = limit
        if types:
            params["types"] = types
        return self._data("GET", "/search", params=params)

    # ----- Feedback -----

    def submit_feedback(self, message: str, feedback_type: str = "general", priority: str = "medium") -> Dict[str, Any]:
        return self._data("POST", "/feedback", json={
            "message": message,
            "type": feedback_type,
            "priority": priority
        })

    def list_feedback(
        self,
        status: str = "all",
        feedback_type: str = "all",
        page: int = 1,
        limit: int = 50
    ) -> Dict[str, Any]:
        return self._data("GET", "/feedback", params={
            "status": status,
            "type": feedback_type,
            "page": page,
            "limit": limit
        })

    def feedback_stats(self) -> Dict[str, Any]:
        return self._data("GET", "/feedback/stats")

    def update_feedback_status(self, feedback_id: str, status: str) -> Dict[str, Any]:
        return self._data("PUT", f"/feedback/{feedback_id}/status", json={"status": status})

    # ----- User progress -----

    def user_progress(self) -> Dict[str, Any]:
        return self._data("GET", "/user-progress")

    def update_onboarding_step(self, step: int) -> Dict[str, Any]:
        return self._data("PUT", "/user-progress/onboarding", json={"step": step})

    def complete_tutorial(self, tutorial_id: str) -> Tuple[Dict[str, Any], List[str]]:
        """Returns: (progresso, conquistas novas)"""
        payload = self.request("POST", "/user-progress/tutorial/complete", json={"tutorialId": tutorial_id})
        return payload.get("data"), payload.get("newAchievements", [])

    def update_preferences(
        self,
        show_tutorial_hints: Optional[bool] = None,
        skip_intro_videos: Optional[bool] = None
    ) -> Dict[str, Any]:
        preferences = {"showTutorialHints": show_tutorial_hints, "skipIntroVideos": skip_intro_videos}
        return self._data("PUT", "/user-progress/preferences", json={
            "preferences": {k: v for k, v in preferences.items() if v is not None}
        })

    def tutorials(self) -> List[Dict[str, Any]]:
        return self._data("GET", "/user-progress/tutorials")

    def help_articles(self, category: Optional[str] = None, search: Optional[str] = None) -> List[Dict[str, Any]]:
        params = {k: v for k, v in {"category": category, "search": search}.items() if v}
        return self._data("GET", "/user-progress/help", params=params)
