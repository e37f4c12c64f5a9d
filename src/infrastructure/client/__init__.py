"""HTTP client package."""
from src.infrastructure.client.token_store import TokenStore
from src.infrastructure.client.api_client import CluesoApiClient, ProgressStream
from src.infrastructure.client.recording_uploader import RecordingUploader

__all__ = ["TokenStore", "CluesoApiClient", "ProgressStream", "RecordingUploader"]
