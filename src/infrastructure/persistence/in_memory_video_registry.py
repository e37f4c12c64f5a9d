"""
Registro em memória dos vídeos enviados.
"""
import threading
from collections import OrderedDict
from typing import List, Optional

from src.domain.entities import Video
from src.domain.interfaces import IVideoRegistry


class InMemoryVideoRegistry(IVideoRegistry):

    def __init__(self):
        self._videos: "OrderedDict[str, Video]" = OrderedDict()
        self._lock = threading.RLock()

    def add(self, video: Video) -> Video:
        with self._lock:
            self._videos[video.id] = video
        return video

    def get(self, video_id: str) -> Optional[Video]:
        with self._lock:
            return self._videos.get(video_id)

    def list(self) -> List[Video]:
        with self._lock:
            return list(reversed(self._videos.values()))

    def clear(self) -> None:
        with self._lock:
            self._videos.clear()
