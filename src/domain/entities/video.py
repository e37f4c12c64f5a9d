"""
Entity: Video
Representa um vídeo (gravação enviada ou vídeo demo) com transcrição e legendas.
Os campos de processamento são apenas informativos: não existe pipeline real.
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional
import uuid

from src.domain.value_objects import ProcessingStage, VideoStatus


@dataclass(frozen=True)
class Caption:
    """Segmento de legenda com timestamps em segundos."""

    id: str
    start: float
    end: float
    text: str

    def __post_init__(self):
        if self.start < 0:
            raise ValueError("Caption start must be non-negative")
        if self.end < self.start:
            raise ValueError("Caption end must not precede start")

    @property
    def duration(self) -> float:
        return self.end - self.start

    def to_dict(self) -> dict:
        return {"id": self.id, "start": self.start, "end": self.end, "text": self.text}


@dataclass(frozen=True)
class Transcript:
    original_text: str = ""
    enhanced_text: Optional[str] = None

    def to_dict(self) -> dict:
        return {"originalText": self.original_text, "enhancedText": self.enhanced_text}


@dataclass(frozen=True)
class OriginalFile:
    """Arquivo de origem do vídeo."""

    url: str
    format: str
    size: int
    duration: Optional[float] = None

    def to_dict(self) -> dict:
        return {
            "url": self.url,
            "duration": self.duration,
            "format": self.format,
            "size": self.size
        }


@dataclass
class ProcessingStatus:
    stage: ProcessingStage = ProcessingStage.COMPLETE
    progress: int = 100

    def __post_init__(self):
        if not 0 <= self.progress <= 100:
            raise ValueError("Progress must be between 0 and 100")

    def to_dict(self) -> dict:
        return {"stage": self.stage.value, "progress": self.progress}


@dataclass
class Video:
    """Entidade que representa um vídeo."""

    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    title: str = ""
    description: Optional[str] = None
    project: Optional[str] = None
    owner: str = "1"
    status: VideoStatus = VideoStatus.READY
    original_file: Optional[OriginalFile] = None
    transcript: Optional[Transcript] = None
    captions: List[Caption] = field(default_factory=list)
    keyframes: List[dict] = field(default_factory=list)
    processing: ProcessingStatus = field(default_factory=ProcessingStatus)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_ready(self) -> bool:
        return self.status == VideoStatus.READY

    def matches(self, search: str) -> bool:
        """Busca case-insensitive em título e descrição."""
        needle = search.lower()
        return needle in self.title.lower() or needle in (self.description or "").lower()

    def to_summary_dict(self) -> dict:
        """Formato usado nas listagens."""
        return {
            "_id": self.id,
            "title": self.title,
            "description": self.description,
            "project": self.project,
            "status": self.status.value,
            "createdAt": self.created_at.isoformat(),
            "processing": self.processing.to_dict()
        }

    def to_dict(self) -> dict:
        """Formato detalhado (GET /videos/{id})."""
        data = self.to_summary_dict()
        data.update({
            "originalFile": self.original_file.to_dict() if self.original_file else None,
            "transcript": self.transcript.to_dict() if self.transcript else None,
            "captions": [caption.to_dict() for caption in self.captions],
            "metadata": {"keyframes": list(self.keyframes)},
            "updatedAt": self.updated_at.isoformat()
        })
        return data
