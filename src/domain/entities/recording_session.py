"""
Entity: RecordingSession
Máquina de estados de uma gravação de tela.

Fluxo:
    idle -> starting -> recording <-> paused -> stopping -> stopped

`stopped` é o estado "idle com resultado": o blob montado fica disponível
para download ou upload até ser descartado ou até uma nova gravação começar.
"""
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import List, Optional

from loguru import logger

from src.domain.exceptions import InvalidStateTransitionError

RECORDING_MIME_TYPE = "video/webm"


class RecordingState(str, Enum):
    IDLE = "idle"
    STARTING = "starting"
    RECORDING = "recording"
    PAUSED = "paused"
    STOPPING = "stopping"
    STOPPED = "stopped"


@dataclass(frozen=True)
class RecordingSettings:
    """Preferências de captura."""

    include_audio: bool = True
    audio_source: str = "system"
    quality: str = "high"

    def __post_init__(self):
        if self.audio_source not in ("system", "microphone", "both"):
            raise ValueError("audio_source must be 'system', 'microphone' or 'both'")
        if self.quality not in ("low", "medium", "high"):
            raise ValueError("quality must be 'low', 'medium' or 'high'")

    @property
    def frame_rate(self) -> int:
        return {"high": 30, "medium": 24, "low": 15}[self.quality]

    @property
    def wants_microphone(self) -> bool:
        return self.include_audio and self.audio_source != "system"


@dataclass(frozen=True)
class RecordedBlob:
    """Resultado da gravação: chunks concatenados em um único container."""

    data: bytes
    duration_seconds: float
    has_audio: bool
    mime_type: str = RECORDING_MIME_TYPE

    @property
    def size(self) -> int:
        return len(self.data)

    def default_filename(self, now: Optional[datetime] = None) -> str:
        """Nome usado no download: screen-recording-YYYY-MM-DDTHH-MM-SS.webm"""
        now = now or datetime.now()
        stamp = now.isoformat(timespec="seconds").replace(":", "-")
        return f"screen-recording-{stamp}.webm"


def format_duration(seconds: float) -> str:
    """Formata segundos como MM:SS."""
    total = int(seconds)
    mins, secs = divmod(total, 60)
    return f"{mins:02d}:{secs:02d}"


class RecordingSession:
    """
    Estado de uma gravação de tela.

    A captura em si é feita pela plataforma (navegador). Esta classe só
    acompanha as transições, conta a duração e monta o resultado final
    a partir dos chunks recebidos.
    """

    def __init__(self, settings: Optional[RecordingSettings] = None):
        self.settings = settings or RecordingSettings()
        self.state = RecordingState.IDLE
        self.duration: float = 0.0
        self.has_audio = False
        self.result: Optional[RecordedBlob] = None
        self._chunks: List[bytes] = []

    @property
    def is_capturing(self) -> bool:
        return self.state in (RecordingState.RECORDING, RecordingState.PAUSED)

    @property
    def is_paused(self) -> bool:
        return self.state == RecordingState.PAUSED

    @property
    def buffered_bytes(self) -> int:
        return sum(len(chunk) for chunk in self._chunks)

    def _require(self, action: str, *allowed: RecordingState) -> None:
        if self.state not in allowed:
            raise InvalidStateTransitionError(self.state.value, action)

    def start(self) -> None:
        """Pede permissão de captura; descarta resultado anterior."""
        self._require("start", RecordingState.IDLE, RecordingState.STOPPED)
        self.state = RecordingState.STARTING
        self.result = None
        self.duration = 0.0
        self._chunks = []

    def mark_started(self, has_audio: bool) -> None:
        """Captura concedida pela plataforma."""
        self._require("mark started", RecordingState.STARTING)
        self.has_audio = has_audio
        self.state = RecordingState.RECORDING
        logger.info(f"Recording started (audio={has_audio}, fps={self.settings.frame_rate})")

    def fail_start(self, reason: str) -> None:
        """Permissão negada ou captura não suportada."""
        self._require("fail start", RecordingState.STARTING)
        logger.warning(f"Recording could not start: {reason}")
        self.state = RecordingState.IDLE

    def add_chunk(self, data: bytes) -> None:
        # Chunks vazios são ignorados (o recorder emite dataavailable sem dados)
        if not data:
            return
        self._require(
            "add chunk",
            RecordingState.RECORDING,
            RecordingState.PAUSED,
            RecordingState.STOPPING
        )
        self._chunks.append(bytes(data))

    def tick(self, seconds: float = 1.0) -> None:
        """Avança o contador de duração; só conta enquanto grava."""
        if self.state == RecordingState.RECORDING:
            self.duration += seconds

    def pause(self) -> None:
        self._require("pause", RecordingState.RECORDING)
        self.state = RecordingState.PAUSED
        logger.info("Recording paused")

    def resume(self) -> None:
        self._require("resume", RecordingState.PAUSED)
        self.state = RecordingState.RECORDING
        logger.info("Recording resumed")

    def toggle_pause(self) -> None:
        if self.state == RecordingState.PAUSED:
            self.resume()
        else:
            self.pause()

    def stop(self) -> None:
        self._require("stop", RecordingState.RECORDING, RecordingState.PAUSED)
        self.state = RecordingState.STOPPING

    def finalize(self) -> RecordedBlob:
        """Concatena os chunks em um único blob e entra em 'stopped'."""
        self._require("finalize", RecordingState.STOPPING)
        self.result = RecordedBlob(
            data=b"".join(self._chunks),
            duration_seconds=self.duration,
            has_audio=self.has_audio
        )
        self._chunks = []
        self.state = RecordingState.STOPPED
        logger.info(
            f"Recording completed: {self.result.size} bytes, "
            f"duration={format_duration(self.duration)}"
        )
        return self.result

    def on_stream_ended(self) -> Optional[RecordedBlob]:
        """
        Stream de captura encerrado externamente (usuário parou o compartilhamento).
        Sessões ativas são paradas e finalizadas; nos demais estados nada acontece.
        """
        if not self.is_capturing:
            return None
        logger.info("Capture stream ended externally, stopping recording")
        self.stop()
        return self.finalize()

    def discard(self) -> None:
        """Descarta o resultado e volta para idle."""
        if self.is_capturing or self.state in (RecordingState.STARTING, RecordingState.STOPPING):
            raise InvalidStateTransitionError(self.state.value, "discard")
        self.result = None
        self.duration = 0.0
        self._chunks = []
        self.state = RecordingState.IDLE
