"""
Value Object: ProcessingStage
Estágios (placeholder) do pipeline de processamento de vídeo.
Nenhum processamento real é executado; os valores só aparecem nos payloads.
"""
from enum import Enum


class ProcessingStage(str, Enum):
    EXTRACT_AUDIO = "extract_audio"
    TRANSCRIBE = "transcribe"
    ENHANCE_SCRIPT = "enhance_script"
    GENERATE_VOICEOVER = "generate_voiceover"
    DETECT_SCENES = "detect_scenes"
    GENERATE_CAPTIONS = "generate_captions"
    RENDER_VIDEO = "render_video"
    COMPLETE = "complete"


class VideoStatus(str, Enum):
    UPLOADING = "uploading"
    PROCESSING = "processing"
    READY = "ready"
    ERROR = "error"
