"""
Use Case: Content Enhancement
Stubs de IA: melhoria de roteiro, resumo, tags e legendas.
Nenhum modelo é chamado; as respostas são determinísticas.
"""
import re
from typing import Dict, List, Optional
from loguru import logger

from src.domain.entities import Caption
from src.domain.exceptions import ValidationError

FILLER_WORDS_PATTERN = re.compile(r"\b(?:um|uh|like|you know)\b", re.IGNORECASE)

IMPROVEMENTS = [
    "Removed filler words",
    "Improved capitalization",
    "Enhanced sentence structure"
]

SUMMARY_TEXT = (
    "This is an AI-generated summary of the content, highlighting the key "
    "points and main ideas discussed in the video."
)
KEY_POINTS = [
    "Main topic introduction",
    "Key concept explanation",
    "Practical examples",
    "Conclusion and takeaways"
]

DEFAULT_TAGS = ["tutorial", "demo", "educational", "how-to", "guide"]
DEFAULT_CATEGORIES = ["Education", "Technology", "Tutorial"]

WORDS_PER_CAPTION = 8
SECONDS_PER_WORD = 0.5
CAPTION_CONFIDENCE = 0.95


def _require_text(text: Optional[str]) -> str:
    if not text or not text.strip():
        raise ValidationError("Text is required")
    return text


def enhance_text(text: str) -> str:
    """
    Remove palavras de preenchimento e capitaliza cada sentença.

    Example:
        >>> enhance_text("um so this is, like, the editor. you know it works")
        'So this is, , the editor. It works.'
    """
    cleaned = FILLER_WORDS_PATTERN.sub("", text)
    cleaned = re.sub(r"\s+", " ", cleaned)
    sentences = [piece.strip() for piece in cleaned.split(".")]
    sentences = [s[0].upper() + s[1:] for s in sentences if s]
    return ". ".join(sentences) + "."


class ContentEnhancementUseCase:

    def enhance_script(self, text: Optional[str]) -> Dict:
        text = _require_text(text)
        enhanced = enhance_text(text)
        logger.debug(f"Script enhanced: {len(text)} -> {len(enhanced)} chars")
        return {
            "originalText": text,
            "enhancedText": enhanced,
            "improvements": list(IMPROVEMENTS)
        }

    def generate_summary(self, text: Optional[str]) -> Dict:
        text = _require_text(text)
        return {
            "summary": SUMMARY_TEXT,
            "keyPoints": list(KEY_POINTS),
            "wordCount": len(text.split())
        }

    def generate_tags(self, text: Optional[str], title: Optional[str] = None) -> Dict:
        if not text and not title:
            raise ValidationError("Text is required")
        return {"tags": list(DEFAULT_TAGS), "categories": list(DEFAULT_CATEGORIES)}

    def generate_captions(self, text: Optional[str]) -> Dict:
        """Divide o texto em segmentos de 8 palavras, 0.5s por palavra."""
        words = _require_text(text).split()
        segments: List[Dict] = []
        current = 0.0
        for index in range(0, len(words), WORDS_PER_CAPTION):
            chunk = words[index:index + WORDS_PER_CAPTION]
            duration = len(chunk) * SECONDS_PER_WORD
            caption = Caption(
                id=f"caption_{index // WORDS_PER_CAPTION}",
                start=current,
                end=current + duration,
                text=" ".join(chunk)
            )
            segments.append({**caption.to_dict(), "confidence": CAPTION_CONFIDENCE})
            current += duration

        logger.debug(f"Generated {len(segments)} caption segments")
        return {"segments": segments}
