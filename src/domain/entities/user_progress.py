"""
Entity: UserProgress
Onboarding, tutoriais concluídos, conquistas e preferências de um usuário.
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional
import uuid

MAX_ONBOARDING_STEP = 10
FIRST_TUTORIAL_ACHIEVEMENT = "first_tutorial"
TUTORIAL_MASTER_ACHIEVEMENT = "tutorial_master"
TUTORIAL_MASTER_THRESHOLD = 5


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ProgressPreferences:
    show_tutorial_hints: bool = True
    skip_intro_videos: bool = False

    def to_dict(self) -> dict:
        return {
            "showTutorialHints": self.show_tutorial_hints,
            "skipIntroVideos": self.skip_intro_videos
        }


@dataclass
class UserProgress:
    """Progresso do usuário no onboarding e nos tutoriais."""

    user_id: str
    completed_tutorials: List[str] = field(default_factory=list)
    onboarding_step: int = 0
    achievements: List[str] = field(default_factory=list)
    preferences: ProgressPreferences = field(default_factory=ProgressPreferences)
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    last_active_date: datetime = field(default_factory=_utcnow)
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def touch(self, now: Optional[datetime] = None) -> None:
        self.last_active_date = now or _utcnow()
        self.updated_at = self.last_active_date

    def set_onboarding_step(self, step: int) -> None:
        if not 0 <= step <= MAX_ONBOARDING_STEP:
            raise ValueError(f"Onboarding step must be between 0 and {MAX_ONBOARDING_STEP}")
        self.onboarding_step = step

    def complete_tutorial(self, tutorial_id: str) -> List[str]:
        """
        Marca o tutorial como concluído (idempotente).

        Returns:
            List[str]: conquistas obtidas nesta chamada
        """
        if tutorial_id not in self.completed_tutorials:
            self.completed_tutorials.append(tutorial_id)

        earned = []
        if len(self.completed_tutorials) == 1:
            earned.append(FIRST_TUTORIAL_ACHIEVEMENT)
        if len(self.completed_tutorials) >= TUTORIAL_MASTER_THRESHOLD:
            earned.append(TUTORIAL_MASTER_ACHIEVEMENT)

        new_achievements = [a for a in earned if a not in self.achievements]
        self.achievements.extend(new_achievements)
        return new_achievements

    def to_dict(self) -> dict:
        return {
            "_id": self.id,
            "userId": self.user_id,
            "completedTutorials": list(self.completed_tutorials),
            "onboardingStep": self.onboarding_step,
            "lastActiveDate": self.last_active_date.isoformat(),
            "achievements": list(self.achievements),
            "preferences": self.preferences.to_dict(),
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat()
        }
