"""
Use Case: User Progress
Onboarding, tutoriais concluídos, preferências e conteúdo de ajuda.
"""
from typing import Any, Dict, List, Optional, Tuple
from loguru import logger

from src.domain.entities import ProgressPreferences, User, UserProgress
from src.domain.exceptions import ValidationError
from src.domain.interfaces import IUserProgressRepository
from src.infrastructure.demo import DemoCatalog


class UserProgressUseCase:
    """
    Progresso do usuário autenticado.

    O registro é criado no primeiro acesso; toda operação atualiza
    lastActiveDate.
    """

    def __init__(self, repository: IUserProgressRepository, catalog: DemoCatalog):
        self.repository = repository
        self.catalog = catalog

    def _load(self, user: User) -> UserProgress:
        progress = self.repository.get(user.id)
        if progress is None:
            logger.info(f"Creating initial progress for user {user.id}")
            progress = UserProgress(user_id=user.id)
        progress.touch()
        return progress

    def get_progress(self, user: User) -> UserProgress:
        return self.repository.save(self._load(user))

    def update_onboarding_step(self, user: User, step: Any) -> UserProgress:
        # bool é subclasse de int: true/false não são passos válidos
        if not isinstance(step, int) or isinstance(step, bool):
            raise ValidationError("Invalid onboarding step")

        progress = self._load(user)
        try:
            progress.set_onboarding_step(step)
        except ValueError as e:
            raise ValidationError("Invalid onboarding step") from e

        logger.debug(f"User {user.id} onboarding step -> {step}")
        return self.repository.save(progress)

    def complete_tutorial(self, user: User, tutorial_id: Any) -> Tuple[UserProgress, List[str]]:
        """
        Returns:
            (progresso atualizado, conquistas novas)
        """
        if not isinstance(tutorial_id, str) or not tutorial_id.strip():
            raise ValidationError("Tutorial ID is required")

        progress = self._load(user)
        new_achievements = progress.complete_tutorial(tutorial_id.strip())
        self.repository.save(progress)

        if new_achievements:
            logger.info(f"🏆 User {user.id} earned: {', '.join(new_achievements)}")
        return progress, new_achievements

    def update_preferences(self, user: User, preferences: Any) -> UserProgress:
        """Substitui as preferências; campos ausentes voltam ao padrão."""
        if not isinstance(preferences, dict):
            raise ValidationError("Preferences object is required")

        defaults = ProgressPreferences()
        show_hints = preferences.get("showTutorialHints")
        skip_intro = preferences.get("skipIntroVideos")

        progress = self._load(user)
        progress.preferences = ProgressPreferences(
            show_tutorial_hints=defaults.show_tutorial_hints if show_hints is None else bool(show_hints),
            skip_intro_videos=defaults.skip_intro_videos if skip_intro is None else bool(skip_intro)
        )
        return self.repository.save(progress)

    def tutorials(self) -> List[Dict]:
        return self.catalog.tutorials()

    def help_articles(self, category: Optional[str] = None, search: Optional[str] = None) -> List[Dict]:
        """Artigos de ajuda filtrados por categoria exata e por texto (título, conteúdo, tags)."""
        articles = self.catalog.help_articles()
        if category:
            articles = [a for a in articles if a["category"] == category]
        if search:
            needle = search.lower()
            articles = [
                a for a in articles
                if needle in a["title"].lower()
                or needle in a["content"].lower()
                or any(needle in tag.lower() for tag in a["tags"])
            ]
        return articles
