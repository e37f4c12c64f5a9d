"""
Testes unitários para os use cases de feedback.
"""
from unittest.mock import AsyncMock

import pytest

from src.application.use_cases import (
    FeedbackStatsUseCase,
    ListFeedbackUseCase,
    SubmitFeedbackUseCase,
    UpdateFeedbackStatusUseCase
)
from src.domain.entities import FeedbackPriority, FeedbackStatus, FeedbackType, User
from src.domain.exceptions import ResourceNotFoundError, ValidationError
from src.infrastructure.persistence import InMemoryFeedbackRepository


@pytest.fixture
def repository():
    return InMemoryFeedbackRepository()


@pytest.fixture
def publisher():
    mock = AsyncMock()
    mock.publish.return_value = 1
    return mock


@pytest.fixture
def user():
    return User(id="1", email="demo@clueso.io", first_name="Demo", last_name="User")


@pytest.fixture
def submit(repository, publisher):
    return SubmitFeedbackUseCase(repository, publisher)


class TestSubmitFeedback:

    @pytest.mark.asyncio
    async def test_stores_and_broadcasts(self, submit, repository, publisher, user):
        feedback = await submit.execute(user, "  The export button is hidden  ", FeedbackType.BUG, FeedbackPriority.HIGH)

        assert repository.get(feedback.id) is feedback
        assert feedback.message == "The export button is hidden"
        assert feedback.user_name == "Demo User"
        publisher.publish.assert_awaited_once_with("new-feedback", feedback.to_dict())

    @pytest.mark.asyncio
    async def test_short_message_is_rejected(self, submit, repository, publisher, user):
        with pytest.raises(ValidationError):
            await submit.execute(user, "too short")

        assert repository.count() == 0
        publisher.publish.assert_not_awaited()


class TestListFeedback:

    @pytest.mark.asyncio
    async def test_filters_and_pagination(self, submit, repository, user):
        for i in range(3):
            await submit.execute(user, f"Bug report number {i}", FeedbackType.BUG)
        await submit.execute(user, "Please add a dark theme", FeedbackType.FEATURE)

        result = ListFeedbackUseCase(repository).execute(feedback_type="bug", page=2, limit=2)

        assert result["total"] == 3
        assert result["filtered"] == 1
        assert result["pages"] == 2
        assert result["page"] == 2
        assert len(result["feedback"]) == 1
        assert result["feedback"][0]["message"] == "Bug report number 0"

    @pytest.mark.asyncio
    async def test_total_counts_matches_and_filtered_counts_page(self, submit, repository, user):
        """total considera o filtro; filtered é o tamanho da página retornada."""
        await submit.execute(user, "Upload fails on slow network", FeedbackType.BUG)
        await submit.execute(user, "Timeline freezes on zoom", FeedbackType.BUG)
        await submit.execute(user, "Please add a dark theme", FeedbackType.FEATURE)

        result = ListFeedbackUseCase(repository).execute(feedback_type="bug", limit=1)

        assert result["total"] == 2
        assert result["filtered"] == 1
        assert result["pages"] == 2
        assert result["feedback"][0]["message"] == "Timeline freezes on zoom"

    def test_all_means_no_filter(self, repository):
        result = ListFeedbackUseCase(repository).execute(status="all", feedback_type="all")
        assert result == {"feedback": [], "total": 0, "filtered": 0, "page": 1, "limit": 50, "pages": 0}

    def test_invalid_filter(self, repository):
        with pytest.raises(ValidationError):
            ListFeedbackUseCase(repository).execute(status="archived")


class TestFeedbackStats:

    @pytest.mark.asyncio
    async def test_counts_by_type_and_status(self, submit, repository, publisher, user):
        bug = await submit.execute(user, "Crash when saving", FeedbackType.BUG)
        await submit.execute(user, "Another crash report", FeedbackType.BUG)
        await submit.execute(user, "Love the captions!", FeedbackType.COMPLIMENT)
        await UpdateFeedbackStatusUseCase(repository, publisher).execute(bug.id, FeedbackStatus.RESOLVED)

        stats = FeedbackStatsUseCase(repository).execute()

        assert stats["total"] == 3
        assert stats["byType"]["bug"] == {"total": 2, "new": 1, "reviewing": 0, "resolved": 1}
        assert stats["byType"]["compliment"]["total"] == 1
        assert stats["byType"]["feature"]["total"] == 0


class TestUpdateFeedbackStatus:

    @pytest.mark.asyncio
    async def test_updates_and_broadcasts(self, submit, repository, publisher, user):
        feedback = await submit.execute(user, "Timeline zoom is slow")
        publisher.publish.reset_mock()

        updated = await UpdateFeedbackStatusUseCase(repository, publisher).execute(
            feedback.id, FeedbackStatus.REVIEWING
        )

        assert updated.status == FeedbackStatus.REVIEWING
        publisher.publish.assert_awaited_once_with("feedback-updated", updated.to_dict())

    @pytest.mark.asyncio
    async def test_unknown_feedback(self, repository, publisher):
        with pytest.raises(ResourceNotFoundError) as exc_info:
            await UpdateFeedbackStatusUseCase(repository, publisher).execute("missing", FeedbackStatus.RESOLVED)

        assert exc_info.value.status_code == 404
        publisher.publish.assert_not_awaited()
