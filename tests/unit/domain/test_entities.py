"""
Testes unitários para entidades e value objects.
"""
import pytest

from src.domain.entities import (
    Caption,
    Feedback,
    FeedbackStatus,
    FeedbackType,
    Template,
    User,
    Video
)
from src.domain.value_objects import Pagination, VideoStatus


class TestFeedback:

    def test_message_is_stripped(self):
        feedback = Feedback(user_id="1", user_name="Demo User", message="   The editor is great   ")
        assert feedback.message == "The editor is great"

    def test_defaults(self):
        feedback = Feedback(user_id="1", user_name="Demo User", message="Works as expected")
        assert feedback.type == FeedbackType.GENERAL
        assert feedback.status == FeedbackStatus.NEW
        assert feedback.priority.value == "medium"

    @pytest.mark.parametrize("message", ["short", " " * 20 + "tiny", "x" * 1001])
    def test_message_length_is_enforced(self, message):
        with pytest.raises(ValueError):
            Feedback(user_id="1", user_name="Demo", message=message)

    def test_accepts_enum_values_as_strings(self):
        feedback = Feedback(user_id="1", user_name="Demo", message="Found a crash on save", type="bug")
        assert feedback.type == FeedbackType.BUG

    def test_change_status_updates_timestamp(self):
        feedback = Feedback(user_id="1", user_name="Demo", message="Please add dark mode")
        before = feedback.updated_at
        feedback.change_status("resolved")
        assert feedback.status == FeedbackStatus.RESOLVED
        assert feedback.updated_at >= before

    def test_to_dict(self):
        feedback = Feedback(user_id="1", user_name="Demo", message="Please add dark mode", type="feature")
        data = feedback.to_dict()
        assert data["id"] == feedback.id
        assert data["userId"] == "1"
        assert data["userName"] == "Demo"
        assert data["type"] == "feature"
        assert data["status"] == "new"
        assert "timestamp" in data


class TestPagination:

    def test_pages_is_ceiling(self):
        assert Pagination(page=1, limit=10, total=21).pages == 3
        assert Pagination(page=1, limit=10, total=20).pages == 2
        assert Pagination(page=1, limit=10, total=0).pages == 0

    def test_slice(self):
        items = list(range(21))
        assert Pagination(page=3, limit=10, total=21).slice(items) == [20]
        assert Pagination(page=4, limit=10, total=21).slice(items) == []

    def test_invalid_values(self):
        with pytest.raises(ValueError):
            Pagination(page=0)
        with pytest.raises(ValueError):
            Pagination(limit=0)

    def test_to_dict(self):
        assert Pagination(page=2, limit=5, total=11).to_dict() == {
            "page": 2, "limit": 5, "total": 11, "pages": 3
        }


class TestVideo:

    def test_caption_must_not_end_before_start(self):
        with pytest.raises(ValueError):
            Caption(id="1", start=5, end=2, text="oops")

    def test_caption_duration(self):
        assert Caption(id="1", start=1.5, end=4, text="ok").duration == 2.5

    def test_summary_dict(self):
        video = Video(id="v1", title="Demo", project="1", status=VideoStatus.PROCESSING)
        data = video.to_summary_dict()
        assert data["_id"] == "v1"
        assert data["status"] == "processing"
        assert data["processing"] == {"stage": "complete", "progress": 100}
        assert not video.is_ready

    def test_detail_dict_includes_media_fields(self):
        data = Video(id="v1", title="Demo").to_dict()
        assert data["originalFile"] is None
        assert data["captions"] == []
        assert data["metadata"] == {"keyframes": []}

    def test_matches_title_and_description(self):
        video = Video(title="Release Highlights", description="New features")
        assert video.matches("highlight")
        assert video.matches("FEATURES")
        assert not video.matches("onboarding")


class TestUserAndTemplate:

    def test_user_to_dict(self):
        user = User(id="1", email="a@b.com", first_name="Ada", last_name="Lovelace")
        assert user.full_name == "Ada Lovelace"
        assert user.to_dict() == {
            "_id": "1",
            "email": "a@b.com",
            "firstName": "Ada",
            "lastName": "Lovelace",
            "role": "owner"
        }

    def test_user_role_validation(self):
        with pytest.raises(ValueError):
            User(id="1", email="a@b.com", first_name="A", last_name="B", role="root")

    def test_template_matches_features(self):
        template = Template(
            id="1",
            name="Tutorial Template",
            description="Perfect for educational content",
            category="Education",
            thumbnail="",
            features=["Intro/Outro", "Captions"]
        )
        assert template.matches("captions")
        assert template.matches("tutorial")
        assert not template.matches("music")
