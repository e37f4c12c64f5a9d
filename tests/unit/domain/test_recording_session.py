"""
Testes unitários para RecordingSession.
"""
from datetime import datetime

import pytest

from src.domain.entities import (
    RecordedBlob,
    RecordingSession,
    RecordingSettings,
    RecordingState,
    format_duration
)
from src.domain.exceptions import InvalidStateTransitionError


@pytest.fixture
def session():
    return RecordingSession()


@pytest.fixture
def recording(session):
    """Sessão já gravando (com áudio)."""
    session.start()
    session.mark_started(has_audio=True)
    return session


class TestRecordingLifecycle:
    """Transições de estado da gravação."""

    def test_starts_idle(self, session):
        assert session.state == RecordingState.IDLE
        assert session.result is None
        assert session.duration == 0

    def test_start_then_mark_started(self, session):
        session.start()
        assert session.state == RecordingState.STARTING

        session.mark_started(has_audio=False)
        assert session.state == RecordingState.RECORDING
        assert session.has_audio is False
        assert session.is_capturing

    def test_fail_start_returns_to_idle(self, session):
        session.start()
        session.fail_start("Permission denied")
        assert session.state == RecordingState.IDLE

    def test_cannot_start_while_recording(self, recording):
        with pytest.raises(InvalidStateTransitionError) as exc_info:
            recording.start()
        assert exc_info.value.status_code == 409
        assert "recording" in exc_info.value.message

    def test_pause_resume_and_toggle(self, recording):
        recording.pause()
        assert recording.is_paused

        recording.resume()
        assert recording.state == RecordingState.RECORDING

        recording.toggle_pause()
        assert recording.state == RecordingState.PAUSED
        recording.toggle_pause()
        assert recording.state == RecordingState.RECORDING

    def test_pause_requires_capture(self, session):
        with pytest.raises(InvalidStateTransitionError):
            session.pause()
        with pytest.raises(InvalidStateTransitionError):
            session.toggle_pause()

    def test_stop_and_finalize_joins_chunks(self, recording):
        recording.add_chunk(b"abc")
        recording.add_chunk(b"def")
        recording.tick(3)
        recording.stop()
        assert recording.state == RecordingState.STOPPING

        recording.add_chunk(b"ghi")  # flush final
        blob = recording.finalize()

        assert recording.state == RecordingState.STOPPED
        assert blob.data == b"abcdefghi"
        assert blob.size == 9
        assert blob.mime_type == "video/webm"
        assert blob.duration_seconds == 3
        assert blob.has_audio is True
        assert recording.result is blob

    def test_finalize_requires_stop(self, recording):
        with pytest.raises(InvalidStateTransitionError):
            recording.finalize()

    def test_restart_clears_previous_result(self, recording):
        recording.add_chunk(b"data")
        recording.tick()
        recording.stop()
        recording.finalize()

        recording.start()

        assert recording.result is None
        assert recording.duration == 0
        assert recording.buffered_bytes == 0

    def test_discard_returns_to_idle(self, recording):
        recording.add_chunk(b"data")
        recording.stop()
        recording.finalize()

        recording.discard()

        assert recording.state == RecordingState.IDLE
        assert recording.result is None

    def test_discard_while_capturing_is_rejected(self, recording):
        with pytest.raises(InvalidStateTransitionError):
            recording.discard()


class TestChunksAndDuration:

    def test_empty_chunks_are_ignored(self, recording):
        recording.add_chunk(b"")
        assert recording.buffered_bytes == 0

    def test_chunks_accepted_while_paused(self, recording):
        recording.pause()
        recording.add_chunk(b"flushed")
        assert recording.buffered_bytes == 7

    def test_chunk_outside_capture_is_rejected(self, session):
        with pytest.raises(InvalidStateTransitionError):
            session.add_chunk(b"data")

    def test_tick_only_counts_while_recording(self, recording):
        recording.tick()
        recording.tick()
        recording.pause()
        recording.tick()
        recording.tick()
        recording.resume()
        recording.tick()
        assert recording.duration == 3

    def test_tick_ignored_when_idle(self, session):
        session.tick(5)
        assert session.duration == 0


class TestStreamEnded:
    """Encerramento externo do compartilhamento de tela."""

    def test_recording_is_finalized(self, recording):
        recording.add_chunk(b"xyz")
        blob = recording.on_stream_ended()

        assert recording.state == RecordingState.STOPPED
        assert blob is not None
        assert blob.data == b"xyz"

    def test_paused_recording_is_finalized(self, recording):
        recording.pause()
        assert recording.on_stream_ended() is not None
        assert recording.state == RecordingState.STOPPED

    def test_noop_when_not_capturing(self, session):
        assert session.on_stream_ended() is None
        assert session.state == RecordingState.IDLE


class TestHelpers:

    @pytest.mark.parametrize("seconds,expected", [
        (0, "00:00"),
        (9, "00:09"),
        (65, "01:05"),
        (59.9, "00:59"),
        (3600, "60:00"),
    ])
    def test_format_duration(self, seconds, expected):
        assert format_duration(seconds) == expected

    def test_default_filename(self):
        blob = RecordedBlob(data=b"x", duration_seconds=1, has_audio=False)
        name = blob.default_filename(datetime(2024, 1, 2, 3, 4, 5))
        assert name == "screen-recording-2024-01-02T03-04-05.webm"

    def test_settings_frame_rate(self):
        assert RecordingSettings(quality="high").frame_rate == 30
        assert RecordingSettings(quality="medium").frame_rate == 24
        assert RecordingSettings(quality="low").frame_rate == 15

    def test_settings_microphone(self):
        assert RecordingSettings(audio_source="both").wants_microphone
        assert not RecordingSettings(audio_source="system").wants_microphone
        assert not RecordingSettings(include_audio=False, audio_source="microphone").wants_microphone

    def test_settings_validation(self):
        with pytest.raises(ValueError):
            RecordingSettings(quality="ultra")
        with pytest.raises(ValueError):
            RecordingSettings(audio_source="line-in")
