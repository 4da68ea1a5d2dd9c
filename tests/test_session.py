import random

import pytest

from farmmate.config import DEFAULT_DATA_SOURCE
from farmmate.engine import texts
from farmmate.engine.assistant import Assistant
from farmmate.engine.knowledge import KnowledgeStore
from farmmate.session import CaptureUnavailable, ConversationSession, to_speech_text


class FakeSpeech:
    def __init__(self):
        self.spoken = []
        self.stops = 0
        self._speaking = False

    @property
    def is_speaking(self):
        return self._speaking

    def speak(self, text):
        self.spoken.append(text)
        self._speaking = True

    def stop(self):
        self.stops += 1
        self._speaking = False


class FakeCapture:
    def __init__(self, transcript=None, fail=False):
        self.transcript = transcript
        self.fail = fail
        self.started = False

    def start(self):
        if self.fail:
            raise CaptureUnavailable("permission denied")
        self.started = True

    def stop(self):
        self.started = False
        return self.transcript


@pytest.fixture
def tts():
    return FakeSpeech()


@pytest.fixture
def session(assistant, tts):
    return ConversationSession(assistant, tts=tts)


def test_to_speech_text_strips_markup():
    assert to_speech_text("<p>Hello</p><p><strong>Soil:</strong>  loam</p>") == "Hello Soil: loam"


def test_blank_input_is_ignored(session, tts):
    assert session.handle_user_input("   ") is None
    assert session.state.transcript == []
    assert tts.spoken == []


def test_turn_is_recorded_and_spoken(session, tts):
    reply = session.handle_user_input("  hello  ")
    assert reply == texts.GREETING
    assert [(t.role, t.text) for t in session.state.transcript] == [("user", "hello"), ("bot", texts.GREETING)]
    assert tts.spoken == [texts.GREETING]


def test_spoken_text_has_no_tags(session, tts):
    session.handle_user_input("weather")
    assert "<" not in tts.spoken[0]


def test_muted_session_does_not_speak(session, tts):
    session.toggle_mute()
    session.handle_user_input("hello")
    assert tts.spoken == []


def test_mute_stops_speech_and_unmute_replays_last_reply(session, tts):
    session.handle_user_input("hello")
    assert session.toggle_mute() is True
    assert tts.stops == 1

    assert session.toggle_mute() is False
    assert tts.spoken == [texts.GREETING, texts.GREETING]


def test_recording_sends_transcript(assistant, tts):
    capture = FakeCapture(transcript="Tell me about cocoa")
    session = ConversationSession(assistant, tts=tts, capture=capture)

    assert session.toggle_recording() is None
    assert session.state.is_recording
    reply = session.toggle_recording()
    assert not session.state.is_recording
    assert "cocoa farming in Ghana" in reply


def test_recording_without_transcript_uses_sample_question(assistant):
    session = ConversationSession(assistant, capture=FakeCapture(), rng=random.Random(1))
    session.toggle_recording()
    session.toggle_recording()
    assert session.state.transcript[0].text in texts.SAMPLE_QUESTIONS


def test_microphone_denied(assistant):
    session = ConversationSession(assistant, capture=FakeCapture(fail=True))
    session.toggle_recording()
    assert not session.state.is_recording
    assert session.state.transcript[-1].role == "error"
    assert session.state.transcript[-1].text == texts.MIC_DENIED


def test_load_error_reported_once(tmp_path):
    store = KnowledgeStore(str(tmp_path / "missing.json"))
    store.load()
    session = ConversationSession(Assistant(store))
    assert session.report_load_error() == texts.LOAD_FAILED
    assert session.report_load_error() is None
    assert session.handle_user_input("hello") == texts.LOADING


def test_no_load_error_to_report(assistant):
    assert ConversationSession(assistant).report_load_error() is None
    assert KnowledgeStore(DEFAULT_DATA_SOURCE).error is None
