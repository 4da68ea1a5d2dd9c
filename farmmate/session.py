"""Turn-taking over the assistant, with speech in and out.

The real speech engines live in the client; they are handed in as objects
satisfying the small protocols below.
"""
import logging
import random
import re
from dataclasses import dataclass, field
from typing import List, Literal, Optional, Protocol

from farmmate.engine import texts
from farmmate.engine.assistant import Assistant

logger = logging.getLogger(__name__)

_TAG = re.compile(r"<[^>]*>")
_SPACE = re.compile(r"\s+")

Role = Literal["user", "bot", "error"]


class TextToSpeech(Protocol):
    @property
    def is_speaking(self) -> bool: ...
    def speak(self, text: str) -> None: ...
    def stop(self) -> None: ...


class AudioCapture(Protocol):
    def start(self) -> None: ...
    def stop(self) -> Optional[str]:
        """Stop capturing; return the transcript, or None when nothing was recognised."""
        ...


class CaptureUnavailable(Exception):
    """Raised by AudioCapture.start when the microphone cannot be opened."""


@dataclass
class Turn:
    role: Role
    text: str


@dataclass
class SessionState:
    is_muted: bool = False
    is_recording: bool = False
    load_error_reported: bool = False
    transcript: List[Turn] = field(default_factory=list)


def to_speech_text(response: str) -> str:
    return _SPACE.sub(" ", _TAG.sub(" ", response)).strip()


class ConversationSession:
    def __init__(
        self,
        assistant: Assistant,
        tts: Optional[TextToSpeech] = None,
        capture: Optional[AudioCapture] = None,
        rng: Optional[random.Random] = None,
    ):
        self.assistant = assistant
        self.tts = tts
        self.capture = capture
        self.state = SessionState()
        self._rng = rng or random.Random()

    # ---------- turns ----------
    def _add(self, role: Role, text: str) -> None:
        self.state.transcript.append(Turn(role, text))

    def report_load_error(self) -> Optional[str]:
        """Surface a knowledge-base load failure once per session."""
        if self.state.load_error_reported or self.assistant.store.error is None:
            return None
        self.state.load_error_reported = True
        self._add("error", texts.LOAD_FAILED)
        return texts.LOAD_FAILED

    def handle_user_input(self, text: str) -> Optional[str]:
        message = text.strip()
        if message == "":
            return None
        self._add("user", message)
        response = self.assistant.generate_response(message)
        self._add("bot", response)
        if not self.state.is_muted:
            self.speak_response(response)
        return response

    def last_bot_message(self) -> Optional[str]:
        for turn in reversed(self.state.transcript):
            if turn.role == "bot":
                return turn.text
        return None

    # ---------- speech out ----------
    def speak_response(self, response: str) -> None:
        if self.state.is_muted or self.tts is None:
            return
        self.stop_speech()
        self.tts.speak(to_speech_text(response))

    def stop_speech(self) -> None:
        if self.tts is not None and self.tts.is_speaking:
            self.tts.stop()

    def toggle_mute(self) -> bool:
        self.state.is_muted = not self.state.is_muted
        if self.state.is_muted:
            self.stop_speech()
        else:
            last = self.last_bot_message()
            if last is not None:
                self.speak_response(last)
        return self.state.is_muted

    # ---------- speech in ----------
    def toggle_recording(self) -> Optional[str]:
        if self.state.is_recording:
            return self.stop_recording()
        self.start_recording()
        return None

    def start_recording(self) -> bool:
        if self.capture is None:
            return False
        try:
            self.capture.start()
        except CaptureUnavailable as e:
            logger.warning("Error starting recording: %s", e)
            self._add("error", texts.MIC_DENIED)
            return False
        self.state.is_recording = True
        return True

    def stop_recording(self) -> Optional[str]:
        if self.capture is None or not self.state.is_recording:
            return None
        self.state.is_recording = False
        heard = self.capture.stop()
        if not heard:
            # no recogniser wired in; send one of the sample questions instead
            heard = self._rng.choice(texts.SAMPLE_QUESTIONS)
        return self.handle_user_input(heard)
