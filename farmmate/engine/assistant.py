import logging
from typing import Optional

from . import texts
from .classifier import classify
from .fallback import FallbackSelector
from .knowledge import KnowledgeStore
from .renderer import render

logger = logging.getLogger(__name__)


class Assistant:
    """Turns one user message into one reply fragment.

    Stateless apart from the read-only knowledge store; callers are expected
    to drop blank messages before calling ``generate_response``.
    """

    def __init__(self, store: KnowledgeStore, fallback: Optional[FallbackSelector] = None):
        self.store = store
        self.fallback = fallback or FallbackSelector()

    def generate_response(self, user_message: str) -> str:
        kb = self.store.kb
        if kb is None:
            return texts.LOADING

        intent = classify(user_message)
        logger.debug("intent crop=%s subtopic=%s matched=%s",
                     intent.crop, intent.subtopic, intent.matched_crops)
        return render(intent, kb, self.fallback)
