import random
from typing import Callable, List, Optional, Tuple

from . import texts

Rule = Tuple[Callable[[str], bool], str]

# first hit wins
_RULES: List[Rule] = [
    (lambda t: "how" in t and "grow" in t,          texts.GROWING_TECHNIQUES_PROMPT),
    (lambda t: "when" in t and "plant" in t,        texts.PLANTING_TIMING_PROMPT),
    (lambda t: "water" in t or "irrigation" in t,   texts.WATER_MANAGEMENT_PROMPT),
]

class FallbackSelector:
    """Reply for messages no topic rule recognised.

    A few loose keyword pairs get a pointed follow-up question; anything else
    gets one of the generic paragraphs, picked with ``rng``.
    """

    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None):
        self._rng = rng or random.Random(seed)

    def select(self, lower_text: str) -> str:
        for matches, reply in _RULES:
            if matches(lower_text):
                return reply
        return self._rng.choice(texts.FALLBACK_RESPONSES)
