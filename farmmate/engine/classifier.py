from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from farmmate.schema import CropSubtopic, GeneralSubtopic

from .crops import CROP_IDS

# (keywords, subtopic) checked top to bottom; reordering changes which reply fires
GENERAL_RULES: List[Tuple[Tuple[str, ...], GeneralSubtopic]] = [
    (("disease", "sick", "problem"),    "disease_overview"),
    (("hello", "hi", "hey"),            "greeting"),
    (("thank",),                        "thanks"),
    (("weather", "rain"),               "weather"),
    (("soil", "land"),                  "soil"),
    (("market", "sell", "price"),       "market"),
    (("fertilizer", "manure"),          "fertilizer_general"),
    (("planting", "season"),            "planting_season"),
]

CROP_RULES: List[Tuple[Tuple[str, ...], CropSubtopic]] = [
    (("disease", "sick", "problem"),    "disease"),
    (("variety", "type", "kind"),       "variety"),
    (("fertilizer", "nutrient", "feed"),"fertilizer"),
    (("grow", "plant", "cultivate"),    "growing"),
    (("harvest", "pick", "collect"),    "harvest"),
]

@dataclass(frozen=True)
class Intent:
    text: str                           # lowercased message
    subtopic: Union[CropSubtopic, GeneralSubtopic]
    matched_crops: Tuple[str, ...] = ()

    @property
    def crop(self) -> Optional[str]:
        # only the first crop in declaration order is answered
        return self.matched_crops[0] if self.matched_crops else None

def _first_match(text: str, rules, default: str) -> str:
    for keywords, subtopic in rules:
        if any(k in text for k in keywords):
            return subtopic
    return default

def classify(raw_text: str) -> Intent:
    """Map a message to a crop/subtopic by plain substring containment.

    Matching is on the whole lowercased message, so "hi" also fires inside
    "chin" and "rice" inside "price"; this is the intended behaviour.
    """
    text = raw_text.lower()
    crops = tuple(c for c in CROP_IDS if c in text)
    if crops:
        return Intent(text=text, subtopic=_first_match(text, CROP_RULES, "overview"), matched_crops=crops)
    return Intent(text=text, subtopic=_first_match(text, GENERAL_RULES, "fallback"))
