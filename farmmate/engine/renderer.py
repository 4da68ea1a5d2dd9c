from typing import Callable, Dict

from farmmate.schema import CropProfile, KnowledgeBase
from . import texts
from .classifier import Intent
from .crops import HARVEST_INDICATORS, supported_crops_phrase
from .fallback import FallbackSelector

DELIMITER = ", "

def _p(text: str) -> str:
    return f"<p>{text}</p>"

def _paragraphs(items) -> str:
    return "".join(_p(i) for i in items)

# ---------- crop subtopics ----------
def render_overview(crop: str, data: CropProfile) -> str:
    gc = data.growing_conditions
    return "".join([
        _p(f"Here's what I know about {crop} farming in Ghana:"),
        _p(data.description),
        _p("<strong>Growing Conditions:</strong>"),
        _p(f"Soil: {gc.soil}"),
        _p(f"Rainfall: {gc.rainfall}"),
        _p(f"Temperature: {gc.temperature}"),
        _p(f"Main Regions: {gc.regions}"),
        _p(f"<strong>Common Varieties:</strong> {DELIMITER.join(data.common_varieties)}"),
        _p(f"You can ask me about specific diseases, prevention methods, fertilizer "
           f"recommendations, or harvesting tips for {crop}."),
    ])

def render_disease(crop: str, data: CropProfile) -> str:
    out = [_p(f"Here are the common diseases that affect {crop} in Ghana:")]
    for d in data.diseases:
        out.append(_p(f"<strong>{d.name}</strong>"))
        out.append(_p(f"Symptoms: {d.symptoms}"))
        out.append(_p(f"Prevention: {DELIMITER.join(d.prevention)}"))
        if d.treatment:
            out.append(_p(f"Treatment: {d.treatment}"))
    pests = DELIMITER.join(p.name for p in data.pests)
    out.append(_p(f"For {crop}, I also recommend: {pests} control."))
    return "".join(out)

def render_variety(crop: str, data: CropProfile) -> str:
    out = [_p(f"Here are the recommended varieties for {crop} in Ghana:")]
    out.append(_paragraphs(data.common_varieties))
    if data.common_varieties:
        out.append(_p(f'The most popular variety is usually "{data.common_varieties[0]}". '
                      "Choose varieties based on your specific growing conditions and market preferences."))
    else:
        out.append(_p(f"I don't have variety details for {crop} yet. "
                      "Ask your local extension officer for certified seed sources."))
    return "".join(out)

def render_fertilizer(crop: str, data: CropProfile) -> str:
    return "".join([
        _p(f"Fertilizer recommendations for {crop} in Ghana:"),
        _p("<strong>Recommended Application:</strong>"),
        _p(data.fertilizer_recommendation),
        _p("<strong>Additional Tips:</strong>"),
        _paragraphs(texts.FERTILIZER_TIPS),
    ])

def render_growing(crop: str, data: CropProfile) -> str:
    gc = data.growing_conditions
    return "".join([
        _p(f"Growing {crop} successfully in Ghana:"),
        _p("<strong>Ideal Conditions:</strong>"),
        _paragraphs([gc.soil, gc.rainfall, gc.temperature]),
        _p(f"<strong>Best Regions:</strong> {gc.regions}"),
        _p("<strong>Key Practices:</strong>"),
        _paragraphs(texts.GROWING_PRACTICES),
    ])

def render_harvest(crop: str, data: CropProfile) -> str:
    return "".join([
        _p(f"Harvesting {crop} in Ghana:"),
        _p(f"<strong>Timing:</strong> {data.harvesting}"),
        _p("<strong>Harvest Indicators:</strong>"),
        _paragraphs(HARVEST_INDICATORS.get(crop, ())),
    ])

CROP_RENDERERS: Dict[str, Callable[[str, CropProfile], str]] = {
    "overview":   render_overview,
    "disease":    render_disease,
    "variety":    render_variety,
    "fertilizer": render_fertilizer,
    "growing":    render_growing,
    "harvest":    render_harvest,
}

# ---------- general topics ----------
def render_disease_overview(kb: KnowledgeBase) -> str:
    out = [_p("I can help you with crop diseases! Here are the main crops I have disease information for:")]
    for crop, data in kb.crops.items():
        names = DELIMITER.join(d.name for d in data.diseases)
        out.append(_p(f"<strong>{crop[:1].upper() + crop[1:]}:</strong> {names}"))
    out.append(_p("You can ask about specific diseases like 'How to prevent maize lethal necrosis' "
                  "or 'What causes rice blast' for detailed information."))
    return "".join(out)

def render_soil(kb: KnowledgeBase) -> str:
    return texts.SOIL_HEADER + _paragraphs(kb.general_farming.get("soil_management", ()))

_FIXED: Dict[str, str] = {
    "greeting":           texts.GREETING,
    "thanks":             texts.THANKS,
    "weather":            texts.WEATHER,
    "market":             texts.MARKET,
    "fertilizer_general": texts.FERTILIZER_GENERAL,
    "planting_season":    texts.PLANTING_SEASON,
}

def unknown_crop_message(crop: str) -> str:
    return (f"I don't have specific information about {crop} in my database. "
            f"I specialize in {supported_crops_phrase()} farming advice for Ghana.")

def render(intent: Intent, kb: KnowledgeBase, fallback: FallbackSelector) -> str:
    crop = intent.crop
    if crop is not None:
        data = kb.crops.get(crop)
        if data is None:
            return unknown_crop_message(crop)
        return CROP_RENDERERS[intent.subtopic](crop, data)

    if intent.subtopic == "disease_overview":
        return render_disease_overview(kb)
    if intent.subtopic == "soil":
        return render_soil(kb)
    if intent.subtopic in _FIXED:
        return _FIXED[intent.subtopic]
    return fallback.select(intent.text)
