from pydantic import BaseModel, ConfigDict, Field
from typing import Literal, Optional, Tuple, List, Dict

CropSubtopic = Literal["disease","variety","fertilizer","growing","harvest","overview"]
GeneralSubtopic = Literal[
    "disease_overview","greeting","thanks","weather","soil",
    "market","fertilizer_general","planting_season","fallback",
]

# ---------- Knowledge base ----------
class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)

class GrowingConditions(_Frozen):
    soil: str
    rainfall: str
    temperature: str
    regions: str

class DiseaseEntry(_Frozen):
    name: str
    symptoms: str
    prevention: Tuple[str, ...] = ()
    treatment: Optional[str] = None

class Pest(_Frozen):
    # data files carry extra descriptive fields per pest; only the name is rendered
    model_config = ConfigDict(frozen=True, extra="allow")
    name: str

class CropProfile(_Frozen):
    description: str
    growing_conditions: GrowingConditions
    common_varieties: Tuple[str, ...] = ()
    diseases: Tuple[DiseaseEntry, ...] = ()
    pests: Tuple[Pest, ...] = ()
    fertilizer_recommendation: str
    harvesting: str

class KnowledgeBase(_Frozen):
    crops: Dict[str, CropProfile]
    general_farming: Dict[str, Tuple[str, ...]] = Field(default_factory=dict)

# ---------- API ----------
class ChatRequest(BaseModel):
    message: str

class ChatResponse(BaseModel):
    response: str

class HealthResponse(BaseModel):
    ok: bool
    knowledge_base: Literal["loaded","unavailable"]
    error: Optional[str] = None

class CropsResponse(BaseModel):
    crops: List[str]
