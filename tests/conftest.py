import random

import pytest

from farmmate.config import DEFAULT_DATA_SOURCE
from farmmate.engine.assistant import Assistant
from farmmate.engine.fallback import FallbackSelector
from farmmate.engine.knowledge import KnowledgeStore, load_knowledge_base
from farmmate.schema import CropProfile, GrowingConditions, KnowledgeBase


@pytest.fixture(scope="session")
def kb() -> KnowledgeBase:
    return load_knowledge_base(DEFAULT_DATA_SOURCE)


@pytest.fixture
def store(kb):
    return KnowledgeStore.from_knowledge_base(kb)


@pytest.fixture
def fallback():
    return FallbackSelector(rng=random.Random(7))


@pytest.fixture
def assistant(store, fallback):
    return Assistant(store, fallback)


def make_profile(**overrides) -> CropProfile:
    data = {
        "description": "Test crop",
        "growing_conditions": GrowingConditions(
            soil="loam", rainfall="1000mm", temperature="25°C", regions="Ashanti"),
        "common_varieties": ("Alpha", "Beta"),
        "diseases": (),
        "pests": (),
        "fertilizer_recommendation": "NPK",
        "harvesting": "After 3 months",
    }
    data.update(overrides)
    return CropProfile(**data)
