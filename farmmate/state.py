# farmmate/state.py
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from farmmate.config import settings
from farmmate.engine.assistant import Assistant
from farmmate.engine.fallback import FallbackSelector
from farmmate.engine.knowledge import KnowledgeStore

class State:
    store: Optional[KnowledgeStore] = None
    assistant: Optional[Assistant] = None

state = State()

def init_knowledge():
    store = KnowledgeStore(settings.data_source, timeout=settings.fetch_timeout)
    # a failed load is logged by the store; the assistant answers with the loading message
    store.load()
    state.store = store
    state.assistant = Assistant(store, FallbackSelector(seed=settings.fallback_seed))

def close_knowledge():
    state.store = None
    state.assistant = None

@asynccontextmanager
async def lifespan(app: FastAPI):
    init_knowledge()
    yield
    close_knowledge()
