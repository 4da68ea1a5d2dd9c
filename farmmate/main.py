import logging
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from farmmate.config import settings
from farmmate.state import lifespan, state
from farmmate.schema import ChatRequest, ChatResponse, HealthResponse, CropsResponse
from farmmate.engine import texts

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="FarmMate AI - Farming Assistant", version="0.1.0", lifespan=lifespan)
app.state.settings = settings

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins, allow_credentials=True,
    allow_methods=["*"], allow_headers=["*"]
)

@app.get("/health", response_model=HealthResponse)
def health():
    store = state.store
    loaded = store is not None and store.is_loaded
    return {
        "ok": True,
        "knowledge_base": "loaded" if loaded else "unavailable",
        "error": store.error if store else None,
    }

@app.post("/chat", response_model=ChatResponse)
def chat(body: ChatRequest):
    message = body.message.strip()
    if message == "":
        raise HTTPException(400, detail="Message must not be empty.")
    if state.assistant is None:
        return {"response": texts.LOADING}
    return {"response": state.assistant.generate_response(message)}

@app.get("/crops", response_model=CropsResponse)
def crops():
    kb = state.store.kb if state.store else None
    return {"crops": list(kb.crops) if kb else []}

@app.post("/knowledge/reload", response_model=HealthResponse)
def reload_knowledge():
    if state.store is None:
        raise HTTPException(503, detail=texts.LOADING)
    if not state.store.load():
        raise HTTPException(503, detail=state.store.error)
    logger.info("Knowledge base reloaded from %s", state.store.source)
    return {"ok": True, "knowledge_base": "loaded", "error": None}
