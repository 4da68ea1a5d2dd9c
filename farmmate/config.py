# farmmate/config.py
import os
from pathlib import Path
from typing import List, Optional
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()

DEFAULT_DATA_SOURCE = str(Path(__file__).resolve().parent / "data" / "crops_data.json")


def _optional_int(value: Optional[str]) -> Optional[int]:
    if value is None or value.strip() == "":
        return None
    return int(value)


class Settings(BaseModel):
    # 🌱 Knowledge base (file path or http(s) URL)
    data_source: str = os.getenv("FARMMATE_DATA_SOURCE", DEFAULT_DATA_SOURCE)
    fetch_timeout: float = float(os.getenv("FARMMATE_FETCH_TIMEOUT", "10"))

    # 🎲 Pin the random fallback pick (unset = unseeded)
    fallback_seed: Optional[int] = _optional_int(os.getenv("FARMMATE_FALLBACK_SEED"))

    log_level: str = os.getenv("FARMMATE_LOG_LEVEL", "INFO").upper()

    cors_origins: List[str] = [
        o.strip() for o in os.getenv("FARMMATE_CORS_ORIGINS", "*").split(",") if o.strip()
    ]

settings = Settings()
