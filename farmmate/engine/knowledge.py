import logging
from pathlib import Path
from typing import Optional

import httpx
from pydantic import ValidationError

from farmmate.schema import KnowledgeBase

logger = logging.getLogger(__name__)


class KnowledgeBaseLoadError(Exception):
    """The crop data could not be read, fetched or validated."""


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))

def load_knowledge_base(source: str, timeout: float = 10.0) -> KnowledgeBase:
    """Read the crop JSON document from a file path or an http(s) URL."""
    try:
        if _is_url(source):
            r = httpx.get(source, timeout=timeout, follow_redirects=True)
            r.raise_for_status()
            raw = r.text
        else:
            raw = Path(source).read_text(encoding="utf-8")
        return KnowledgeBase.model_validate_json(raw)
    except (OSError, httpx.HTTPError, ValidationError) as e:
        raise KnowledgeBaseLoadError(f"{source}: {e}") from e


class KnowledgeStore:
    """Holds the one loaded KnowledgeBase for the life of the process.

    ``kb`` is None until a load succeeds. A failed reload keeps serving the
    previously loaded data; ``error`` holds the last failure either way.
    """

    def __init__(self, source: str, timeout: float = 10.0):
        self.source = source
        self.timeout = timeout
        self._kb: Optional[KnowledgeBase] = None
        self._error: Optional[str] = None

    @classmethod
    def from_knowledge_base(cls, kb: KnowledgeBase, source: str = "<memory>") -> "KnowledgeStore":
        store = cls(source)
        store._kb = kb
        return store

    @property
    def kb(self) -> Optional[KnowledgeBase]:
        return self._kb

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def is_loaded(self) -> bool:
        return self._kb is not None

    def load(self) -> bool:
        try:
            kb = load_knowledge_base(self.source, self.timeout)
        except KnowledgeBaseLoadError as e:
            self._error = str(e)
            logger.error("Error loading crops data: %s", e)
            return False
        # swap the whole object; readers never see a half-built one
        self._kb = kb
        self._error = None
        logger.info("Loaded crops data for %d crops from %s", len(kb.crops), self.source)
        return True
