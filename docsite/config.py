"""Runtime configuration read from the environment."""

import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

CONTENT_ROOT = Path(__file__).parent / "content"

# Per-call bound for remote content store requests
DEFAULT_STORE_TIMEOUT = 10.0


class Settings(BaseModel):
    store_backend: Literal["local", "remote"] = "local"
    docs_service_url: str = "http://localhost:8888"
    store_timeout: float = Field(default=DEFAULT_STORE_TIMEOUT, gt=0)
    content_root: Path = CONTENT_ROOT
    log_level: str = "INFO"


def _service_url(addr: str) -> str:
    """Accept both ``host:port`` and full URLs for the documents service."""
    if "://" in addr:
        return addr.rstrip("/")
    return f"http://{addr}"


def load_settings() -> Settings:
    """Build :class:`Settings` from ``DOCS_*`` / ``LOG_LEVEL`` environment variables."""
    values = {}
    if os.getenv("DOCS_STORE"):
        values["store_backend"] = os.environ["DOCS_STORE"].lower()
    if os.getenv("DOCS_SERVICE_ADDR"):
        values["docs_service_url"] = _service_url(os.environ["DOCS_SERVICE_ADDR"])
    if os.getenv("DOCS_STORE_TIMEOUT"):
        values["store_timeout"] = os.environ["DOCS_STORE_TIMEOUT"]
    if os.getenv("DOCS_CONTENT_ROOT"):
        values["content_root"] = os.environ["DOCS_CONTENT_ROOT"]
    if os.getenv("LOG_LEVEL"):
        values["log_level"] = os.environ["LOG_LEVEL"].upper()
    return Settings(**values)
