# plot_device/config.py
import os
from typing import List, Optional

from pydantic import BaseModel


class Settings(BaseModel):
    # unset means the public layer calls the backend handler in-process
    backend_url: Optional[str] = None
    backend_timeout: float = 10.0
    log_level: str = "INFO"
    shuffle_seed: Optional[int] = None
    cors_origins: List[str] = ["http://localhost:3000", "http://localhost:5173"]
    host: str = "127.0.0.1"
    port: int = 8080


def _optional(name: str) -> Optional[str]:
    value = os.getenv(name, "").strip()
    return value or None


def load_settings() -> Settings:
    seed = _optional("PLOT_DEVICE_SHUFFLE_SEED")
    origins = os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:5173")
    return Settings(
        backend_url=_optional("PLOT_DEVICE_BACKEND_URL"),
        backend_timeout=float(_optional("PLOT_DEVICE_BACKEND_TIMEOUT") or "10.0"),
        log_level=os.getenv("PLOT_DEVICE_LOG_LEVEL", "INFO").upper(),
        shuffle_seed=int(seed) if seed is not None else None,
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8080")),
    )
