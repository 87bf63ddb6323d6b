# museummart/config.py
"""Runtime settings read from the environment."""

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    seed_sample_data: bool = True
    cors_origins: Tuple[str, ...] = ("*",)
    max_cart_quantity: int = 999


@lru_cache
def get_settings() -> Settings:
    origins = os.getenv("MUSEUMMART_CORS_ORIGINS", "*")
    return Settings(
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        seed_sample_data=_env_bool("MUSEUMMART_SEED_SAMPLE_DATA", True),
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()) or ("*",),
        max_cart_quantity=int(os.getenv("MUSEUMMART_MAX_CART_QUANTITY", "999")),
    )
