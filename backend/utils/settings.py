# backend/utils/settings.py

import os
from typing import List, Literal

from pydantic import BaseModel


class Settings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 3000
    address_format: Literal["bare", "marked"] = "bare"
    row_failure_policy: Literal["lenient", "strict"] = "lenient"
    cors_allowed_origins: List[str] = ["*"]
    log_level: str = "INFO"


def load_settings() -> Settings:
    """
    Build Settings from the environment.
    Unset variables fall back to the model defaults; bad values raise ValidationError.
    """
    env = {
        "host": os.getenv("HOST"),
        "port": os.getenv("PORT"),
        "address_format": os.getenv("ADDRESS_FORMAT"),
        "row_failure_policy": os.getenv("ROW_FAILURE_POLICY"),
        "log_level": os.getenv("LOG_LEVEL"),
    }

    origins = os.getenv("CORS_ALLOWED_ORIGINS")
    if origins:
        env["cors_allowed_origins"] = [o.strip() for o in origins.split(",") if o.strip()]

    return Settings(**{k: v for k, v in env.items() if v is not None})
