from __future__ import annotations

import os

from pydantic import BaseModel


class Settings(BaseModel):
    MONGO_URL: str = os.getenv("MONGO_URL", "mongodb://localhost:27017")
    MONGO_DB: str = os.getenv("MONGO_DB", "academa")

    CORS_ALLOW_ORIGINS: list[str] = os.getenv("CORS_ALLOW_ORIGINS", "http://localhost:8501").split(
        ","
    )

    # client side (Streamlit board)
    API_BASE_URL: str = os.getenv("API_BASE_URL", "http://localhost:5000")
    API_TIMEOUT_S: float = float(os.getenv("API_TIMEOUT_S", "10"))
    NOTIFICATION_TTL_S: float = float(os.getenv("NOTIFICATION_TTL_S", "3"))

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
