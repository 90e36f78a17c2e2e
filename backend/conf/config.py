"""Configuration module for the backend."""

import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()


def _parse_origins(raw: str) -> List[str]:
    """Split a comma-separated origin list, dropping blanks."""
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


class ConfigMeta(type):
    """Metaclass to prevent direct instantiation and enforce singleton attributes."""

    def __call__(cls, *args: object, **kwargs: object) -> None:
        """Prevent direct instantiation."""
        raise TypeError("Config cannot be instantiated directly. Use class attributes.")


class Config(metaclass=ConfigMeta):
    """Singleton configuration class. Access attributes directly via the class."""

    # =========================================================================
    # Path Configuration
    # =========================================================================
    BASE_DIR: Path = Path(__file__).parent.parent.parent
    DATA_DIR: Path = BASE_DIR / "data"
    CONTENT_PATH: Path = Path(os.getenv("CONTENT_PATH", str(DATA_DIR / "poetry_book.txt")))
    FRONTEND_BUILD_DIR: Path = Path(
        os.getenv("FRONTEND_BUILD_DIR", str(BASE_DIR / "frontend" / "build"))
    )

    # =========================================================================
    # Server Configuration
    # =========================================================================
    FLASK_PORT: int = int(os.getenv("PORT", "5000"))
    APP_ENV: str = os.getenv("APP_ENV", "development")
    SERVE_FRONTEND: bool = APP_ENV.lower() == "production"

    # "*" is the explicit allow-all setting; anything else is an exact allowlist
    ALLOWED_ORIGINS: List[str] = _parse_origins(
        os.getenv("ALLOWED_ORIGINS", "http://localhost:3000")
    )

    # =========================================================================
    # Gemini Configuration
    # =========================================================================
    GEMINI_API_KEY: Optional[str] = os.getenv("GEMINI_API_KEY")
    GEMINI_MODEL_NAME: str = os.getenv("GEMINI_MODEL_NAME", "gemini-2.0-flash")
    GEMINI_API_URL: str = (
        "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
    )
    # Slightly higher temperature for more interpretive answers about poetry
    GEMINI_TEMPERATURE: float = 0.5
    GEMINI_TOP_P: float = 0.9
    GEMINI_TOP_K: int = 40
    GEMINI_MAX_TOKENS: int = 1000

    UPSTREAM_TIMEOUT: float = float(os.getenv("UPSTREAM_TIMEOUT", "60"))
