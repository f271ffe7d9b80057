import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_OPENAI_BASE_URL = "https://api.openai.com/v1"
DEFAULT_VISION_MODEL = "gpt-4o"


@dataclass(frozen=True)
class Config:
    openai_api_key: Optional[str] = None
    openai_base_url: str = DEFAULT_OPENAI_BASE_URL
    vision_model: str = DEFAULT_VISION_MODEL
    upstream_timeout: Optional[float] = None
    log_level: str = "INFO"
    log_dir: Optional[str] = None
    host: str = "0.0.0.0"
    port: int = 8000

    @property
    def api_configured(self) -> bool:
        return bool(self.openai_api_key)

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        _timeout = os.getenv("UPSTREAM_TIMEOUT")

        return cls(
            openai_api_key=os.getenv("OPENAI_API_KEY") or None,
            openai_base_url=os.getenv("OPENAI_BASE_URL") or DEFAULT_OPENAI_BASE_URL,
            vision_model=os.getenv("VISION_MODEL_NAME") or DEFAULT_VISION_MODEL,
            upstream_timeout=float(_timeout) if _timeout else None,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_dir=os.getenv("LOG_DIR") or None,
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
        )
