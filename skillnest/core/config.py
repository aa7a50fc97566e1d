import os
import logging
from pydantic import BaseModel, Field
from typing import List, Optional
from dotenv import load_dotenv

load_dotenv()

class AISettings(BaseModel):
    groq_api_key: Optional[str] = Field(default_factory=lambda: os.getenv("GROQ_API_KEY"))
    base_url: str = Field(
        default_factory=lambda: os.getenv(
            "AI_BASE_URL", "https://api.groq.com/openai/v1/chat/completions"
        )
    )
    model_name: str = Field(default_factory=lambda: os.getenv("AI_MODEL_NAME", "llama-3.3-70b-versatile"))
    timeout_seconds: float = Field(default_factory=lambda: float(os.getenv("AI_TIMEOUT_SECONDS", "60")))

class Config(BaseModel):
    app_name: str = "SkillNest API"
    environment: str = os.getenv("APP_ENV", "development")
    api_prefix: str = "/api"
    version: str = "1.0.0"

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./skillnest.db")

    # Static bearer token shared with the frontend. Unset disables the check.
    function_key: Optional[str] = os.getenv("SKILLNEST_FUNCTION_KEY")
    user_id_header: str = "X-User-Id"
    request_id_header: str = "X-Request-ID"

    # AI Components
    ai: AISettings = Field(default_factory=AISettings)

    # Uploads
    max_pdf_bytes: int = 10 * 1024 * 1024

    # CORS - comma-separated origins loaded from env.
    cors_origins: List[str] = Field(
        default_factory=lambda: [
            o.strip()
            for o in os.getenv("CORS_ORIGINS", "*").split(",")
            if o.strip()
        ]
    )

settings = Config()

# --- Startup Validation ---
_logger = logging.getLogger(__name__)
if not settings.ai.groq_api_key:
    _logger.warning("⚠ GROQ_API_KEY is not set; AI endpoints will return 500 until it is configured.")
if settings.environment != "development" and not settings.function_key:
    _logger.warning("⚠ SKILLNEST_FUNCTION_KEY is not set; endpoints accept unauthenticated requests.")
