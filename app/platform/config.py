from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── App ─────────────────────────────────────
    APP_NAME: str = "Vudu A11y"
    APP_DESCRIPTION: str = "Accessibility scan reports with WCAG compliance scoring."
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"
    DEBUG: bool = True
    API_V1_PREFIX: str = "/api/v1"

    # ── Logging ─────────────────────────────────
    LOG_DIR: str = "logs"
    LOG_FILE_NAME: str = "vudu_a11y.log"
    LOG_LEVEL: str = "INFO"

    # ── Scanning ────────────────────────────────
    SCAN_DELAY_SECONDS: float = 2.0
    DOMAIN_SCAN_DELAY_SECONDS: float = 3.0

    # Seed for the synthetic domain-wide fixture; None means a fresh RNG per scan
    DOMAIN_SCAN_SEED: Optional[int] = None

    # Score reported when a scan has no passed or failed checks at all
    COMPLIANCE_SCORE_FALLBACK: int = Field(default=100, ge=0, le=100)

    class Config:
        env_file = str(Path(__file__).parent.parent.parent / ".env")
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


settings = Settings()
