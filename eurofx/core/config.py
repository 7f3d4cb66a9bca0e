from functools import lru_cache
from pydantic import AnyHttpUrl, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ECB_DAILY_URL = "https://www.ecb.europa.eu/stats/eurofxref/eurofxref-daily.xml"


class Settings(BaseSettings):
    """Application settings loaded from environment with defaults.

    Environment variable mapping follows pydantic's rules (e.g., APP_NAME, DEBUG, RATES_URL,
    HTTP_TIMEOUT_SECONDS, FETCH_RETRIES).
    """

    # Basic app metadata
    app_name: str = "EuroFX Converter"
    debug: bool = False
    version: str = "0.1.0"

    # Pivot currency of the reference feed (implicit rate 1.0)
    base_currency: str = "EUR"

    # Reference-rate document
    rates_url: AnyHttpUrl = ECB_DAILY_URL
    http_timeout_seconds: float = Field(5.0, gt=0)

    # 0 means a failed fetch surfaces immediately
    fetch_retries: int = Field(0, ge=0, le=5)
    fetch_backoff_seconds: float = Field(0.5, ge=0)

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    @field_validator("base_currency")
    @classmethod
    def normalize_base(cls, v: str) -> str:
        v = v.strip().upper()
        if not v:
            raise ValueError("base_currency must not be empty")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
