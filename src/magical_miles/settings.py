from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServiceSettings(BaseSettings):
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["text", "json"] = "text"
    environment: str = "development"
    host: str = "0.0.0.0"
    port: int = Field(default=8000, ge=1, le=65535)

    otel_enabled: bool = Field(
        default=False,
        description="Export traces and metrics to an OTLP collector",
    )
    otel_endpoint: str = "http://otel-collector:4317"

    model_config = SettingsConfigDict(env_prefix="APP_")


class FareSettings(BaseSettings):
    """Tariff and fallback assumptions used by the fare engine."""

    base_fare: float = Field(default=2.0, ge=0.0)
    per_km_rate: float = Field(default=1.5, ge=0.0)
    per_min_rate: float = Field(default=0.5, ge=0.0)
    fallback_speed_kmh: float = Field(
        default=30.0,
        gt=0.0,
        le=200.0,
        description="Average speed used to synthesize a duration from a great-circle distance",
    )
    default_member_count: int = Field(
        default=4,
        ge=1,
        le=8,
        description="Group size used when the caller does not supply one",
    )
    currency: str = "Galleons"

    model_config = SettingsConfigDict(env_prefix="FARE_")


class OSRMSettings(BaseSettings):
    base_url: str = "https://router.project-osrm.org"
    timeout: float = Field(default=5.0, gt=0.0, le=60.0)

    model_config = SettingsConfigDict(env_prefix="OSRM_")

    @field_validator("base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("OSRM base URL must start with http:// or https://")
        return v.rstrip("/")


class NominatimSettings(BaseSettings):
    base_url: str = "https://nominatim.openstreetmap.org"
    user_agent: str = "MagicalMiles-HackathonApp/1.0"
    timeout: float = Field(default=5.0, gt=0.0, le=60.0)

    model_config = SettingsConfigDict(env_prefix="NOMINATIM_")

    @field_validator("base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("Nominatim base URL must start with http:// or https://")
        return v.rstrip("/")


class GeminiSettings(BaseSettings):
    api_key: str = ""
    model: str = "gemini-2.0-flash"
    enabled: bool = True

    model_config = SettingsConfigDict(env_prefix="GEMINI_")


class PaymentSettings(BaseSettings):
    mock_delay_seconds: float = Field(
        default=1.5,
        ge=0.0,
        le=10.0,
        description="Simulated wallet latency for the mock provider",
    )

    model_config = SettingsConfigDict(env_prefix="PAYMENT_")


class APISettings(BaseSettings):
    key: str = ""

    model_config = SettingsConfigDict(env_prefix="API_")

    @model_validator(mode="after")
    def validate_credentials_provided(self) -> "APISettings":
        if not self.key:
            raise ValueError("Required credential not provided: API_KEY")
        return self


class CORSSettings(BaseSettings):
    origins: str = "http://localhost:5173,http://localhost:3000"

    model_config = SettingsConfigDict(env_prefix="CORS_")


class Settings(BaseSettings):
    service: ServiceSettings = Field(default_factory=ServiceSettings)
    fare: FareSettings = Field(default_factory=FareSettings)
    osrm: OSRMSettings = Field(default_factory=OSRMSettings)
    nominatim: NominatimSettings = Field(default_factory=NominatimSettings)
    gemini: GeminiSettings = Field(default_factory=GeminiSettings)
    payment: PaymentSettings = Field(default_factory=PaymentSettings)
    api: APISettings = Field(default_factory=APISettings)
    cors: CORSSettings = Field(default_factory=CORSSettings)

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        case_sensitive=False,
    )


def get_settings() -> Settings:
    """Load and validate settings from environment variables."""
    return Settings()
