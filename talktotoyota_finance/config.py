"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "talktotoyota-finance"
    log_level: str = "INFO"
    api_prefix: str = "/api"

    # CORS
    cors_origin: str = "*"

    # Applied by the HTTP layer when a request omits salesTaxRate
    default_sales_tax_rate: float = 0.08


settings = Settings()
