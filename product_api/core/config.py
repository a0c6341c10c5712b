"""
Core configuration and settings for the Product API
Values are read from environment variables and an optional .env file
"""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Application configuration with environment variable support"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Service information
    service_name: str = Field(default="product-api")
    service_version: str = Field(default="1.0.0")
    environment: str = Field(default="development")

    # Server configuration
    port: int = Field(default=4200)
    host: str = Field(default="0.0.0.0")

    # Database configuration
    database_url: str = Field(default="sqlite+aiosqlite:///./products.db")
    database_echo: bool = Field(default=False)

    # CORS: the single origin allowed to call the API from a browser
    frontend_url: Optional[str] = Field(default=None)

    # Logging configuration
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="console")
    log_to_file: bool = Field(default=False)
    log_to_console: bool = Field(default=True)
    log_file_path: str = Field(default="logs/product-api.log")

    # Request tracing
    correlation_id_header: str = Field(default="X-Correlation-ID")
    enable_tracing: bool = Field(default=False)

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


# Global config instance
config = Config()
