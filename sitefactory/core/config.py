"""Configuration and settings"""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings from environment variables"""

    # OpenAI API
    openai_api_key: str = Field(default="")
    openai_model: str = Field(default="gpt-4o")
    openai_temperature: float = Field(default=0.8)
    openai_timeout_seconds: float = Field(default=90.0)

    # Layout counter (Redis)
    redis_url: str = Field(default="redis://localhost:6379/0")
    redis_enabled: bool = Field(default=True)
    layout_counter_prefix: str = Field(default="layout_counter:")

    # Website storage
    website_store_path: str = Field(default="./websites")

    # Prompt grounding
    template_reference_count: int = Field(default=3)
    max_reference_images: int = Field(default=5)
    template_cdn_base: str = Field(default="https://cdn.sitefactory.app/templates")
    copy_language: str = Field(default="de")

    # Web presence analysis
    presence_timeout_seconds: float = Field(default=6.0)
    presence_outdated_years: int = Field(default=4)
    presence_poor_score: int = Field(default=40)

    # Frontend
    frontend_url: str = Field(default="http://localhost:5173")

    # Environment
    environment: str = Field(default="development")

    # API Configuration
    api_title: str = "Site Factory API"
    api_version: str = "0.1.0"

    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
