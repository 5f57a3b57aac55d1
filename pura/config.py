from pydantic_settings import BaseSettings
from functools import lru_cache

class Settings(BaseSettings):
    """Application settings"""
    # Storage
    database_url: str = "sqlite+aiosqlite:///./pura.db"

    # Cart
    bundle_discount_rate: float = 0.15
    placeholder_price: float = 29.99
    placeholder_image: str = "/Pura.png"

    # Quiz
    default_language: str = "en"

    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    class Config:
        env_file = '.env'
        env_prefix = 'PURA_'


@lru_cache
def get_settings() -> Settings:
    return Settings()
