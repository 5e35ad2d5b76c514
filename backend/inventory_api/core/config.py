from functools import lru_cache
from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings


DEFAULT_PRODUCTS_FILE = Path(__file__).resolve().parent.parent / "data" / "products.json"


class Settings(BaseSettings):
    # API Configuration
    app_name: str = "Product Inventory API"
    version: str = "1.0.0"
    debug: bool = False

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 3000

    # CORS Configuration
    cors_origins: list = ["*"]

    # Storage Configuration
    # Single JSON array file, created empty on first access
    products_file: Path = DEFAULT_PRODUCTS_FILE
    # Optional directory of static assets served at "/" after the API routes
    static_dir: Optional[str] = None

    # Logging Configuration
    log_level: str = "INFO"
    # Enables the rotating file handler when set
    log_dir: Optional[str] = None

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
