# -*- coding: utf-8 -*-
"""
Catalogue Admin Configuration
"""
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # App info
    APP_NAME: str = "Parts Catalogue Admin"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Catalogue back end
    API_BASE_URL: str = "http://localhost:3000/api"
    API_TOKEN: str = ""
    API_TIMEOUT: float = 30.0
    API_RETRIES: int = 3

    # Paging
    DEFAULT_PAGE_SIZE: int = 50
    SELECT_PAGE_SIZE: int = 20
    # Sub-types are looked up inside the first page of parent records
    SUBTYPE_PARENT_PAGE_SIZE: int = 10
    SORT_ORDER: str = "asc"

    # Cosmetic delay for client-side "load more" (seconds, 0 disables)
    CLIENT_LOAD_DELAY: float = 0.0

    # Logging
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
