"""
Configuration settings for the application
"""

from datetime import timedelta

from pydantic_settings import BaseSettings

from app.services.search.connection_rules import ConnectionRules
from dataset.config import DATASET_PATH as DEFAULT_DATASET_PATH


class Settings(BaseSettings):
    """Application settings"""
    
    # App settings
    APP_NAME: str = "SkyPath Flight Search API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    
    # Dataset
    DATASET_PATH: str = DEFAULT_DATASET_PATH
    
    # API settings
    API_PREFIX: str = "/api"
    
    # Search settings
    MAX_STOPS: int = 2
    
    # Connection time rules (in minutes)
    MINIMUM_CONNECTION_TIME_DOMESTIC: int = 45
    MINIMUM_CONNECTION_TIME_INTERNATIONAL: int = 90
    MAXIMUM_LAYOVER_TIME: int = 360  # 6 hours
    
    # CORS
    CORS_ORIGINS: list = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://localhost:8000",
    ]

    def connection_rules(self) -> ConnectionRules:
        """Build the layover policy used by the search algorithm"""
        return ConnectionRules(
            min_domestic_layover=timedelta(minutes=self.MINIMUM_CONNECTION_TIME_DOMESTIC),
            min_international_layover=timedelta(minutes=self.MINIMUM_CONNECTION_TIME_INTERNATIONAL),
            max_layover=timedelta(minutes=self.MAXIMUM_LAYOVER_TIME)
        )
    
    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
