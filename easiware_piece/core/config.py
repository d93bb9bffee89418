"""
Piece configuration settings.
"""

import os
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Piece settings."""

    # Project settings
    PROJECT_NAME: str = "Easiware"
    VERSION: str = "0.1.0"
    PIECE_DESCRIPTION: str = "Lovely customer support software"

    # Easiware API settings
    EASIWARE_API_URL: str = os.getenv("EASIWARE_API_URL", "https://api.easiware.com")
    EASIWARE_API_KEY: str = os.getenv("EASIWARE_API_KEY", "")
    EASIWARE_HTTP_TIMEOUT: float = float(os.getenv("EASIWARE_HTTP_TIMEOUT", "30"))
    EASIWARE_USER_AGENT: str = "EasiwarePiece/0.1.0"

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "allow"  # Allow extra environment variables


# Create global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get piece settings."""
    return settings
