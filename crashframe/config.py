"""
Notifier configuration management.
"""

from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Backtrace settings loaded from environment variables."""
    
    # Code hunks
    code_hunks_enabled: bool = True
    project_root: str = ""  # Empty means unset
    vendor_paths: List[str] = ["vendor/bundle"]
    
    class Config:
        env_file = ".env"
        env_prefix = "CRASHFRAME_"
        case_sensitive = False


# Global settings instance
settings = Settings()
