"""
Settings
Configuration management for bazel-version.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


LOG_LEVEL_ENV = "BAZEL_VERSION_LOG_LEVEL"


@dataclass
class Config:
    """Package configuration."""
    environment: str = "development"
    log_level: str = ""  # Set in __post_init__
    
    def __post_init__(self):
        # Library default stays quiet; rejections are DEBUG records.
        if not self.log_level:
            self.log_level = "ERROR" if self.is_production else "WARNING"
    
    @property
    def is_production(self) -> bool:
        return self.environment == "production"


class ConfigManager:
    """Configuration manager - loads and provides config."""
    
    _instance: Optional["ConfigManager"] = None
    
    def __init__(self):
        self._config: Optional[Config] = None
    
    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance
    
    def load(self) -> Config:
        """Load configuration from .env and the environment."""
        load_dotenv()
        self._config = Config(
            environment=os.getenv("ENVIRONMENT", "development"),
            log_level=os.getenv(LOG_LEVEL_ENV, ""),
        )
        return self._config
    
    def get(self) -> Config:
        """Get current configuration, loading it on first use."""
        if self._config is None:
            return self.load()
        return self._config
