"""Application configuration settings"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes", "on"}


class Config:
    APP_ENV = os.getenv("APP_ENV", "development")
    TESTING = _env_flag("TESTING")
    DEBUG = _env_flag("DEBUG")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH", "")
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )

    # Postgresql Database settings (read by Prisma from the environment)
    DATABASE_URL: str = os.getenv("DATABASE_URL", "")

    # Paging
    MAX_NUMBER_OF_RECORD_TO_GET: int = int(
        os.getenv("MAX_NUMBER_OF_RECORD_TO_GET", "50")
    )
    DEFAULT_TAKE: int = int(os.getenv("DEFAULT_TAKE", "15"))


class DevelopmentConfig(Config):
    """Development configuration"""

    DEBUG = True


class TestingConfig(Config):
    """Testing configuration"""

    TESTING = True
    MAX_NUMBER_OF_RECORD_TO_GET = 10
    DEFAULT_TAKE = 10


class ProductionConfig(Config):
    """Production configuration"""

    pass


# Configuration dictionary
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env=None):
    """Get configuration based on environment"""
    if env is None:
        env = os.getenv("APP_ENV", "development")
    return config.get(env, config["default"])


@dataclass(frozen=True)
class ApiSettings:
    """Tunables the HTTP layer needs, handed out by the DI container."""

    max_number_of_record_to_get: int
    default_take: int = Config.DEFAULT_TAKE

    @classmethod
    def from_config(cls, cfg: type[Config] = Config) -> "ApiSettings":
        return cls(
            max_number_of_record_to_get=cfg.MAX_NUMBER_OF_RECORD_TO_GET,
            default_take=cfg.DEFAULT_TAKE,
        )

    def take_or_default(self, take: Optional[int]) -> int:
        """The requested take, or the default capped at the maximum."""
        if take is not None:
            return take
        return min(self.default_take, self.max_number_of_record_to_get)
