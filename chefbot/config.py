"""Configuration management for ChefBot using Pydantic."""

import logging
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CHEFBOT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Activity log files (append-only, human-readable)
    chat_log_path: Path = Field(
        default=Path("chat_log.txt"), description="Log of every user input"
    )
    order_history_path: Path = Field(
        default=Path("order_history.txt"), description="Log of confirmed orders"
    )
    recommendations_log_path: Path = Field(
        default=Path("recommendations.txt"),
        description="Log of successful recommendation queries",
    )

    # Input Configuration
    max_input_length: int = Field(
        default=1000, gt=0, description="Maximum accepted length of one input line"
    )

    # Logging Configuration
    log_level: str = Field(default="WARNING", description="Logging level")

    def model_post_init(self, __context) -> None:
        """Validate configuration after initialization."""
        if self.log_level.upper() not in logging.getLevelNamesMapping():
            logger.warning(f"Unknown LOG_LEVEL '{self.log_level}' - using WARNING")


# Global config instance
config: Config | None = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global config
    if config is None:
        config = Config()
    return config


def setup_logging(cfg: Config | None = None) -> None:
    """Configure logging for the application."""
    if cfg is None:
        cfg = get_config()

    log_level = getattr(logging, cfg.log_level.upper(), logging.WARNING)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
