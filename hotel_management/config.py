"""
Application settings
Read from environment variables or a local .env file
"""
import logging
from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    APP_NAME: str = "Hotel Management"
    DEBUG: bool = False

    # Database
    DATABASE_URL: str = "sqlite:///./hotel.db"

    # Logging
    LOG_LEVEL: str = "INFO"

    # Check-in room listing
    PAGE_SIZE: int = 12
    PRICE_TIER_LOW_MAX: int = 1_000_000     # tier 1: price_day below this
    PRICE_TIER_MID_MAX: int = 3_000_000     # tier 2: below this, tier 3: the rest

    # Load demo rooms, guests and menu on start-up
    SEED_SAMPLE_DATA: bool = False

    model_config = ConfigDict(env_file=".env", case_sensitive=True)


settings = Settings()


def configure_logging(level: str = None) -> None:
    """Set the root logger level and format at start-up"""
    level = (level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
