from pydantic_settings import BaseSettings
from typing import Optional

class Settings(BaseSettings):
    PROJECT_NAME: str = "CRM Admin"
    LOG_LEVEL: str = "INFO"

    # Artificial latency applied to every service call
    MOCK_DELAY_MS: int = 500

    # Listing
    DEFAULT_PAGE_SIZE: int = 5
    MAX_PAGE_SIZE: int = 100

    # Fix the seed to get the same mock records on every start
    SEED_RANDOM: Optional[int] = None

    # Oldest audit entries are dropped beyond this many
    MAX_AUDIT_ENTRIES: int = 10000

    class Config:
        case_sensitive = True

settings = Settings()
