# steptracker/config/settings.py

from typing import List, Optional

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    ENV: str = "development"
    INDIVIDUALS_CSV: str = "individuals.csv"
    GROUPS_CSV: str = "groups.csv"
    GROUP_MAX_MEMBERS: int = 5
    TOP_ACHIEVERS: int = 3
    REWARD_POINTS: List[int] = [100, 75, 50]
    GOAL_HISTORY_DAYS: int = 7
    AUTOSAVE: bool = True
    LOG_LEVEL: str = "INFO"
    SAMPLE_SEED: Optional[int] = None

    class Config:
        env_file = ".env"
        env_prefix = "STEPTRACKER_"

settings = Settings()
