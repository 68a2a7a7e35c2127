from typing import Optional

from pydantic_settings import BaseSettings
import os

from app.core.game_config import Difficulty

class Settings(BaseSettings):
    DEBUG: bool = os.getenv("DEBUG", "True") == "True"
    # Unknown difficulties fail here, when settings load
    DEFAULT_DIFFICULTY: Difficulty = Difficulty.EASY
    DEFAULT_BOARD_SIZE: int = int(os.getenv("DEFAULT_BOARD_SIZE", "3"))
    # Chance that a medium-difficulty move is picked at random instead of searched
    MEDIUM_RANDOM_MOVE_RATE: float = 0.5
    # Seconds the computer "thinks" before answering a human move
    AI_THINK_DELAY: float = 0.5
    RANDOM_SEED: Optional[int] = None
    # In-memory session bounds
    MAX_SESSIONS: int = 1000
    SESSION_IDLE_TIMEOUT: float = 3600.0

    class Config:
        env_file = ".env"

settings = Settings()
