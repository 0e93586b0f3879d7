# config.py
import os
from dotenv import load_dotenv
from typing import Optional, ClassVar, Self

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    _instance: ClassVar[Optional["Settings"]] = None

    def __new__(cls) -> Self:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if getattr(self, "_initialized", False):
            return

        self.database_url = os.getenv("DATABASE_URL", "sqlite:///team_roster.db")
        self.db_echo = _env_flag("DB_ECHO", "0")
        self.db_pool_pre_ping = _env_flag("DB_POOL_PRE_PING", "1")

        self._initialized = True
