# csv2table/config.py
import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List

from dotenv import load_dotenv

load_dotenv()

DEFAULT_CORS_ORIGINS = [
    "http://localhost",
    "http://localhost:8501",
    "http://127.0.0.1",
    "http://127.0.0.1:8501",
]


def _split_list(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    title: str = "CSV to Table Converter"
    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    log_level: str = "INFO"
    table_class: str = "csv-table"
    api_base: str = "http://127.0.0.1:8000/api"
    request_timeout: float = 30.0

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from CSV2TABLE_* environment variables (a .env file is honoured)."""
        defaults = cls()
        origins = os.environ.get("CSV2TABLE_CORS_ORIGINS")
        timeout = os.environ.get("CSV2TABLE_REQUEST_TIMEOUT")
        try:
            request_timeout = float(timeout) if timeout else defaults.request_timeout
        except ValueError:
            raise ValueError(f"CSV2TABLE_REQUEST_TIMEOUT must be a number, got {timeout!r}")

        return cls(
            title=os.environ.get("CSV2TABLE_TITLE", defaults.title),
            cors_origins=_split_list(origins) if origins is not None else defaults.cors_origins,
            log_level=os.environ.get("CSV2TABLE_LOG_LEVEL", defaults.log_level).upper(),
            table_class=os.environ.get("CSV2TABLE_TABLE_CLASS", defaults.table_class),
            api_base=os.environ.get("CSV2TABLE_API_BASE", defaults.api_base).rstrip("/"),
            request_timeout=request_timeout,
        )


@lru_cache()
def get_settings() -> Settings:
    return Settings.from_env()
