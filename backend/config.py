"""Application configuration loaded from environment variables."""

from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from backend.domain.benchmarks import BenchmarkCatalog, default_catalog, load_catalog


class Settings(BaseSettings):
    """Settings read from WEALTH_* environment variables (or a .env file)."""

    model_config = SettingsConfigDict(
        env_prefix="WEALTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"]
    )
    log_level: str = "INFO"

    # JSON array of benchmark records replacing the built-in list
    benchmarks_file: Optional[Path] = None

    debug: bool = False

    def benchmark_catalog(self) -> BenchmarkCatalog:
        if self.benchmarks_file is None:
            return default_catalog()
        return load_catalog(self.benchmarks_file)


@lru_cache
def get_settings() -> Settings:
    return Settings()
