"""Pydantic Settings — typed configuration with .env auto-loading."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment / .env file."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ── Service ──────────────────────────────────────────────
    service_port: int = 5000
    cors_origins: list[str] = ["*"]
    debug: bool = False
    log_level: str = "INFO"

    # ── Statistics ───────────────────────────────────────────
    histogram_bin_count: int = 10
    normal_curve_points: int = 100  # default ?points= for the curve endpoint
    normal_curve_max_points: int = 1000  # hard upper limit per request

    # ── Grades ───────────────────────────────────────────────
    grade_min: float = 0.0
    grade_max: float = 100.0

    # ── Gateway ──────────────────────────────────────────────
    # Shared secret the identity gateway sends as X-Gateway-Secret.
    # Empty = identity headers are trusted as-is (development only).
    gateway_secret: str = ""

    # ── Demo data ────────────────────────────────────────────
    seed_demo_data: bool = False
    seed_random_seed: int | None = None


@lru_cache
def get_settings() -> Settings:
    """Singleton accessor for application settings."""
    return Settings()
