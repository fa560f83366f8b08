"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    quadcontour_env: str = "development"
    quadcontour_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Plot defaults
    plot_width: float = 800.0
    plot_height: float = 800.0
    step_x: float = 50.0
    step_y: float = 50.0
    min_depth: int = 5
    max_depth: int = 10
    default_field: str = "xsinx_ycosy"

    # Upper bound on requested depth; 4^(depth+1) leaves in the worst case
    max_allowed_depth: int = 12
    # Every level down to min_depth is filled, so it gets a tighter bound
    max_allowed_min_depth: int = 8

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
