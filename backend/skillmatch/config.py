from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "Skill Match Dashboard"
    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)

    cors_origins: list[str] = Field(default_factory=lambda: [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ])

    admin_username: str = "admin"
    seed_demo_data: bool = True

    match_duplicate_policy: str = "occurrences"
    chart_palette: list[str] = Field(min_length=1, default_factory=lambda: [
        "#4c78a8",
        "#f58518",
        "#54a24b",
        "#e45756",
        "#72b7b2",
        "#b279a2",
        "#eeca3b",
        "#9d755d",
    ])


settings = Settings()
