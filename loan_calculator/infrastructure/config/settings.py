"""Application settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings."""

    debug_mode: bool = False
    log_level: str = "INFO"
    comparison_terms_years: list[int] = [5, 10, 15, 30]
    report_timestamp_format: str = "%a %b %d %H:%M:%S %Z %Y"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
    )


settings = Settings()
