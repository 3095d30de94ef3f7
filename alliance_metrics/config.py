"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="ALLIANCE_METRICS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Service
    service_name: str = "alliance-metrics"
    log_level: str = "INFO"

    # Data integrity: raise instead of warn when one player name
    # shows up under more than one alliance
    strict_player_identity: bool = False


settings = Settings()
