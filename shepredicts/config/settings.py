from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    prediction_engine: str = "rule_based"
    confidence_seed: int | None = None

    min_user_age: int = 12
    max_user_age: int = 80
    supported_gender: str = "female"
