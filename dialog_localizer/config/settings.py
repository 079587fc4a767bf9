from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"
    log_file: Path | None = None

    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "dialog_localizer"
    db_username: str = "dialog_localizer"
    db_password: str = "secret"
    db_pool_max_size: int = 4
    db_connect_timeout_seconds: float = 10.0

    glossary_dir: Path = Path("glossary")
    raw_strings_dir: Path = Path("raw_strings")
    export_dir: Path = Path("exported_strings")

    import_batch_size: int = 1000
    glossary_batch_size: int = 500

    translation_provider: str = "openrouter"
    translation_api_key: str = ""
    translation_model_name: str = "openai/gpt-oss-120b"
    translation_base_url: str = ""
    translation_timeout_seconds: int = 60
    translation_temperature: float = 0.3
    translation_provider_routing: list[str] = ["deepinfra/fp4"]
    translation_source_language: str = "English"
    translation_target_language: str = "Indonesian"
    translation_max_attempts: int = 3
    translation_retry_delay_seconds: float = 5.0

    discord_webhook_url: str = ""
    notify_interval_seconds: int = 60
    notify_every_items: int = 100

    dashboard_host: str = "127.0.0.1"
    dashboard_port: int = 3000
    review_page_size: int = 50
