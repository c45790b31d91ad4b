from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path


class Settings(BaseSettings):
    """TechLink Events settings. Values come from the environment or a local .env file."""

    # Supabase
    supabase_url: str = ""
    supabase_key: str = ""
    supabase_service_key: str = ""
    db_schema: str = "public"

    # Web server
    host: str = "0.0.0.0"
    port: int = 8080
    session_cookie_name: str = "techlink_session"
    session_cookie_secure: bool = False

    # Environment
    env: str = "development"

    @property
    def data_key(self) -> str:
        """Key for data queries: service key when available, anon key otherwise"""
        return self.supabase_service_key or self.supabase_key

    # Env var names are matched case-insensitively
    model_config = SettingsConfigDict(
        env_file=".env" if Path(".env").exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )


# Process-wide instance
settings = Settings()
