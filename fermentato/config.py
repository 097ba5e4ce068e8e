"""Application configuration."""
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from environment variables."""

    app_name: str = "Fermenta.to API"
    debug: bool = False
    log_level: str = ""  # Overrides the DEBUG-derived level, e.g. WARNING
    environment: str = Field(
        default="development",
        validation_alias=AliasChoices("ENVIRONMENT", "NODE_ENV"),
    )
    api_prefix: str = "/api"
    cors_origins: str = "http://localhost:5173,http://127.0.0.1:5173,https://fermenta.to"
    database_url: str = "sqlite:///./fermentato.db"  # Use DATABASE_URL env for PostgreSQL
    session_secret: str = "fermenta-to-session-secret-change-in-production"
    session_cookie_name: str = "fermentato.sid"
    oauth_state_cookie_name: str = "fermentato.oauth_state"
    session_ttl_days: int = 7
    oauth_state_ttl_minutes: int = 10
    bcrypt_rounds: int = 12
    timezone: str = "Europe/Rome"  # Used for opening-hours checks
    # Google OAuth
    google_client_id: str = ""
    google_client_secret: str = ""
    google_callback_url: str = ""  # Defaults to the callback route of this app
    frontend_url: str = "http://localhost:5173"  # For OAuth redirect after login
    # Bootstrap admin account, created on startup when both are set
    admin_email: str = ""
    admin_password: str = ""

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


settings = Settings()
