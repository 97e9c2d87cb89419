from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be configured via .env file or environment variables.
    """

    # Database (key/value storage table)
    DATABASE_URL: str = "sqlite:///./union_office.db"
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20

    # JWT Authentication
    SECRET_KEY: str
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 480

    # Application
    APP_NAME: str = "Union Office Manager API"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Activity log retention (global, all offices combined)
    ACTIVITY_LOG_LIMIT: int = 2000

    # Deadline scanner
    DEADLINE_WINDOW_DAYS: int = 7
    DEADLINE_DANGER_DAYS: int = 2

    # Outbound email (Resend)
    RESEND_API_KEY: str | None = None
    RESEND_API_URL: str = "https://api.resend.com/emails"
    MAIL_APP_NAME: str = "Gestione Sindacale"
    MAIL_SENDER: str = "noreply@gestionesindacale.it"
    SUPPORT_EMAIL: str = "supporto@gestionesindacale.it"
    MAIL_TIMEOUT_SECONDS: float = 10.0

    # CORS
    CORS_ORIGINS: str = ""
    CORS_ALLOW_CREDENTIALS: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS_ORIGINS from comma-separated string"""
        if not self.CORS_ORIGINS:
            return []
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


# Global settings instance
settings = Settings()
