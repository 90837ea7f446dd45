"""Application configuration with environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Environment
    ENV: str = "dev"

    # App Version
    VERSION: str = "1.0.0"

    # Database backing the key-value store
    DATABASE_URL: str = "sqlite:///./brokerage.db"

    # All API routes are mounted under this prefix
    API_PREFIX: str = "/make-server-ef402f1d"

    # CORS
    CORS_ORIGINS: str = "*"

    # Supabase Auth (token introspection + user listing)
    SUPABASE_URL: str = ""
    SUPABASE_ANON_KEY: str = ""
    SUPABASE_SERVICE_ROLE_KEY: str = ""

    # Admin allow-list (comma-separated emails)
    ADMIN_EMAILS: str = ""

    # Resend (transactional email)
    RESEND_API_KEY: str = ""
    EMAIL_FROM: str = "Letify Realty <onboarding@resend.dev>"
    ADMIN_NOTIFICATION_EMAIL: str = "info@letifyrealty.com"

    # Outbound HTTP
    HTTP_TIMEOUT_SECONDS: float = 20.0
    EMAIL_MAX_ATTEMPTS: int = 3

    # Error Tracking (optional, set in production)
    SENTRY_DSN: str = ""

    LOG_LEVEL: str = "INFO"

    # Rate Limiting (requests per minute)
    RATE_LIMIT_API: int = 120  # General API
    RATE_LIMIT_FORMS: int = 10  # Public form submissions

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS_ORIGINS into a list."""
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

    @property
    def admin_emails_set(self) -> frozenset[str]:
        """Parse ADMIN_EMAILS into a lowercase set."""
        return frozenset(
            e.strip().lower() for e in self.ADMIN_EMAILS.split(",") if e.strip()
        )


settings = Settings()
