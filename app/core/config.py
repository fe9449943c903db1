"""Application configuration."""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.content.locales import LocaleConfig


class Settings(BaseSettings):
    """
    Application settings.

    Environment variables will be loaded and validated using Pydantic.
    """

    app_name: str = "Marine Site"
    version: str = "0.1.0"
    api_prefix: str = "/api"

    # CORS Settings
    cors_origins: list[str] = ["*"]  # Default to allow all in development
    cors_allow_credentials: bool = True

    # Database Settings
    DATABASE_URL: str = "sqlite+aiosqlite:///./marine_site.db"
    MAX_CONNECTIONS: int = 10

    # Logging Settings
    LOG_LEVEL: str = "INFO"
    JSON_LOGS: bool = True

    # Locale Settings
    DEFAULT_LOCALE: str = "en"
    SUPPORTED_LOCALES: list[str] = Field(
        default=["en", "ru", "kk"],
        description="Recognized locales, in field fallback preference order",
    )
    PREVIEW_REQUIRES_AUTH: bool = True

    # Files
    APP_URL: str = "http://localhost:8000"
    FILE_UPLOAD_DIR: str = "./uploads"

    # Session Settings
    JWT_SECRET: str = "change-me-in-production-please-32chars"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRE_DAYS: int = Field(default=7, ge=1)
    SESSION_COOKIE_NAME: str = "ms_session"
    COOKIE_SECURE: bool = False

    # SMTP Settings (contact form notifications are skipped when host is unset)
    SMTP_HOST: str | None = None
    SMTP_PORT: int = 587
    SMTP_USER: str | None = None
    SMTP_PASS: str | None = None
    SMTP_FROM: str | None = None
    CONTACTS_TO: str | None = None

    # Admin seeding
    ADMIN_EMAIL: str | None = None
    ADMIN_PASSWORD: str | None = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="allow",  # Allow extra fields in environment
    )

    @model_validator(mode="after")
    def validate_origins(self) -> "Settings":
        """Validate CORS origins."""
        if self.cors_origins == ["*"]:
            self.cors_origins = [
                "http://localhost",
                "http://localhost:8000",
                "http://localhost:5173",
                "http://localhost:3000",
            ]
        return self

    @model_validator(mode="after")
    def validate_locales(self) -> "Settings":
        """Ensure the default locale is one of the supported ones."""
        self.SUPPORTED_LOCALES = [loc.strip().lower() for loc in self.SUPPORTED_LOCALES]
        self.DEFAULT_LOCALE = self.DEFAULT_LOCALE.strip().lower()
        if not self.SUPPORTED_LOCALES:
            raise ValueError("SUPPORTED_LOCALES must not be empty")
        if self.DEFAULT_LOCALE not in self.SUPPORTED_LOCALES:
            raise ValueError(
                f"DEFAULT_LOCALE '{self.DEFAULT_LOCALE}' is not in SUPPORTED_LOCALES"
            )
        return self

    @model_validator(mode="after")
    def validate_jwt_secret(self) -> "Settings":
        """Reject signing keys that are too short to be safe."""
        if len(self.JWT_SECRET) < 32:
            raise ValueError("JWT_SECRET must be at least 32 characters")
        return self

    @property
    def smtp_enabled(self) -> bool:
        """Whether contact notifications can be mailed."""
        return bool(self.SMTP_HOST and self.CONTACTS_TO)

    def locale_config(self) -> LocaleConfig:
        """Build the locale configuration handed to the resolver."""
        return LocaleConfig(
            default_locale=self.DEFAULT_LOCALE,
            locales=tuple(self.SUPPORTED_LOCALES),
        )


# Create settings instance
settings = Settings()
