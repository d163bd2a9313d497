from dotenv import load_dotenv
from pydantic import Field, computed_field
from pydantic_settings import BaseSettings
from typing import ClassVar, List

# Load environment variables from .env file
load_dotenv(".env")


class Settings(BaseSettings):
    """Class to store all the settings of the computer literacy platform."""

    # ------------------------------
    # Database
    # ------------------------------
    DATABASE_URL: str = Field(default="sqlite+aiosqlite:///./database.sqlite")
    DB_ECHO: bool = Field(default=False)

    # ------------------------------
    # Auth & Sessions
    # ------------------------------
    SECRET_KEY: str = Field(default="change-this-secret-key-in-production")
    ALGORITHM: str = Field(default="HS256")
    SESSION_COOKIE_NAME: str = Field(default="auth_token")
    SESSION_TTL_DAYS: int = Field(default=7)
    REQUIRE_EMAIL_VERIFICATION: bool = Field(default=True)
    VERIFICATION_TOKEN_TTL_HOURS: int = Field(default=24)
    RESET_TOKEN_TTL_HOURS: int = Field(default=1)
    BCRYPT_ROUNDS: int = Field(default=10)

    # ------------------------------
    # Rate limiting
    # ------------------------------
    RATE_LIMIT_ENABLED: bool = Field(default=True)
    AUTH_RATE_LIMIT: str = Field(default="10/minute")

    # ------------------------------
    # Email - Optional
    # ------------------------------
    SENDGRID_API_KEY: str = Field(default="")
    EMAIL_FROM: str = Field(default="noreply@example.com")

    # ------------------------------
    # URLs - Optional with defaults
    # ------------------------------
    BASE_URL: str = Field(default="http://localhost:5000")
    FRONTEND_URL: str = Field(default="http://localhost:5000")
    API_PREFIX: str = Field(default="/api")

    # ------------------------------
    # Environment
    # ------------------------------
    ENVIRONMENT: str = Field(default="development")

    # ------------------------------
    # Data & Seeding
    # ------------------------------
    SEED_ON_STARTUP: bool = Field(default=True)
    FORCE_SEED: bool = Field(default=False)

    # ------------------------------
    # Database models
    # ------------------------------
    DB_MODELS: ClassVar[List[str]] = [
        "literacy.models.user",
        "literacy.models.authsession",
        "literacy.models.module",
        "literacy.models.quizresult",
        "literacy.models.userprogress",
    ]

    # ------------------------------
    # Computed Fields
    # ------------------------------
    @computed_field
    @property
    def COOKIE_SECURE(self) -> bool:
        """Only send the session cookie over HTTPS in production."""
        return self.ENVIRONMENT == "production"

    @computed_field
    @property
    def COOKIE_SAMESITE(self) -> str:
        return "none" if self.ENVIRONMENT == "production" else "lax"

    class Config:
        """Configuration for the settings class."""
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Instantiate the settings
settings = Settings()
