# src/core/config.py
"""
Manages application configuration using Pydantic's BaseSettings.

This module defines a `Settings` class that loads environment variables
from the process environment or a local .env file, providing a single,
validated source of configuration for the API, the token service and the
persistence layer.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        DATABASE_URL (str): SQLAlchemy connection string for the primary database.
        JWT_SECRET_KEY (str): The secret key for signing and verifying JSON Web Tokens.
        ALGORITHM (str): The algorithm to use for JWT encoding.
        ACCESS_TOKEN_EXPIRE_MINUTES (int): Token lifetime in minutes (7 days by default).
        BCRYPT_ROUNDS (int): Cost factor used when salting and hashing passwords.
        MIN_PASSWORD_LENGTH (int): Shortest password accepted at registration.
        API_PREFIX (str): Path prefix every router is mounted under.
        API_VERSION (str): Version string reported by the health route.
        CORS_ORIGINS (str): Comma separated list of allowed origins, or "*".
        ENVIRONMENT (str): "development" enables request logging.
        LOG_LEVEL (str): Root logger level.
    """
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    DATABASE_URL: str = "sqlite:///./todoapp.db"
    # Set JWT_SECRET_KEY in every deployed environment.
    JWT_SECRET_KEY: str = "your-secret-key-change-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7
    BCRYPT_ROUNDS: int = 10
    MIN_PASSWORD_LENGTH: int = 6

    API_PREFIX: str = "/api"
    API_VERSION: str = "1.0.0"
    CORS_ORIGINS: str = "*"

    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


# Create a single, globally accessible instance of the settings.
settings = Settings()
