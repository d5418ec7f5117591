# kudos_wall/adapters/configuration/config.py

from typing import Optional, List, Union
from logging import getLevelName
from pydantic import PostgresDsn, SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENVIRONMENTS = ("development", "testing", "production")


class Settings(BaseSettings):
    # Application
    PROJECT_NAME: str = "Digital Kudos Wall API"
    VERSION: str = "1.0.0"
    API_PREFIX: str = "/api"

    # Logging
    LOG_LEVEL: str = "INFO"

    # Environment
    ENVIRONMENT: str = "development"  # "development", "production", "testing"
    DEBUG: bool = False

    # Database
    DB_DRIVER: str = "asyncpg"
    POSTGRES_USER: Optional[str] = None
    POSTGRES_PASSWORD: Optional[str] = None
    POSTGRES_DB: Optional[str] = None
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    DATABASE_URL: Optional[PostgresDsn] = None
    DB_CREATE_TABLES: bool = True

    # Auth
    SECRET_KEY: SecretStr
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_HOURS: int = 24
    BCRYPT_ROUNDS: int = 10
    BOOTSTRAP_FIRST_ADMIN: Optional[bool] = None
    TOKEN_BLACKLIST_CLEANUP_INTERVAL_SECONDS: int = 3600

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    # API Documentation
    SCHEMA_VISIBILITY: bool = True

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @model_validator(mode="after")
    def assemble_db_url(self) -> "Settings":
        if self.DATABASE_URL is not None:
            return self

        if not (self.POSTGRES_USER and self.POSTGRES_PASSWORD and self.POSTGRES_DB):
            raise ValueError("DATABASE_URL or POSTGRES_USER/POSTGRES_PASSWORD/POSTGRES_DB must be set")

        self.DATABASE_URL = PostgresDsn.build(
            scheme=f"postgresql+{self.DB_DRIVER}",
            username=self.POSTGRES_USER,
            password=self.POSTGRES_PASSWORD,
            host=self.POSTGRES_HOST,
            port=self.POSTGRES_PORT,
            path=self.POSTGRES_DB,
        )
        return self

    @field_validator("ENVIRONMENT", mode="before")
    def validate_environment(cls, v: str) -> str:
        env = str(v).strip().lower()
        if env not in ENVIRONMENTS:
            raise ValueError(f"ENVIRONMENT must be one of {', '.join(ENVIRONMENTS)}, got {v!r}")
        return env

    @field_validator("CORS_ORIGINS", mode="before")
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        """
        A CSV string (e.g. 'a,b,c') becomes a list.
        Lists and JSON arrays are returned untouched.
        """
        if isinstance(v, str) and not v.startswith("["):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        if isinstance(v, (list, str)):
            return v
        raise ValueError(f"Invalid CORS_ORIGINS: {v!r}")

    @field_validator("LOG_LEVEL", mode="before")
    def validate_log_level(cls, v: str) -> str:
        """Ensures the value is a level known to logging."""
        lvl = str(v).upper()
        if not isinstance(getLevelName(lvl), int):
            raise ValueError(f"Invalid LOG_LEVEL: {v!r}")
        return lvl

    @field_validator("BCRYPT_ROUNDS")
    def validate_bcrypt_rounds(cls, v: int) -> int:
        if not 4 <= v <= 31:
            raise ValueError("BCRYPT_ROUNDS must be between 4 and 31")
        return v

    @property
    def async_database_url(self) -> str:
        """Database URL forced onto the asyncpg driver."""
        url = str(self.DATABASE_URL)
        for driver in ("postgresql+psycopg2://", "postgresql+psycopg://", "postgresql://"):
            if url.startswith(driver):
                return "postgresql+asyncpg://" + url[len(driver):]
        return url

    @property
    def bootstrap_admin_enabled(self) -> bool:
        """First registered user becomes ADMIN; on by default only in development."""
        if self.BOOTSTRAP_FIRST_ADMIN is not None:
            return self.BOOTSTRAP_FIRST_ADMIN
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"
