"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Read once per process and frozen afterwards.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    # Application settings
    debug: bool = False

    # Logging
    log_level: str = "INFO"

    # MySQL settings
    mysql_host: str = Field(default="localhost", validation_alias=AliasChoices("MYSQLHOST", "mysql_host"))
    mysql_port: int = Field(default=3306, validation_alias=AliasChoices("MYSQLPORT", "mysql_port"))
    mysql_database: str = Field(default="users", validation_alias=AliasChoices("MYSQLDATABASE", "mysql_database"))
    mysql_user: str = Field(default="root", validation_alias=AliasChoices("MYSQLUSER", "mysql_user"))
    mysql_password: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("MYSQLPASS", "mysql_password"), repr=False
    )

    # AWS / Cognito settings
    aws_region: str = Field(default="us-east-1", validation_alias=AliasChoices("AWS_DEFAULT_REGION", "aws_region"))
    cognito_app_client_id: Optional[str] = None
    cognito_user_pool_id: Optional[str] = None

    @property
    def database_url(self) -> URL:
        """SQLAlchemy URL for the MySQL database (PyMySQL driver)."""
        return URL.create(
            "mysql+pymysql",
            username=self.mysql_user,
            password=self.mysql_password,
            host=self.mysql_host,
            port=self.mysql_port,
            database=self.mysql_database,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    return Settings()
