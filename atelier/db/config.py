"""Database and audit configuration."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Database connection settings
    postgres_user: str = "pg"
    postgres_password: str = "atelier"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "atelier"
    database_url_override: Optional[str] = None
    sql_echo: bool = False

    # Parallel analyzers per audit run (1 = sequential)
    audit_max_workers: int = 4

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="",
        extra="ignore",
    )

    @property
    def database_url(self) -> str:
        """Construct the database URL, unless one is given explicitly."""
        if self.database_url_override:
            return self.database_url_override
        return (
            f"postgresql://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


# Global settings instance
settings = Settings()
