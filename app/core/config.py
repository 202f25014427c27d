from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env
load_dotenv()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Full URL override, e.g. sqlite:///./school_records.db
    database_url: Optional[str] = None

    db_user: Optional[str] = None
    db_password: Optional[str] = None
    db_host: Optional[str] = None
    db_port: int = 5432
    db_name: Optional[str] = None
    db_sslmode: str = "prefer"

    # PostgreSQL namespace holding every table and the reporting view
    db_schema: str = "student_management"
    db_echo: bool = False
    db_isolation_level: str = "READ COMMITTED"

    log_level: str = "INFO"

    @property
    def sqlalchemy_database_url(self) -> str:
        if self.database_url:
            return self.database_url
        if self.db_host:
            return (
                f"postgresql+psycopg2://{self.db_user}:{self.db_password}"
                f"@{self.db_host}:{self.db_port}/{self.db_name}?sslmode={self.db_sslmode}"
            )
        return "sqlite:///./school_records.db"


@lru_cache
def get_settings() -> Settings:
    return Settings()
