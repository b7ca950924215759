from typing import Literal

from pydantic_settings import BaseSettings
from pydantic import Field

class Settings(BaseSettings):
    app_name: str = "docvault"
    app_env: str = Field("dev", alias="APP_ENV")
    jwt_secret: str | None = Field(default=None, alias="JWT_SECRET")
    database_url: str = Field("sqlite:///./docvault.db", alias="DATABASE_URL")

    cookie_name: str = Field("auth_token", alias="COOKIE_NAME")
    cookie_secure: bool = Field(False, alias="COOKIE_SECURE")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field("INFO", alias="LOG_LEVEL")
    log_format: Literal["json", "console"] = Field("console", alias="LOG_FORMAT")

    class Config:
        env_file = ".env"
        extra = "ignore"

settings = Settings()
