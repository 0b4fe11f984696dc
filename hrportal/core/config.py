from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    # App
    app_name: str = "HR Portal Access Engine"
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_dir: str = "/var/log/hrportal"
    log_to_file: bool = False

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level

    # Static access-control configuration (None = bundled defaults)
    navigation_catalog_path: Optional[str] = None
    route_rules_path: Optional[str] = None

    model_config = SettingsConfigDict(
        env_prefix="HRPORTAL_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"  # Allow extra env vars without raising validation errors
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
