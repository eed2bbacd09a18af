from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="REACT_PARSER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    debug: bool = False
    relaxed_mode: bool = True
    default_model: str = "auto"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
