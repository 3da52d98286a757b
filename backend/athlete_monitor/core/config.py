from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str
    jwt_secret_key: str
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24

    log_level: str = "INFO"

    recommendation_scale_factor: float = 10.0
    recommendation_rehab_penalty: float = 5.0
    recommendation_limit: int = 5
    sleep_warning_hours: int = 7

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    return Settings()
