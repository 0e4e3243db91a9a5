# explore_api/core/config.py
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "tour_ratings_service"
    env: str = Field(default="local")
    host: str = "0.0.0.0"
    port: int = 8080

    mongo_dsn: str = Field(
        default="mongodb://mongo:27017/explorecali",
        alias="MONGO_DSN"
    )
    mongo_db: str = "explorecali"

    # pagination defaults for GET /tours/{tourId}/ratings
    default_page_size: int = 20
    max_page_size: int = 100

    sentry_dsn: str = Field(default="", alias="SENTRY_DSN")
    sentry_test_enabled: bool = Field(default=False,
                                      alias="SENTRY_TEST_ENABLED")
    model_config = SettingsConfigDict(env_file="infra/.env", extra="ignore")


settings = Settings()
