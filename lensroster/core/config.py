from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    ENV: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    API_PREFIX: str = "/api/v1"

    # Staff selection
    MAX_STAFF_PER_ROLE: int = 3

    # Smart allocation
    COVERAGE_GOOD_THRESHOLD: int = 90
    COVERAGE_FAIR_THRESHOLD: int = 70
    RECOMMEND_MAX_GAIN: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
