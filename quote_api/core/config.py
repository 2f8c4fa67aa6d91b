from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    APP_NAME: str = "quote-api"

    HOST: str = "0.0.0.0"
    PORT: int = 3000

    DATABASE_URL: str
    DB_POOL_SIZE: int = 5
    DB_POOL_TIMEOUT_SECONDS: int = 30

    LOG_LEVEL: str = "DEBUG"

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")


settings = Settings()
