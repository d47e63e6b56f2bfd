from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="LAR_", env_file=".env", extra="ignore")
    DATABASE_URL: str = "sqlite:///./lar.db"

    SECRET_KEY: str = "change-me"
    ACCESS_TOKEN_MIN: int = 60 * 24
    LOG_LEVEL: str = "INFO"
    # Issue tokens from /auth/token without an identity provider (local development only)
    DEV_LOGIN: bool = False


settings = Settings()
