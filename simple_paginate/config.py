from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SIMPLE_PAGINATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "simple-paginate"
    app_version: str = "0.1.0"
    env: str = "development"
    debug: bool = False

    # Used when page/limit are absent or cannot be parsed
    default_page: int = 1
    default_limit: int = 10

    # Reject page/limit values below 1 instead of passing them to the database
    strict_pagination: bool = False


settings = Settings()
