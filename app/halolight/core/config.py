from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env")

    APP_NAME: str = "HaloLight"
    APP_TITLE: str = "HaloLight"
    LOGIN_PATH: str = "/login"
    HOME_PATH: str = "/dashboard"
    ROUTES_CONFIG_PATH: str = ""
    LOG_LEVEL: str = "INFO"
    REQUEST_LOGGING_ENABLED: bool = True

settings = Settings()
