from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    environment: str = "dev"
    app_id: str = ""
    base_url: str = "https://openexchangerates.org/api/"
    http_timeout: int = 30
    log_level: str = "INFO"

    class Config:
        env_file = ".env"


settings = Settings()
