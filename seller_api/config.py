from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    BACKEND_API_URL: str = "http://localhost:8080/api"
    BACKEND_API_TOKEN: str | None = None
    BACKEND_TIMEOUT_SECONDS: float = 30

    # the backend only accepts two levels of classification (e.g. color x size)
    MAX_CLASSIFICATION_LEVELS: int = 2

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

settings = Settings()
