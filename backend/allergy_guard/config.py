from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "allergy-guard"
    env: str = "local"
    log_level: str = "INFO"

    # Highest match severity at or above this value turns an alert into "danger".
    danger_severity_threshold: int = 8

    # Comma separated origins; "*" allows any.
    cors_allow_origins: str = "*"

    class Config:
        env_file = ".env"


settings = Settings()
