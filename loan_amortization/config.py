from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # App
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/api/v1"

    # Rendering: round money values in API responses (None = full precision)
    response_decimal_places: int | None = None


settings = Settings()
