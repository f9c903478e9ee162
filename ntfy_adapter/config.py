from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Upper bound for a single delivery, in seconds
    request_timeout: float = 10.0

    user_agent: str = "ntfy-adapter/0.1.0"

    model_config = {"env_prefix": "NTFY_", "env_file": ".env", "extra": "ignore"}


settings = Settings()
