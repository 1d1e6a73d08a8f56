from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    client_title: str = "FutureBuilder Demo"
    client_width: int = Field(default=480, gt=0)
    client_height: int = Field(default=800, gt=0)
    client_fps: int = Field(default=60, gt=0)

    # Only reachable through the in-process mock transport
    api_base_url: str = "http://usuarios.local/api"

    # Seconds per simulated time-unit (users: 3 units, failing: 2 units)
    fetch_delay_unit: float = Field(default=1.0, gt=0)
    fetch_failure_rate: float = Field(default=0.2, ge=0.0, le=1.0)
    fetch_seed: int | None = None

    toast_duration: float = Field(default=2.0, gt=0)
    debug: bool = False

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()


def get_settings() -> Settings:
    return settings
