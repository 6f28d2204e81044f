import os
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=os.path.abspath(os.path.join(os.path.dirname(__file__), "../../.env")),
        extra="allow"
    )

    MOVIES_READ_URL: str = "https://swapi.dev/api/films/"
    MOVIES_WRITE_URL: str = "https://react-http-movies-default-rtdb.firebaseio.com/movies.json"
    REQUEST_TIMEOUT: Optional[float] = None
    LOG_LEVEL: str = "INFO"

    @property
    def json_headers(self):
        return {
            "Content-Type": "application/json",
        }


settings = Settings()
