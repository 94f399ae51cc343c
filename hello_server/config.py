from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Settings(BaseModel):
    """Hardcoded runtime settings.

    Nothing here is read from the environment; the values are the service's
    fixed contract.
    """

    model_config = ConfigDict(frozen=True)

    host: str = "0.0.0.0"  # all interfaces
    port: int = Field(default=8080, ge=0, le=65535)
    public_host: str = "localhost"
    greeting: str = "Hello, World New Another one!"


settings = Settings()
