"""Environment-driven settings."""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load environment variables
load_dotenv()


class Settings(BaseModel):
    """Runtime configuration for the server and the upstream forwarder."""

    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8000, ge=1, le=65535, description="Bind port")
    log_level: str = Field(default="INFO", description="Root log level")
    timeout: Optional[float] = Field(
        default=30.0, description="Upstream timeout in seconds, None for no timeout"
    )
    cors_origins: list[str] = Field(default_factory=lambda: ["*"], description="Allowed CORS origins")


def load_settings() -> Settings:
    """Build settings from the current environment."""
    timeout = float(os.getenv("MAGENTO_TIMEOUT", "30"))
    origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
    return Settings(
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        timeout=timeout if timeout > 0 else None,
        cors_origins=origins or ["*"],
    )
