from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TOKEN_LIST_",
        env_file=".env",  # relative to the working directory
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    log_level: str = Field(default="INFO", description="Logging level")

    # Remote loading
    fetch_timeout_seconds: Optional[float] = Field(
        default=None,
        description="Timeout applied to token list downloads; None leaves the request unbounded",
    )
    follow_redirects: bool = Field(
        default=True,
        description="Follow HTTP redirects when downloading a token list",
    )

    # Validation
    require_checksum_addresses: bool = Field(
        default=False,
        description="Reject EVM addresses that are not EIP-55 checksummed",
    )


# Global settings instance
settings = Settings()
