from pydantic import ConfigDict, field_validator
from pydantic_settings import BaseSettings

DEFAULT_CHALLENGE_ENDPOINT = "https://beta.ion.msidentity.com/api/v1.0/proof-of-work-challenge"
DEFAULT_SOLUTION_ENDPOINT = "https://beta.ion.msidentity.com/api/v1.0/operations"


class Settings(BaseSettings):
    model_config = ConfigDict(
        env_prefix="ION_POW_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Proof of Work
    challenge_enabled: bool = True
    challenge_endpoint: str = DEFAULT_CHALLENGE_ENDPOINT
    solution_endpoint: str = DEFAULT_SOLUTION_ENDPOINT

    # HTTP
    request_timeout_seconds: float = 30.0

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"  # "console" or "json"

    @classmethod
    def from_defaults(cls) -> "Settings":
        """Literal defaults only, ignoring ION_POW_* variables and .env."""
        return cls.model_construct()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Only console and JSON renderers are supported."""
        v = v.lower()
        if v not in ("console", "json"):
            raise ValueError("log_format must be 'console' or 'json'")
        return v
