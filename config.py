"""
Configuration management for the ticket command webhook.

Loads environment variables from .env file and provides typed access to configuration.
The configuration is built once at process entry and handed to the transport
through a FastAPI dependency, so tests can swap it without touching the environment.
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import List

from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parent / ".env"
load_dotenv(env_path)


REQUIRED_VARIABLES = {
    "STREAM_API_SECRET": "api_secret",
}


@dataclass(frozen=True)
class StreamConfig:
    """Stream Chat credentials and listener settings."""

    # Stream Chat credentials (used for webhook signature verification)
    api_key: str
    api_secret: str
    base_url: str

    # Listener
    host: str = "localhost"
    port: int = 3100

    # Environment
    environment: str = "development"

    @classmethod
    def from_env(cls) -> "StreamConfig":
        """Load configuration from environment variables."""
        return cls(
            api_key=os.getenv("STREAM_API_KEY", ""),
            api_secret=os.getenv("STREAM_API_SECRET", ""),
            base_url=os.getenv("STREAM_API_URL", ""),
            host=os.getenv("COMMAND_HOST", "localhost"),
            port=int(os.getenv("COMMAND_PORT", "3100")),
            environment=os.getenv("ENVIRONMENT", "development"),
        )

    def validate(self) -> List[str]:
        """Return the names of required environment variables that are not set."""
        return [
            env_name
            for env_name, attr in REQUIRED_VARIABLES.items()
            if not getattr(self, attr)
        ]


@lru_cache(maxsize=1)
def get_config() -> StreamConfig:
    """Get process-wide configuration (built on first use)."""
    return StreamConfig.from_env()


def reset_config() -> None:
    """Drop the cached configuration (for testing)."""
    get_config.cache_clear()


if __name__ == "__main__":
    # Test configuration loading
    config = get_config()
    missing = config.validate()
    print("Configuration loaded:")
    print(f"  Stream API Key: {'✓ Set' if config.api_key else '✗ Missing'}")
    print(f"  Stream API Secret: {'✓ Set' if config.api_secret else '✗ Missing'}")
    print(f"  Stream API URL: {config.base_url or '(default)'}")
    print(f"  Listening on: http://{config.host}:{config.port}")
    print(f"  Environment: {config.environment}")
    print(f"\n  Validation: {'✓ PASSED' if not missing else '✗ FAILED: ' + ', '.join(missing)}")
