"""Server configuration from environment variables."""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class RegistryConfig:
    """Server configuration loaded from environment variables."""

    host: str
    port: int
    debug: bool
    log_level: str

    @staticmethod
    def from_env() -> "RegistryConfig":
        """Load configuration from environment variables."""
        return RegistryConfig(
            host=os.environ.get("EQUIPMENT_REGISTRY_HOST", "0.0.0.0"),
            port=int(os.environ.get("EQUIPMENT_REGISTRY_PORT", "8000")),
            debug=os.environ.get("EQUIPMENT_REGISTRY_DEBUG", "false").lower() == "true",
            log_level=os.environ.get("EQUIPMENT_REGISTRY_LOG_LEVEL", "info").lower(),
        )
