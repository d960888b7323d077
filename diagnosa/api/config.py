"""
Diagnosa — API Configuration

FastAPI server settings and data file locations.
"""

from dataclasses import dataclass, field
from typing import Optional
import os


@dataclass
class APIConfig:
    """API server configuration"""

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    reload: bool = False

    # CORS
    cors_origins: list = field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = True
    cors_allow_methods: list = field(default_factory=lambda: ["*"])
    cors_allow_headers: list = field(default_factory=lambda: ["*"])

    # Data files (None = compiled-in registry / default config)
    knowledge_base_path: Optional[str] = None
    config_path: Optional[str] = None

    # API
    api_prefix: str = "/api"
    api_title: str = "Diagnosa API"
    api_description: str = "Naive Bayes disease diagnosis calculator"

    @classmethod
    def from_env(cls) -> "APIConfig":
        """Configuration from environment variables"""
        return cls(
            host=os.getenv("API_HOST", "0.0.0.0"),
            port=int(os.getenv("API_PORT", "8000")),
            debug=os.getenv("API_DEBUG", "false").lower() == "true",
            knowledge_base_path=os.getenv("DIAGNOSA_KB_PATH") or None,
            config_path=os.getenv("DIAGNOSA_CONFIG") or None,
        )


# Global configuration
config = APIConfig.from_env()
