"""
Centralized application configuration
"""
import json
from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings, read from the environment and .env"""

    # API Settings
    API_TITLE: str = "Fish Parque API"
    API_VERSION: str = "1.0.0"
    API_DESCRIPTION: str = "Storefront ordering API for Fish Parque"
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 3000

    # JSON documents and the plain-text order backup
    DATA_DIR: str = "."
    USERS_FILE: str = "users.json"
    ORDERS_FILE: str = "orders.json"
    ORDERS_BACKUP_FILE: str = "orders.txt"

    # Shared secret for the admin listing endpoints (x-admin-key header)
    ADMIN_KEY: str = ""

    # Order notification relay (optional)
    FORMSPREE_ENDPOINT: str = ""
    NOTIFICATION_TIMEOUT: float = 10.0

    # CORS - Can be string (comma-separated) or JSON array
    # Example: "http://localhost:3000,https://yourdomain.com" or '["http://localhost:3000"]'
    ALLOWED_ORIGINS: Optional[str] = "*"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    def get_allowed_origins(self) -> List[str]:
        """Parse ALLOWED_ORIGINS string into list"""
        if not self.ALLOWED_ORIGINS:
            return ["*"]

        # Try JSON parse first (for array format)
        try:
            origins = json.loads(self.ALLOWED_ORIGINS)
            if isinstance(origins, list):
                return origins
        except (json.JSONDecodeError, ValueError):
            pass

        # Fall back to comma-separated string
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",")]

    def data_path(self, filename: str) -> Path:
        """Resolve a data file name against DATA_DIR"""
        path = Path(filename)
        if path.is_absolute():
            return path
        return Path(self.DATA_DIR) / path

    @property
    def users_path(self) -> Path:
        return self.data_path(self.USERS_FILE)

    @property
    def orders_path(self) -> Path:
        return self.data_path(self.ORDERS_FILE)

    @property
    def orders_backup_path(self) -> Path:
        return self.data_path(self.ORDERS_BACKUP_FILE)

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"
