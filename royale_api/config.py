"""Configuration objects for the cr-api client."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ApiConfig:
    """Configuration for accessing the cr-api service."""

    developer_key: Optional[str] = None
    base_url: str = "http://api.cr-api.com"
    auth_header: str = "auth"
    timeout: float = 30
