"""
Client configuration loaded from a JSON file or the environment.
"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from .transport import DEFAULT_BASE_URL, USER_AGENT
from .version import API_VERSION


@dataclass
class ClientConfig:
    """Complete client configuration."""
    # Podcast Index API
    api_key: str = ""
    api_secret: str = field(default="", repr=False)
    base_url: str = DEFAULT_BASE_URL
    user_agent: str = USER_AGENT
    api_version: str = API_VERSION
    timeout: Optional[float] = None  # no deadline unless configured

    # Schema check probes: [{"endpoint": ..., "query": {...}}]
    probes: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key and self.api_secret)

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Build configuration from PODCAST_INDEX_* environment variables."""
        return cls(
            api_key=os.getenv("PODCAST_INDEX_API_KEY", ""),
            api_secret=os.getenv("PODCAST_INDEX_API_SECRET", ""),
            base_url=os.getenv("PODCAST_INDEX_BASE_URL", DEFAULT_BASE_URL),
        )


def load_config(config_path: Path) -> ClientConfig:
    """Load configuration from JSON file."""
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        data = json.load(f)

    # Podcast Index settings
    pi = data.get("podcast_index", {})

    # Probes may be given as a list or as {endpoint: query}
    probes = data.get("probes", [])
    if isinstance(probes, dict):
        probes = [{"endpoint": name, "query": query} for name, query in probes.items()]

    return ClientConfig(
        api_key=pi.get("api_key", ""),
        api_secret=pi.get("api_secret", ""),
        base_url=pi.get("base_url", DEFAULT_BASE_URL),
        user_agent=pi.get("user_agent", USER_AGENT),
        api_version=pi.get("api_version", API_VERSION),
        timeout=pi.get("timeout"),
        probes=probes,
    )
