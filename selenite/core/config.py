"""
Configuration for a browser session.

Every Browser carries its own SeleniteConfig; nothing here is global,
so parallel sessions never share wait settings.
"""

from dataclasses import dataclass
import os


@dataclass
class SeleniteConfig:
    """Wait and driver settings for one Browser."""
    timeout: float = 4.0  # Seconds resolve_after() waits for a condition
    poll_interval: float = 0.1  # Seconds between condition checks
    headless: bool = False
    window_size: str = "1920,1080"

    @classmethod
    def from_env(cls) -> "SeleniteConfig":
        """
        Build a config from SELENITE_* environment variables.

        Unset variables keep their defaults.
        """
        config = cls()
        if os.environ.get("SELENITE_TIMEOUT", "").strip():
            config.timeout = float(os.environ["SELENITE_TIMEOUT"])
        if os.environ.get("SELENITE_POLL_INTERVAL", "").strip():
            config.poll_interval = float(os.environ["SELENITE_POLL_INTERVAL"])
        if os.environ.get("SELENITE_HEADLESS", "").strip():
            config.headless = os.environ["SELENITE_HEADLESS"].strip().lower() in ("1", "true", "yes")
        return config
