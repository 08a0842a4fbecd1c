# threetaps/config.py
from dataclasses import dataclass
from typing import Optional
import os

DEFAULT_SERVER = "http://3taps.net"


@dataclass(frozen=True)
class Settings:
    server: str = DEFAULT_SERVER
    timeout_sec: int = 20

    # Only sent with POST (status) requests, and only as a pair
    agent_id: Optional[str] = None
    auth_id: Optional[str] = None

    # Export paths
    data_processed_dir: str = "data/processed"

    @property
    def has_credentials(self) -> bool:
        return bool(self.agent_id and self.auth_id)


def load_settings() -> Settings:
    server = os.getenv("THREETAPS_SERVER", "").strip() or DEFAULT_SERVER
    agent_id = os.getenv("THREETAPS_AGENT_ID", "").strip() or None
    auth_id = os.getenv("THREETAPS_AUTH_ID", "").strip() or None

    if bool(agent_id) != bool(auth_id):
        raise ValueError(
            "THREETAPS_AGENT_ID and THREETAPS_AUTH_ID must be set together.\n"
            "Example (local): export THREETAPS_AGENT_ID='me' THREETAPS_AUTH_ID='secret'"
        )

    timeout_raw = os.getenv("THREETAPS_TIMEOUT_SEC", "").strip()
    try:
        timeout_sec = int(timeout_raw) if timeout_raw else Settings.timeout_sec
    except ValueError:
        raise ValueError(f"THREETAPS_TIMEOUT_SEC must be an integer, got {timeout_raw!r}") from None

    return Settings(server=server, timeout_sec=timeout_sec, agent_id=agent_id, auth_id=auth_id)
