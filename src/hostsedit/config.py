"""
Configuration loaded from environment variables.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field


def default_hosts_path() -> str:
    """Return the platform's hosts file location."""
    if os.name == "nt":
        root = os.environ.get("SystemRoot", r"C:\Windows")
        return os.path.join(root, "System32", "drivers", "etc", "hosts")
    return "/etc/hosts"


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Config:
    """Defaults used by HostsService and the HTTP wrapper."""

    hosts_file_path: str = field(default_factory=default_hosts_path)
    strict: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """
        Load configuration from the environment.

        Environment variables:
            HOSTS_FILE:   hosts file path (default: platform hosts file)
            HOSTS_STRICT: reject duplicate / unparsed rows on load (default: false)
            LOG_LEVEL:    logging level (default: INFO)
        """
        return cls(
            hosts_file_path=os.getenv("HOSTS_FILE") or default_hosts_path(),
            strict=_env_flag("HOSTS_STRICT"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> None:
        valid_log_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if self.log_level not in valid_log_levels:
            raise ValueError(
                f"Invalid LOG_LEVEL: {self.log_level}. "
                f"Must be one of: {', '.join(sorted(valid_log_levels))}"
            )
