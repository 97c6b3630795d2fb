"""
Centralized configuration management.

Configuration is loaded from:
1. Environment variables
2. .env file (if present)
3. Default values

Usage:
    from votermatch.config import get_config
    config = get_config()
    print(config.match.tier_set)  # "five-tier" unless MATCH_TIER_SET is set
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple


def _load_dotenv(dotenv_path: Optional[Path] = None) -> None:
    """
    Minimal .env loader (no external dependency).

    Supports KEY=VALUE, ignores blank lines and comments (#).
    Does not override existing environment variables.
    """
    if dotenv_path is None:
        dotenv_path = Path.cwd() / ".env"

    if not dotenv_path.exists() or not dotenv_path.is_file():
        return

    for raw_line in dotenv_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if not key:
            continue
        # Only set if not already in environment
        if os.getenv(key) in (None, ""):
            os.environ[key] = value


# Load .env on module import
_load_dotenv()


def _get_bool_env(key: str, default: bool = False) -> bool:
    """Get boolean from environment variable."""
    value = os.getenv(key, "").strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    return default


def _get_str_env(key: str, default: str = "") -> str:
    """Get stripped string from environment variable."""
    value = os.getenv(key, "").strip()
    return value or default


@dataclass
class OwnerFieldMap:
    """
    Column names used to read owner records.

    The first name in each tuple is the primary key; the rest are
    fallbacks for exports that use the county's column headers.
    """
    name: Tuple[str, ...] = field(
        default_factory=lambda: (_get_str_env("OWNER_NAME_FIELD", "name"), "Owner Name 1")
    )
    address: Tuple[str, ...] = field(
        default_factory=lambda: (_get_str_env("OWNER_ADDRESS_FIELD", "address"), "Owner Address")
    )
    zip: Tuple[str, ...] = field(
        default_factory=lambda: (_get_str_env("OWNER_ZIP_FIELD", "zip"), "Owner Zip")
    )
    owner_type: Tuple[str, ...] = field(
        default_factory=lambda: (_get_str_env("OWNER_TYPE_FIELD", "ownerType"),)
    )


@dataclass
class MatchConfig:
    """Matching engine configuration."""
    # "five-tier" or "two-tier"
    tier_set: str = field(default_factory=lambda: _get_str_env("MATCH_TIER_SET", "five-tier"))

    # Only compare voters with an email or phone number
    require_contact: bool = field(default_factory=lambda: _get_bool_env("MATCH_REQUIRE_CONTACT", False))

    # Restrict voters to one city (matched against city and mail_city); empty = all
    voter_city: str = field(default_factory=lambda: _get_str_env("VOTER_CITY", ""))


@dataclass
class Config:
    """
    Main application configuration.

    All settings are loaded from environment variables with sensible defaults.
    Set DEBUG=1 in environment to enable debug mode.
    """

    # Base directory for relative OUTPUT_DIR/LOG_DIR (where the command is run)
    base_dir: Path = field(default_factory=Path.cwd)

    # Directory paths
    output_dir: Path = field(default=None)
    logs_dir: Path = field(default=None)

    # Output file stem for the JSON and CSV match files
    output_name: str = field(
        default_factory=lambda: _get_str_env("OUTPUT_NAME", "owner_occupied_voter_matches")
    )

    # Debug mode (enables per-match debug logging)
    debug: bool = field(default_factory=lambda: _get_bool_env("DEBUG", False))

    log_to_file: bool = field(default_factory=lambda: _get_bool_env("LOG_TO_FILE", True))
    show_progress: bool = field(default_factory=lambda: _get_bool_env("SHOW_PROGRESS", True))

    # Sub-configurations
    match: MatchConfig = field(default_factory=MatchConfig)
    owner_fields: OwnerFieldMap = field(default_factory=OwnerFieldMap)

    def __post_init__(self):
        """Resolve paths after initialization."""
        if self.output_dir is None:
            self.output_dir = self.base_dir / os.getenv("OUTPUT_DIR", "output")
        if self.logs_dir is None:
            self.logs_dir = self.base_dir / os.getenv("LOG_DIR", "logs")

    def get_output_paths(self, output_name: Optional[str] = None) -> Tuple[Path, Path]:
        """Get (json_path, csv_path) for a run's match files."""
        stem = output_name or self.output_name
        return self.output_dir / f"{stem}.json", self.output_dir / f"{stem}.csv"


# Global config instance (lazily initialized)
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (useful for testing)."""
    global _config
    _config = None
