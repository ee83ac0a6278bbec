"""
Configuration management for PlaneDB.

Loads settings from environment variables with sensible defaults.
The FAA data files are looked up relative to the working directory
unless overridden.
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class DataConfig:
    """Locations of the FAA releasable aircraft files."""
    types_path: str = os.getenv('PLANEDB_TYPES_FILE', 'ACFTREF.txt')
    planes_path: str = os.getenv('PLANEDB_MASTER_FILE', 'MASTER.txt')


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration."""
    data: DataConfig = field(default_factory=DataConfig)

    # Flask settings
    secret_key: str = 'dev-key-change-in-prod'
    debug: bool = False


def load_config() -> AppConfig:
    """Load all configuration."""
    return AppConfig(
        data=DataConfig(),
        secret_key=os.getenv('SECRET_KEY', 'dev-key-change-in-prod'),
        debug=os.getenv('FLASK_DEBUG', '0') == '1',
    )


# Singleton instance
config = load_config()
