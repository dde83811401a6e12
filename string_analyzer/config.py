"""
Configuration read from environment variables.

Defaults are evaluated when this module is imported, so environment
variables must be set before that.  Tests build their own ``Settings``
pointing at a temporary storage file instead of touching the
environment.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "String Analyzer Service")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Flat JSON file holding the whole collection.  Relative paths are
    # resolved against the working directory.
    strings_file: str = os.getenv("STRINGS_FILE", "strings.json")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))


settings = Settings()
