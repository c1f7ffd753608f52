"""Project-wide constants and configuration."""

from __future__ import annotations

from .env_loader import load_project_env

# Load once (single source of truth)
_ENV = load_project_env()

# Field metadata key holding the explicit environment variable name
ENV_METADATA_KEY: str = "env"

# File loaded when a record is loaded without explicit sources
DEFAULT_DOTENV_FILE: str = _ENV.get("ENVRECORD_DEFAULT_DOTENV", ".env")
# Never zero: an aborted load must fail the process
ABORT_EXIT_CODE: int = int(_ENV.get("ENVRECORD_ABORT_EXIT_CODE", "1")) or 1

LOG_FORMAT: str = "%(asctime)s - %(levelname)s - %(message)s"

REPORT_HEADER: str = "Errors loading environment variables:"
REPORT_ABORT_LINE: str = "Aborting due to missing env vars"
