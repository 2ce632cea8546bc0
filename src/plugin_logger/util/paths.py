"""Centralized path resolution for config, uploads and log directories."""

import os
from pathlib import Path
from typing import Optional

ROOT_ENV_VAR = "PLUGIN_LOGGER_ROOT"
CONFIG_ENV_VAR = "PLUGIN_LOGGER_CONFIG"
UPLOADS_ENV_VAR = "PLUGIN_LOGGER_UPLOADS_DIR"

DEFAULT_LOG_FILENAME = "debug.log"

ACCESS_FILE_NAME = ".htaccess"
ACCESS_FILE_CONTENT = "Deny from all\n"
PLACEHOLDER_FILE_NAME = "index.php"
PLACEHOLDER_FILE_CONTENT = "<?php\n// Silence is golden.\n"


def get_app_root() -> Path:
    """
    Get the application root directory.
    - PLUGIN_LOGGER_ROOT when set
    - Otherwise the current working directory
    """
    root = os.environ.get(ROOT_ENV_VAR)
    if root:
        return Path(root)
    return Path.cwd()


def get_data_dir() -> Path:
    """Get the data directory."""
    return get_app_root() / "data"


def get_config_path() -> Path:
    """Get path to config.json."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return get_data_dir() / "config" / "config.json"


def get_uploads_dir(configured: Optional[str] = None) -> Path:
    """
    Get the uploads base directory.

    Precedence: PLUGIN_LOGGER_UPLOADS_DIR, the configured value, then
    data/uploads under the app root. The directory is not created here.
    """
    override = os.environ.get(UPLOADS_ENV_VAR)
    if override:
        return Path(override)
    if configured:
        return Path(configured)
    return get_data_dir() / "uploads"


def is_bare_filename(path: str) -> bool:
    """True when the path has no directory part ("errors.log")."""
    return "/" not in path and "\\" not in path and os.sep not in path


def ensure_protected_dir(directory: Path) -> None:
    """
    Create the directory with its deny-all access file and placeholder.

    Idempotent: existing files are left untouched. Raises OSError on the
    first step that fails; earlier steps are not undone.
    """
    directory.mkdir(parents=True, exist_ok=True)

    access_file = directory / ACCESS_FILE_NAME
    if not access_file.exists():
        access_file.write_text(ACCESS_FILE_CONTENT, encoding="utf-8")

    placeholder = directory / PLACEHOLDER_FILE_NAME
    if not placeholder.exists():
        placeholder.write_text(PLACEHOLDER_FILE_CONTENT, encoding="utf-8")
