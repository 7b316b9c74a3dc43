"""
File system and environment adapters for the tokens component.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import yaml


class LocalFileSystemAdapter:
    """Adapter for local file system operations."""

    def read_json(self, path: Path) -> Any:
        """Read and parse a UTF-8 JSON file."""
        with open(path, encoding="utf-8") as f:
            return json.load(f)

    def read_yaml(self, path: Path) -> Any:
        """Read and parse a YAML file."""
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f)

    def exists(self, path: Path) -> bool:
        """Check if a regular file exists."""
        return path.is_file()


class OsEnvironmentAdapter:
    """Adapter for OS environment variables."""

    def get(self, key: str, default: str | None = None) -> str | None:
        """Get an environment variable."""
        return os.environ.get(key, default)

    def cwd(self) -> Path:
        return Path.cwd()


# Default adapter instances
default_filesystem = LocalFileSystemAdapter()
default_environment = OsEnvironmentAdapter()
