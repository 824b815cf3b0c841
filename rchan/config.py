"""Per-package rchan.yaml declaration."""

from dataclasses import dataclass
from pathlib import Path

import yaml

from rchan.errors import ConfigFormatError, ConfigIOError

CONFIG_FILENAME = "rchan.yaml"


@dataclass(frozen=True)
class RchanConfig:
    """Contents of a package's rchan.yaml."""

    # URL of the canonical remote PKGBUILD
    remote_pkgbuild: str

    @classmethod
    def from_file(cls, path):
        """Read and parse rchan.yaml from a file path."""
        path = Path(path)
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigIOError(f"Failed to read {path}: {e}") from e

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigFormatError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigFormatError(f"{path} must contain a mapping")

        remote = data.get("remote_pkgbuild")
        if remote is None:
            raise ConfigFormatError(f"{path} is missing required 'remote_pkgbuild' field")
        if not isinstance(remote, str):
            raise ConfigFormatError(f"'remote_pkgbuild' in {path} must be a string")

        return cls(remote_pkgbuild=remote)
