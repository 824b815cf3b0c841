"""Compare local PKGBUILDs against their remote counterparts."""

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from rchan import pkgbuild
from rchan.config import CONFIG_FILENAME, RchanConfig
from rchan.errors import ConfigError, SourceError, SourceIOError, SourceParseError

PKGBUILD_FILENAME = "PKGBUILD"


@dataclass(frozen=True)
class Updated:
    """Remote version differs from the local one."""

    name: str
    local_ver: str
    remote_ver: str


@dataclass(frozen=True)
class UpToDate:
    """Versions match, no update needed."""

    name: str
    local_ver: str


@dataclass(frozen=True)
class Failed:
    """A step of the check failed."""

    name: str
    message: str


ScanResult = Union[Updated, UpToDate, Failed]


def scan_directory(base):
    """Check every immediate subdirectory holding both rchan.yaml and PKGBUILD.

    Directories missing either file are skipped. An OSError while listing
    `base` propagates; failures inside a package become a Failed result.
    Results are sorted by package name.
    """
    base = Path(base)
    results = []

    for path in base.iterdir():
        rchan_yaml = path / CONFIG_FILENAME
        pkgbuild_path = path / PKGBUILD_FILENAME
        try:
            if not path.is_dir():
                continue
            if not rchan_yaml.is_file() or not pkgbuild_path.is_file():
                continue
        except OSError:
            # Unsearchable directories are not candidates
            continue

        results.append(check_package(path.name, rchan_yaml, pkgbuild_path))

    results.sort(key=lambda result: result.name)
    return results


def check_package(name, rchan_yaml, pkgbuild_path):
    """Check a single package: compare local and remote PKGBUILD versions."""
    try:
        config = RchanConfig.from_file(rchan_yaml)
    except ConfigError as e:
        return Failed(name, f"Failed to parse {CONFIG_FILENAME}: {e}")

    try:
        local_ver = pkgbuild.parse_local(pkgbuild_path)
    except SourceIOError as e:
        return Failed(name, f"Failed to read local PKGBUILD: {e}")
    except SourceParseError as e:
        return Failed(name, f"Failed to parse local PKGBUILD: {e}")

    try:
        remote_ver = pkgbuild.parse_remote(config.remote_pkgbuild)
    except SourceParseError as e:
        return Failed(name, f"Failed to parse remote PKGBUILD: {e}")
    except SourceError as e:
        return Failed(name, f"Failed to fetch remote PKGBUILD: {e}")

    if local_ver == remote_ver:
        return UpToDate(name, str(local_ver))
    return Updated(name, str(local_ver), str(remote_ver))
