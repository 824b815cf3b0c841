"""Version extraction from PKGBUILD files, local or remote."""

import re
from dataclasses import dataclass
from pathlib import Path

import requests

from rchan.errors import (
    ExtractionError,
    SourceHTTPStatusError,
    SourceIOError,
    SourceNetworkError,
    SourceParseError,
)

# Arch packaging guidelines use unquoted assignments at column 0:
#   pkgver=1.02.3
#   pkgrel=1
PKGVER_RE = re.compile(r"^pkgver=([0-9][0-9.]*)", re.MULTILINE)
PKGREL_RE = re.compile(r"^pkgrel=([0-9]+)", re.MULTILINE)


@dataclass(frozen=True)
class PkgVersion:
    """pkgver/pkgrel pair extracted from a PKGBUILD."""

    pkgver: str
    pkgrel: str

    def __post_init__(self):
        if not re.fullmatch(r"[0-9][0-9.]*", self.pkgver):
            raise ValueError(f"Invalid pkgver: {self.pkgver!r}")
        if not re.fullmatch(r"[0-9]+", self.pkgrel):
            raise ValueError(f"Invalid pkgrel: {self.pkgrel!r}")

    def __str__(self):
        return f"{self.pkgver}-{self.pkgrel}"


def parse_pkgbuild(content):
    """Extract pkgver and pkgrel from PKGBUILD text.

    The first matching line wins for each field. Shell syntax is never
    evaluated, so arrays, functions and conditionals elsewhere in the file
    are ignored. pkgver is checked before pkgrel.
    """
    ver_match = PKGVER_RE.search(content)
    if ver_match is None:
        raise ExtractionError("pkgver")

    rel_match = PKGREL_RE.search(content)
    if rel_match is None:
        raise ExtractionError("pkgrel")

    return PkgVersion(pkgver=ver_match.group(1), pkgrel=rel_match.group(1))


def _parse_source(content):
    try:
        return parse_pkgbuild(content)
    except ExtractionError as e:
        raise SourceParseError(e.field, str(e)) from e


def parse_local(path):
    """Read and parse a PKGBUILD from the filesystem."""
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceIOError(f"Failed to read PKGBUILD: {path}: {e}") from e
    return _parse_source(content)


def parse_remote(url):
    """Fetch a PKGBUILD over HTTP and parse it."""
    try:
        response = requests.get(url)
    except requests.RequestException as e:
        raise SourceNetworkError(f"Failed to fetch {url}: {e}") from e

    if not 200 <= response.status_code < 300:
        raise SourceHTTPStatusError(response.status_code, url)

    return _parse_source(response.text)
