"""Exception types raised by the rchan modules."""


class RchanError(Exception):
    """Base class for all rchan errors."""


class ExtractionError(RchanError):
    """A required version field is missing from PKGBUILD text."""

    def __init__(self, field):
        self.field = field
        super().__init__(f"Failed to find {field} in PKGBUILD")


class SourceError(RchanError):
    """A PKGBUILD could not be obtained or parsed."""


class SourceIOError(SourceError):
    """The local PKGBUILD could not be read."""


class SourceParseError(SourceError):
    """The PKGBUILD text lacks a version field."""

    def __init__(self, field, message):
        self.field = field
        super().__init__(message)


class SourceNetworkError(SourceError):
    """The remote PKGBUILD could not be fetched (connection, DNS, timeout)."""


class SourceHTTPStatusError(SourceError):
    """The remote server answered with a non-success status code."""

    def __init__(self, status_code, url):
        self.status_code = status_code
        self.url = url
        super().__init__(f"HTTP error {status_code} fetching: {url}")


class ConfigError(RchanError):
    """rchan.yaml could not be loaded."""


class ConfigIOError(ConfigError):
    """rchan.yaml could not be read."""


class ConfigFormatError(ConfigError):
    """rchan.yaml is malformed or lacks remote_pkgbuild."""


class BuildSettingsError(RchanError):
    """The output or scratch directory cannot be used safely."""
