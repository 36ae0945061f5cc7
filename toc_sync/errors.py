"""Errors raised by the TOC interface reconciler."""


class TocSyncError(Exception):
    """Base class for every fatal reconciliation error."""
    pass


class NoTocFilesFound(TocSyncError):
    """Raised when the configured directory holds no .toc files."""

    def __init__(self, directory: str):
        self.directory = directory
        super().__init__(
            f"No .toc files found in {directory}. "
            f"Check the toc-directory input and try again."
        )


class ReferenceFetchError(TocSyncError):
    """Raised when the reference document cannot be fetched."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch {url}: {reason}")


class TocFileReadError(TocSyncError):
    """Raised when a .toc file or its directory cannot be read."""
    pass


class TocFileWriteError(TocSyncError):
    """Raised when an updated .toc file cannot be written back."""
    pass


class InvalidInterfaceNumber(TocSyncError, ValueError):
    """Raised when an interface number is not a plain digit string."""
    pass


class ConfigError(TocSyncError):
    """Raised when an action input cannot be parsed."""
    pass
