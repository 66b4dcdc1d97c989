"""Domain-specific errors for framectl."""


class FramectlError(Exception):
    """Base error for framectl."""


class ConfigError(FramectlError):
    """Raised when the user configuration file is unreadable or invalid."""


class CatalogLoadError(FramectlError):
    """Raised when the bezel catalog cannot be fetched or decoded."""


class AssetDownloadError(FramectlError):
    """Raised when a frame asset cannot be materialized in the local cache."""


class FrameOverrideError(FramectlError):
    """Raised when an explicit frame path does not point at a file."""


class TransportError(FramectlError):
    """Base transport error."""


class TransportRequestError(TransportError):
    """Raised when a remote fetch fails or returns a non-success status."""
