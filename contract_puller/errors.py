"""Exception types raised by Contract Puller."""


class PullerError(Exception):
    """Base class for errors that abort a pull."""
    kind = "PULLER_ERROR"


class EmptySourceError(PullerError):
    """The explorer returned no source code to normalize."""
    kind = "EMPTY_SOURCE"


class ApiError(PullerError):
    """Non-200 response, or the explorer reported a non-"1" status."""
    kind = "API_ERROR"


class EmptyResultError(PullerError):
    """The explorer reported success but returned no contract data."""
    kind = "EMPTY_RESULT"


class NetworkError(PullerError):
    """The request never produced a usable response."""
    kind = "NETWORK_ERROR"


class UnsafePathError(PullerError):
    """An explorer-supplied source path would escape the output directory."""
    kind = "UNSAFE_PATH"


class ConfigError(PullerError):
    """The config file could not be read."""
    kind = "CONFIG_ERROR"
