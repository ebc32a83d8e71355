"""Contract Puller - Fetch verified smart contract source code from blockchain explorers."""

from .errors import (
    PullerError,
    EmptySourceError,
    ApiError,
    EmptyResultError,
    NetworkError,
    UnsafePathError,
    ConfigError,
)
from .explorer import fetch_contract, get_sourcecode
from .manifest import load, upsert, persist
from .proxy import resolve
from .puller import pull_contract, make_fetcher
from .sources import normalize, detect_format, SourceFormat
from .types import (
    ContractRecord,
    SourceFile,
    ResolvedContract,
    ManifestEntry,
    PullResult,
)

__version__ = "1.0.0"
__all__ = [
    "PullerError",
    "EmptySourceError",
    "ApiError",
    "EmptyResultError",
    "NetworkError",
    "UnsafePathError",
    "ConfigError",
    "fetch_contract",
    "get_sourcecode",
    "load",
    "upsert",
    "persist",
    "resolve",
    "pull_contract",
    "make_fetcher",
    "normalize",
    "detect_format",
    "SourceFormat",
    "ContractRecord",
    "SourceFile",
    "ResolvedContract",
    "ManifestEntry",
    "PullResult",
]
