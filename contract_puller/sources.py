"""Normalize explorer SourceCode payloads into a file map.

Explorers return verified source in one of several shapes:

- plain Solidity text for single-file contracts
- standard JSON input (``{"language": ..., "sources": {...}}``)
- the same JSON wrapped in an extra pair of braces (``{{...}}``)
- a flat ``{"path.sol": {"content": ...}}`` or ``{"path.sol": "..."}`` map

``detect_format`` decides which shape a payload is, and ``normalize`` turns any
of them into an ordered ``{path: SourceFile}`` dict.
"""

import json
import logging
from enum import Enum
from typing import Any, Optional

from .errors import EmptySourceError
from .types import SourceFile

DEFAULT_FILENAME = "Contract.sol"


class SourceFormat(Enum):
    PLAIN = "plain"
    JSON = "json"
    DOUBLE_WRAPPED_JSON = "double_wrapped_json"
    FLAT_JSON = "flat_json"
    MALFORMED_JSON = "malformed_json"


def single_file_name(contract_name: Optional[str]) -> str:
    return f"{contract_name}.sol" if contract_name else DEFAULT_FILENAME


def _unwrap(raw_source: str) -> str:
    # Explorer quirk: standard JSON input double-wrapped as {{...}}.
    # Strip exactly one character from each end, nothing more.
    if raw_source.startswith("{{"):
        return raw_source[1:-1]
    return raw_source


def _parse(raw_source: str) -> tuple[SourceFormat, Any]:
    """Classify the payload and return it parsed where that applies."""
    if not raw_source.startswith("{"):
        return SourceFormat.PLAIN, None

    try:
        parsed = json.loads(_unwrap(raw_source))
    except json.JSONDecodeError:
        return SourceFormat.MALFORMED_JSON, None

    if not isinstance(parsed, dict):
        return SourceFormat.MALFORMED_JSON, None
    if isinstance(parsed.get("sources"), dict):
        if raw_source.startswith("{{"):
            return SourceFormat.DOUBLE_WRAPPED_JSON, parsed["sources"]
        return SourceFormat.JSON, parsed["sources"]
    return SourceFormat.FLAT_JSON, parsed


def detect_format(raw_source: str) -> SourceFormat:
    """Return which payload shape ``raw_source`` is."""
    return _parse(raw_source)[0]


def _entry_content(entry: Any) -> str:
    if isinstance(entry, str):
        return entry
    if isinstance(entry, dict) and "content" in entry:
        content = entry["content"]
        if content is None:
            return ""
        return content if isinstance(content, str) else json.dumps(content)
    return json.dumps(entry)


def normalize(raw_source: Optional[str], contract_name: Optional[str] = None) -> dict[str, SourceFile]:
    """
    Expand a SourceCode payload into an ordered map of relative path -> SourceFile.

    Malformed JSON is never an error: the original, unstripped payload is kept
    as a single file named after the contract.
    """
    if not raw_source:
        raise EmptySourceError("Empty source code")

    fmt, entries = _parse(raw_source)
    logging.debug(f"Detected source format: {fmt.value}")

    files: dict[str, SourceFile] = {}
    if entries is not None:
        for path, entry in entries.items():
            files[str(path)] = SourceFile(path=str(path), content=_entry_content(entry))

    if not files:
        name = single_file_name(contract_name)
        files[name] = SourceFile(path=name, content=raw_source)

    return files
