"""The results.json manifest: every contract ever pulled into an output directory.

There is no locking. Two runs against the same directory can interleave
load/upsert/persist and the last persist wins. ``persist`` writes the file in
place, so a crash mid-write can leave it corrupt; the next ``load`` then starts
from an empty manifest.
"""

import dataclasses
import json
import logging
import os
from datetime import datetime, timezone
from typing import Callable, Optional

from .types import ContractRecord, ManifestEntry

MANIFEST_FILENAME = "results.json"
UNKNOWN_DIRECTORY = "UnknownContract"

Manifest = dict[str, dict]


def utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def manifest_path(output_dir: str) -> str:
    return os.path.join(output_dir, MANIFEST_FILENAME)


def load(location: str) -> Manifest:
    """Read the manifest at ``location``; missing or unreadable files give an empty one."""
    if not os.path.exists(location):
        return {}
    try:
        with open(location, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logging.warning(f"Could not parse {location} ({e}); starting a fresh manifest")
        return {}
    if not isinstance(data, dict):
        logging.warning(f"{location} is not a JSON object; starting a fresh manifest")
        return {}
    return data


def build_entry(fetch_address: str, record: ContractRecord, directory: str, files: list[str]) -> ManifestEntry:
    return ManifestEntry(
        address=fetch_address,
        contract_name=record.contract_name,
        directory=directory or UNKNOWN_DIRECTORY,
        files=list(files),
        metadata=record.metadata(),
        abi=record.abi,
    )


def upsert(
    manifest: Manifest,
    address: str,
    entry: ManifestEntry,
    clock: Optional[Callable[[], str]] = None,
) -> Manifest:
    """Return a copy of ``manifest`` with ``address`` replaced by a freshly stamped ``entry``."""
    stamped = dataclasses.replace(entry, fetched_at=(clock or utc_now)())
    updated = dict(manifest)
    updated[address] = stamped.to_dict()
    return updated


def persist(manifest: Manifest, location: str) -> None:
    """Write the whole manifest back to ``location`` in a single write."""
    with open(location, "w", encoding="utf-8") as f:
        f.write(json.dumps(manifest, indent=2))
    logging.info(f"  ✓ Updated {location}")
