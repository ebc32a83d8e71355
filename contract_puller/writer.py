"""Write normalized source files under an output directory."""

import logging
import os
from pathlib import PurePosixPath

from .errors import UnsafePathError
from .types import SourceFile


def safe_relpath(file_path: str) -> str:
    """Strip leading slashes and reject paths that would leave the output directory."""
    rel = PurePosixPath(file_path.replace("\\", "/").lstrip("/"))
    if any(part == ".." for part in rel.parts) or str(rel) in ("", "."):
        raise UnsafePathError(f"Unsafe source path: {file_path!r}")
    return str(rel)


def write_sources(output_dir: str, sources: dict[str, SourceFile]) -> list[str]:
    """Write every file in ``sources`` and return the paths written, in order."""
    os.makedirs(output_dir, exist_ok=True)
    logging.info(f"\nWriting files to: {output_dir}")

    file_paths = []
    for file_path, source in sources.items():
        rel_path = safe_relpath(file_path)
        full_path = os.path.join(output_dir, *rel_path.split("/"))
        os.makedirs(os.path.dirname(full_path), exist_ok=True)
        with open(full_path, "w", encoding="utf-8") as f:
            f.write(source.content)
        logging.info(f"  ✓ {rel_path}")
        file_paths.append(rel_path)
    return file_paths
