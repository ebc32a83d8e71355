"""Pull a contract (and its implementation, for proxies) into an output directory."""

import functools
import logging
from typing import Callable, Optional

import requests

from . import manifest
from .config import PullerConfig
from .explorer import fetch_contract
from .proxy import FetchFn, needs_implementation, resolve
from .sources import normalize
from .types import PullResult, ResolvedContract, SourceFile
from .writer import write_sources

WriterFn = Callable[[str, dict[str, SourceFile]], list[str]]


def make_fetcher(config: PullerConfig, session: Optional[requests.Session] = None) -> FetchFn:
    """Bind explorer settings into a one-argument fetch function."""
    return functools.partial(
        fetch_contract,
        api_url=config.api_url,
        api_key=config.api_key,
        chain_id=config.chain_id,
        timeout=config.timeout,
        session=session,
    )


def save_contract(
    resolved: ResolvedContract,
    output_dir: str,
    writer: WriterFn = write_sources,
    clock: Optional[Callable[[], str]] = None,
) -> PullResult:
    """Write one resolved contract's sources and record it in the manifest."""
    record = resolved.record
    sources = normalize(record.source_code, record.contract_name)
    files = writer(output_dir, sources)
    if manifest.MANIFEST_FILENAME in files:
        logging.warning(
            f"Source file {manifest.MANIFEST_FILENAME} of {resolved.fetch_address} "
            f"is overwritten by the manifest"
        )

    location = manifest.manifest_path(output_dir)
    entry = manifest.build_entry(resolved.fetch_address, record, resolved.directory, files)
    current = manifest.load(location)
    manifest.persist(manifest.upsert(current, resolved.fetch_address, entry, clock=clock), location)

    return PullResult(
        address=resolved.fetch_address,
        directory=entry.directory,
        files=files,
        record=record,
        output_dir=output_dir,
    )


def pull_contract(
    address: str,
    fetch_fn: FetchFn,
    output_dir: str,
    writer: WriterFn = write_sources,
    clock: Optional[Callable[[], str]] = None,
) -> list[PullResult]:
    """
    Fetch ``address`` and persist it, following one proxy hop.

    Each resolved contract is written and recorded before the next one is
    fetched. If the implementation fetch fails, the proxy stays on disk and in
    the manifest and the error propagates.
    """
    record = fetch_fn(address)
    logging.info(f"Contract: {record.contract_name}")
    logging.info(f"Compiler: {record.compiler_version}")

    results = []
    for resolved in resolve(record, fetch_fn):
        result = save_contract(resolved, output_dir, writer=writer, clock=clock)
        if needs_implementation(record) and not results:
            logging.info(f"\nProxy contract saved: {len(result.files)} files written")
        results.append(result)
    return results
