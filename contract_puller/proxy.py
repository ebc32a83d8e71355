"""Proxy-to-implementation resolution."""

import logging
from typing import Callable, Iterator

from .types import ContractRecord, ResolvedContract

PROXY_SUFFIX = "_Proxy"

FetchFn = Callable[[str], ContractRecord]


def needs_implementation(record: ContractRecord) -> bool:
    return record.proxy and bool(record.implementation_address)


def resolve(record: ContractRecord, fetch_fn: FetchFn) -> Iterator[ResolvedContract]:
    """
    Yield the contracts to write for a requested address, proxy first.

    A proxy with a known implementation yields the proxy under
    ``<name>_Proxy`` before the implementation is fetched, so the caller can
    persist it even if the second fetch fails. The implementation record is
    never inspected for a further proxy hop.
    """
    if not needs_implementation(record):
        yield ResolvedContract(record.address, record, record.contract_name)
        return

    logging.warning("Proxy contract detected!")
    logging.info(f"Implementation address: {record.implementation_address}")
    yield ResolvedContract(record.address, record, record.contract_name + PROXY_SUFFIX)

    implementation_address = record.implementation_address
    logging.info("Fetching implementation contract...")
    implementation = fetch_fn(implementation_address)
    logging.info(f"Implementation: {implementation.contract_name}")
    logging.info(f"Compiler: {implementation.compiler_version}")
    yield ResolvedContract(implementation_address, implementation, implementation.contract_name)
