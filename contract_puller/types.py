"""Type definitions for Contract Puller."""

import json
import logging
from dataclasses import dataclass
from typing import Any, NamedTuple, Optional

NOT_VERIFIED_ABI = "Contract source code not verified"


def _parse_runs(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def parse_abi(raw_abi: Optional[str]) -> Any:
    """Decode the ABI field, keeping the raw string if it is not valid JSON."""
    if not raw_abi or raw_abi == NOT_VERIFIED_ABI:
        return None
    try:
        return json.loads(raw_abi)
    except json.JSONDecodeError:
        logging.debug(f"ABI is not valid JSON, keeping raw string ({len(raw_abi)} chars)")
        return raw_abi


@dataclass(frozen=True)
class ContractRecord:
    """One getsourcecode result for one address."""
    address: str
    contract_name: str
    compiler_version: str
    optimization_used: bool
    runs: Optional[int]
    evm_version: str
    license_type: str
    proxy: bool
    implementation_address: Optional[str]
    constructor_arguments: str
    source_code: str
    abi: Any

    @classmethod
    def from_api(cls, address: str, raw: dict) -> "ContractRecord":
        """Build a record from the explorer's raw ``result[0]`` object."""
        proxy = str(raw.get("Proxy") or "0") == "1"
        implementation = raw.get("Implementation") or None
        return cls(
            address=address,
            contract_name=raw.get("ContractName") or "",
            compiler_version=raw.get("CompilerVersion") or "",
            optimization_used=str(raw.get("OptimizationUsed") or "0") == "1",
            runs=_parse_runs(raw.get("Runs")),
            evm_version=raw.get("EVMVersion") or "",
            license_type=raw.get("LicenseType") or "",
            proxy=proxy,
            implementation_address=implementation if proxy else None,
            constructor_arguments=raw.get("ConstructorArguments") or "",
            source_code=raw.get("SourceCode") or "",
            abi=parse_abi(raw.get("ABI")),
        )

    def metadata(self) -> dict:
        """Metadata subset stored in the manifest."""
        return {
            "contractName": self.contract_name,
            "compilerVersion": self.compiler_version,
            "optimizationUsed": self.optimization_used,
            "runs": self.runs,
            "evmVersion": self.evm_version,
            "licenseType": self.license_type,
            "proxy": self.proxy,
            "implementation": self.implementation_address,
            "constructorArguments": self.constructor_arguments,
        }


@dataclass(frozen=True)
class SourceFile:
    """A single source file reconstructed from the explorer payload."""
    path: str
    content: str


class ResolvedContract(NamedTuple):
    """A record to write, with the address it was fetched from and its directory label."""
    fetch_address: str
    record: ContractRecord
    directory: str


@dataclass
class ManifestEntry:
    """Summary of one fetched contract as stored in results.json."""
    address: str
    contract_name: str
    directory: str
    files: list[str]
    metadata: dict
    abi: Any
    fetched_at: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "address": self.address,
            "contractName": self.contract_name,
            "directory": self.directory,
            "files": list(self.files),
            "metadata": dict(self.metadata),
            "abi": self.abi,
            "fetchedAt": self.fetched_at,
        }


@dataclass
class PullResult:
    """Outcome of writing one resolved contract."""
    address: str
    directory: str
    files: list[str]
    record: ContractRecord
    output_dir: str
