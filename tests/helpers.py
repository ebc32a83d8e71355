"""Shared fixtures for Contract Puller tests."""

import json

from contract_puller.types import ContractRecord

PROXY_ADDR = "0x1111111111111111111111111111111111111111"
IMPL_ADDR = "0x2222222222222222222222222222222222222222"

SAMPLE_ABI = [{"type": "function", "name": "totalSupply", "inputs": [], "outputs": []}]


def make_raw(**overrides) -> dict:
    """Raw getsourcecode result[0] object, as the explorer returns it."""
    raw = {
        "SourceCode": "pragma solidity ^0.8.0; contract Token {}",
        "ABI": json.dumps(SAMPLE_ABI),
        "ContractName": "Token",
        "CompilerVersion": "v0.8.19+commit.7dd6d404",
        "OptimizationUsed": "1",
        "Runs": "200",
        "ConstructorArguments": "",
        "EVMVersion": "paris",
        "Library": "",
        "LicenseType": "MIT",
        "Proxy": "0",
        "Implementation": "",
        "SwarmSource": "",
    }
    raw.update(overrides)
    return raw


def make_record(address: str = PROXY_ADDR, **overrides) -> ContractRecord:
    return ContractRecord.from_api(address, make_raw(**overrides))


def proxy_raw() -> dict:
    sources = {"sources": {"contracts/Proxy.sol": {"content": "contract TransparentProxy {}"}}}
    return make_raw(
        ContractName="TransparentProxy",
        SourceCode="{" + json.dumps(sources) + "}",
        Proxy="1",
        Implementation=IMPL_ADDR,
    )


def implementation_raw() -> dict:
    return make_raw(
        ContractName="VaultV2",
        SourceCode=json.dumps({"src/Vault.sol": {"content": "contract VaultV2 {}"}}),
    )
