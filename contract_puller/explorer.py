"""Etherscan-compatible explorer client (getsourcecode)."""

import logging
from typing import Optional

import requests

from .errors import ApiError, EmptyResultError, NetworkError
from .types import ContractRecord

DEFAULT_API_URL = "https://api.etherscan.io/v2/api"
DEFAULT_TIMEOUT = 30
USER_AGENT = "contract-puller/1.0"


def sourcecode_params(address: str, api_key: str, chain_id: str) -> dict:
    """Query parameters for a getsourcecode request, in the order the explorer documents them."""
    return {
        "chainid": chain_id,
        "module": "contract",
        "action": "getsourcecode",
        "address": address,
        "apikey": api_key,
    }


def get_sourcecode(
    address: str,
    *,
    api_url: str = DEFAULT_API_URL,
    api_key: str = "",
    chain_id: str = "1",
    timeout: float = DEFAULT_TIMEOUT,
    session: Optional[requests.Session] = None,
) -> dict:
    """Fetch the raw getsourcecode response body, checking HTTP and explorer status."""
    http = session or requests
    try:
        response = http.get(
            api_url,
            params=sourcecode_params(address, api_key, chain_id),
            headers={"User-Agent": USER_AGENT},
            timeout=timeout,
        )
    except requests.RequestException as e:
        raise NetworkError(f"Request for {address} failed: {e}") from e

    if response.status_code != 200:
        raise ApiError(f"HTTP {response.status_code}: {response.text}")

    try:
        data = response.json()
    except ValueError as e:
        raise NetworkError(f"Invalid JSON from explorer for {address}: {e}") from e

    if not isinstance(data, dict) or data.get("status") != "1":
        message = data.get("message") if isinstance(data, dict) else None
        result = data.get("result") if isinstance(data, dict) else data
        raise ApiError(f"API Error: {message} - {result}")
    return data


def fetch_contract(
    address: str,
    *,
    api_url: str = DEFAULT_API_URL,
    api_key: str = "",
    chain_id: str = "1",
    timeout: float = DEFAULT_TIMEOUT,
    session: Optional[requests.Session] = None,
) -> ContractRecord:
    """Fetch and parse the verified contract at ``address``."""
    logging.info(f"Fetching contract from: {address}")
    data = get_sourcecode(
        address,
        api_url=api_url,
        api_key=api_key,
        chain_id=chain_id,
        timeout=timeout,
        session=session,
    )

    result = data.get("result")
    if not isinstance(result, list) or not result or not isinstance(result[0], dict):
        raise EmptyResultError("No contract data returned")
    return ContractRecord.from_api(address, result[0])
