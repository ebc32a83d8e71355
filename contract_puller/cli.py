#!/usr/bin/env python3
"""CLI interface for Contract Puller."""

import logging
import sys
from typing import Optional

import click
import requests

from . import __version__
from .config import resolve_config
from .errors import PullerError
from .formatters import format_summary
from .puller import make_fetcher, pull_contract

EPILOG = """\b
Environment Variables:
  CONTRACT_ADDRESS     Contract address
  ETHERSCAN_API_KEY    API key for Etherscan/Blockscout
  API_URL              API base URL
  CHAIN_ID             Chain ID (default: 1)
  OUTPUT_DIR           Output directory
  REQUEST_TIMEOUT      Request timeout in seconds (default: 30)

\b
Examples:
  contract-puller --address 0x123... --api-key YOUR_KEY
  CONTRACT_ADDRESS=0x123... ETHERSCAN_API_KEY=YOUR_KEY contract-puller
"""


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(message)s',
        handlers=[logging.StreamHandler()],
    )


@click.command(epilog=EPILOG)
@click.argument("address_arg", metavar="[ADDRESS]", required=False)
@click.option("-a", "--address", help="Contract address (required)")
@click.option("-k", "--api-key", help="API key for the explorer")
@click.option("-u", "--api-url", help="API base URL (default: https://api.etherscan.io/v2/api)")
@click.option("-c", "--chain-id", help="Chain ID (default: 1 for Ethereum mainnet)")
@click.option("-o", "--output", "output_dir", type=click.Path(file_okay=False), help="Output directory (default: ./contracts)")
@click.option("--timeout", type=float, help="Request timeout in seconds (default: 30)")
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False), help="YAML config file")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.version_option(version=__version__)
@click.pass_context
def cli(
    ctx: click.Context,
    address_arg: Optional[str],
    address: Optional[str],
    api_key: Optional[str],
    api_url: Optional[str],
    chain_id: Optional[str],
    output_dir: Optional[str],
    timeout: Optional[float],
    config_path: Optional[str],
    verbose: bool,
):
    """Fetch smart contract source code from blockchain explorers."""
    setup_logging(verbose)

    try:
        config = resolve_config(
            overrides={
                "address": address or address_arg,
                "api_key": api_key,
                "api_url": api_url,
                "chain_id": chain_id,
                "output_dir": output_dir,
                "timeout": timeout,
            },
            config_path=config_path,
        )
    except PullerError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if not config.address:
        click.echo("Error: Contract address is required\n", err=True)
        click.echo(ctx.get_help(), err=True)
        sys.exit(1)

    if not config.api_key:
        click.echo("Warning: No API key provided. Rate limits may apply.\n", err=True)

    try:
        with requests.Session() as session:
            results = pull_contract(config.address, make_fetcher(config, session), config.output_dir)
    except (PullerError, OSError) as e:
        click.echo(f"\n[ERRO] Error: {e}", err=True)
        sys.exit(1)

    click.echo(format_summary(results[-1], show_proxy=len(results) == 1))


def main():
    cli()


if __name__ == "__main__":
    main()
