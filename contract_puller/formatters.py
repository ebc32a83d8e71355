"""Output formatters for Contract Puller."""

from .types import PullResult


def format_optimization(result: PullResult) -> str:
    record = result.record
    return f"Yes ({record.runs} runs)" if record.optimization_used else "No"


def format_summary(result: PullResult, show_proxy: bool = True) -> str:
    """Format the contract summary shown after a successful pull.

    The proxy line is left out for the implementation half of a proxy pull.
    """
    record = result.record
    lines = [
        "",
        f"[INFO] Success! {len(result.files)} files written to {result.output_dir}",
        "",
        "Contract Summary:",
        f"  Name: {record.contract_name}",
        f"  Compiler: {record.compiler_version}",
        f"  Optimization: {format_optimization(result)}",
        f"  License: {record.license_type}",
    ]
    if show_proxy and record.proxy:
        lines.append(f"  Proxy: Yes (Implementation: {record.implementation_address or 'unknown'})")
    return "\n".join(lines)
