"""Settings for a pull: command line, then environment, then a YAML file, then defaults."""

import os
from dataclasses import dataclass
from typing import Optional

import yaml

from .errors import ConfigError
from .explorer import DEFAULT_API_URL, DEFAULT_TIMEOUT

DEFAULT_CHAIN_ID = "1"
DEFAULT_OUTPUT_DIR = "./contracts"

# setting name -> environment variable
ENV_VARS = {
    "address": "CONTRACT_ADDRESS",
    "api_key": "ETHERSCAN_API_KEY",
    "api_url": "API_URL",
    "chain_id": "CHAIN_ID",
    "output_dir": "OUTPUT_DIR",
    "timeout": "REQUEST_TIMEOUT",
}

STRING_KEYS = ("address", "api_key")


@dataclass
class PullerConfig:
    address: str = ""
    api_key: str = ""
    api_url: str = DEFAULT_API_URL
    chain_id: str = DEFAULT_CHAIN_ID
    output_dir: str = DEFAULT_OUTPUT_DIR
    timeout: float = DEFAULT_TIMEOUT


def load_config_file(config_path: str) -> dict:
    """Read a YAML settings file; keys match PullerConfig fields."""
    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Error loading config file {config_path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")
    unknown = set(data) - set(ENV_VARS)
    if unknown:
        raise ConfigError(f"Unknown config keys in {config_path}: {', '.join(sorted(unknown))}")
    # YAML reads unquoted 0x... addresses and all-digit keys as integers.
    for name in STRING_KEYS:
        if data.get(name) is not None and not isinstance(data[name], str):
            raise ConfigError(f"{name} in {config_path} must be a quoted string, e.g. {name}: \"0x...\"")
    return data


def resolve_config(
    overrides: Optional[dict] = None,
    config_path: Optional[str] = None,
    environ: Optional[dict] = None,
) -> PullerConfig:
    """Merge explicit overrides, environment variables and an optional config file."""
    environ = os.environ if environ is None else environ
    file_values = load_config_file(config_path) if config_path else {}
    overrides = overrides or {}

    values = {}
    for name, env_var in ENV_VARS.items():
        if overrides.get(name) is not None:
            values[name] = overrides[name]
        elif environ.get(env_var):
            values[name] = environ[env_var]
        elif file_values.get(name) is not None:
            values[name] = file_values[name]

    config = PullerConfig(**{k: str(v) for k, v in values.items() if k != "timeout"})
    if "timeout" in values:
        try:
            config.timeout = float(values["timeout"])
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid timeout: {values['timeout']!r}") from e
    return config
