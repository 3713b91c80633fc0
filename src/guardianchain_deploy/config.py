"""Deployer configuration for guardianchain-deploy."""

import math
import os
import re
from pathlib import Path
from typing import Optional, Union

from .constants import (
    CONTRACT_NAME,
    DEFAULT_POLL_INTERVAL,
    DEFAULT_RPC_URL,
    ENV_ARTIFACTS_DIR,
    ENV_DEPLOYMENTS_PATH,
    ENV_POLL_INTERVAL,
    ENV_PRIVATE_KEY,
    ENV_RPC_URL,
    NETWORK_LABEL,
)
from .exceptions import ConfigurationError
from .paths import get_default_artifacts_dir, get_default_record_path
from .types import DeployerConfig

_PRIVATE_KEY_PATTERN = re.compile(r"^(0x)?[0-9a-fA-F]{64}$")


def _parse_poll_interval(value: Union[float, str]) -> float:
    try:
        interval = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Poll interval must be a number, got {value!r}") from e
    if not math.isfinite(interval):
        raise ConfigurationError(f"Poll interval must be a finite number, got {value!r}")
    if interval < 0:
        raise ConfigurationError(f"Poll interval must not be negative, got {interval}")
    return interval


def load_config(
    rpc_url: Optional[str] = None,
    private_key: Optional[str] = None,
    artifacts_dir: Optional[Union[Path, str]] = None,
    output_path: Optional[Union[Path, str]] = None,
    poll_interval: Optional[Union[float, str]] = None,
    contract_name: str = CONTRACT_NAME,
    network: str = NETWORK_LABEL,
) -> DeployerConfig:
    """
    Build deployer configuration.

    Explicit arguments win; otherwise values come from the environment,
    then from defaults.

    Args:
        rpc_url: RPC endpoint URL (defaults to $RPC_URL, then http://127.0.0.1:8545)
        private_key: Signer private key (defaults to $DEPLOYER_PRIVATE_KEY;
                     if unset, the node's first account signs)
        artifacts_dir: Hardhat artifacts directory (defaults to $ARTIFACTS_DIR, then ./artifacts)
        output_path: Where to save the record (defaults to $DEPLOYMENTS_PATH,
                     then ./deployments.json)
        poll_interval: Seconds between receipt polls (defaults to $POLL_INTERVAL, then 1.0)
        contract_name: Contract to deploy
        network: Network label written into the record

    Returns:
        DeployerConfig

    Raises:
        ConfigurationError: If the RPC URL is empty, the private key is
                            malformed, or the poll interval is invalid
    """
    # Fall back to environment variables
    if rpc_url is None:
        rpc_url = os.environ.get(ENV_RPC_URL, DEFAULT_RPC_URL)
    if private_key is None:
        private_key = os.environ.get(ENV_PRIVATE_KEY) or None
    if artifacts_dir is None:
        artifacts_dir = os.environ.get(ENV_ARTIFACTS_DIR)
    if output_path is None:
        output_path = os.environ.get(ENV_DEPLOYMENTS_PATH)
    if poll_interval is None:
        poll_interval = os.environ.get(ENV_POLL_INTERVAL, DEFAULT_POLL_INTERVAL)

    if not rpc_url:
        raise ConfigurationError(f"RPC URL required: set ${ENV_RPC_URL} or pass rpc_url")

    if private_key is not None and not _PRIVATE_KEY_PATTERN.match(private_key):
        # Never echo the key itself
        raise ConfigurationError("Private key must be 32 bytes of hex, optionally 0x-prefixed")

    return DeployerConfig(
        rpc_url=rpc_url,
        private_key=private_key,
        artifacts_dir=Path(artifacts_dir).absolute() if artifacts_dir else get_default_artifacts_dir(),
        output_path=Path(output_path).absolute() if output_path else get_default_record_path(),
        contract_name=contract_name,
        network=network,
        poll_interval=_parse_poll_interval(poll_interval),
    )
