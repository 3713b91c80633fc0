"""Deployment procedure and console entry point for guardianchain-deploy."""

import asyncio
import logging
import sys

from .config import load_config
from .exceptions import ConfigurationError
from .factory import get_contract_factory
from .records import build_deployment_record, save_deployment_record
from .types import DeployerConfig, DeploymentRecord, DeploymentResult

logger = logging.getLogger(__name__)


async def _deploy_and_record(config: DeployerConfig) -> DeploymentRecord:
    logger.info("Deploying %s contract...", config.contract_name)

    factory = get_contract_factory(config.contract_name, config)
    contract = await factory.deploy()
    await contract.wait_for_deployment()
    address = await contract.get_address()
    logger.info("%s deployed at: %s", config.contract_name, address)

    record = build_deployment_record(config.contract_name, address, config.network)
    save_deployment_record(record, config.output_path)
    logger.info("Deployment info saved in %s", config.output_path.name)

    return record


async def deploy(config: DeployerConfig) -> DeploymentResult:
    """
    Deploy the configured contract once and record it.

    Resolves the factory, submits the creation transaction, waits for
    confirmation, reads the address and overwrites the deployment record.
    Nothing is retried or rolled back. The record is written only after
    every earlier step succeeds.

    Args:
        config: Deployer configuration

    Returns:
        DeploymentResult holding the record, or the error that stopped the run
    """
    try:
        record = await _deploy_and_record(config)
    except Exception as e:
        logger.error("Deployment failed: %s", e)
        logger.debug("Deployment failure details", exc_info=True)
        return DeploymentResult(error=e)

    return DeploymentResult(record=record)


def run_deployment(config: DeployerConfig) -> DeploymentResult:
    """Run deploy() on a fresh event loop."""
    return asyncio.run(deploy(config))


def configure_logging(level: int = logging.INFO) -> None:
    """
    Route package log records to the console.

    Progress lines go to stdout; errors go to stderr. Calling this again
    replaces the handlers installed by the previous call.
    """
    package_logger = logging.getLogger(__package__)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    formatter = logging.Formatter("%(message)s")

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(level)
    stdout_handler.addFilter(lambda record: record.levelno < logging.ERROR)
    stdout_handler.setFormatter(formatter)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.ERROR)
    stderr_handler.setFormatter(formatter)

    package_logger.addHandler(stdout_handler)
    package_logger.addHandler(stderr_handler)
    package_logger.setLevel(level)


def main() -> int:
    """
    Console entry point.

    Configuration comes from the environment (see load_config()).

    Returns:
        Process exit status: 0 on success, 1 on failure
    """
    configure_logging()

    try:
        config = load_config()
    except ConfigurationError as e:
        logger.error("Deployment failed: %s", e)
        return 1

    return run_deployment(config).exit_code


if __name__ == "__main__":
    raise SystemExit(main())
