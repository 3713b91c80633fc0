"""
guardianchain-deploy: deploy the GuardianChain contract and record the deployment
"""

from importlib.metadata import PackageNotFoundError, version

from .config import load_config
from .deployer import deploy, main, run_deployment
from .exceptions import (
    AmbiguousArtifactError,
    ArtifactNotFoundError,
    ConfigurationError,
    ConfirmationError,
    DefectiveArtifactError,
    DeploymentError,
    RPCError,
    SignerError,
)
from .factory import ContractFactory, DeployedContract, get_contract_factory
from .types import ContractArtifact, DeployerConfig, DeploymentRecord, DeploymentResult

try:
    __version__ = version("guardianchain-deploy")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "deploy",
    "run_deployment",
    "main",
    "load_config",
    "get_contract_factory",
    "ContractFactory",
    "DeployedContract",
    "ContractArtifact",
    "DeployerConfig",
    "DeploymentRecord",
    "DeploymentResult",
    "DeploymentError",
    "ArtifactNotFoundError",
    "AmbiguousArtifactError",
    "DefectiveArtifactError",
    "ConfigurationError",
    "SignerError",
    "RPCError",
    "ConfirmationError",
]
