"""Data types and dataclasses for guardianchain-deploy."""

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from .constants import CONTRACT_NAME, DEFAULT_POLL_INTERVAL, NETWORK_LABEL


@dataclass
class DeploymentRecord:
    """Summary of a single completed deployment, as written to deployments.json."""

    contract: str  # e.g., "GuardianChain"
    address: str  # Checksummed address
    network: str  # e.g., "hardhatMainnet"
    timestamp: str  # ISO-8601, e.g., "2025-01-01T12:00:00.000Z"

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass
class DeploymentResult:
    """Outcome of one deployment run: a record on success, an error on failure."""

    record: Optional[DeploymentRecord] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.record is not None

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1


@dataclass
class ContractArtifact:
    """Compiled contract loaded from a Hardhat artifact file."""

    # Required fields
    contract_name: str  # e.g., "GuardianChain"
    source_name: str  # e.g., "contracts/GuardianChain.sol"
    abi: List[Dict[str, Any]]  # Full contract ABI
    bytecode: str  # 0x-prefixed creation bytecode

    # Optional fields
    deployed_bytecode: Optional[str] = None
    link_references: Dict[str, Any] = field(default_factory=dict)

    @property
    def fully_qualified_name(self) -> str:
        return f"{self.source_name}:{self.contract_name}"


@dataclass
class DeployerConfig:
    """Explicit inputs for a deployment run."""

    rpc_url: str
    artifacts_dir: Path
    output_path: Path
    private_key: Optional[str] = field(default=None, repr=False)
    contract_name: str = CONTRACT_NAME
    network: str = NETWORK_LABEL
    poll_interval: float = DEFAULT_POLL_INTERVAL
