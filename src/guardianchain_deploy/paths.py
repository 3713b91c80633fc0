"""Path management utilities for guardianchain-deploy."""

from pathlib import Path
from typing import List, Optional, Union

from .constants import (
    BUILD_INFO_DIRNAME,
    DEBUG_ARTIFACT_SUFFIX,
    DEFAULT_ARTIFACTS_DIRNAME,
    DEFAULT_RECORD_FILENAME,
)
from .exceptions import AmbiguousArtifactError, ArtifactNotFoundError


def get_default_artifacts_dir() -> Path:
    """
    Get default Hardhat artifacts directory.

    Returns:
        Path to ./artifacts
    """
    return Path.cwd() / DEFAULT_ARTIFACTS_DIRNAME


def get_default_record_path() -> Path:
    """
    Get default deployment record path.

    Returns:
        Path to ./deployments.json
    """
    return Path.cwd() / DEFAULT_RECORD_FILENAME


def _find_artifacts_by_name(artifacts_dir: Path, contract_name: str) -> List[Path]:
    return sorted(
        p
        for p in artifacts_dir.rglob(f"{contract_name}.json")
        if not p.name.endswith(DEBUG_ARTIFACT_SUFFIX)
        and p.relative_to(artifacts_dir).parts[0] != BUILD_INFO_DIRNAME
    )


def get_artifact_path(
    contract_name: str, artifacts_dir: Optional[Union[Path, str]] = None
) -> Path:
    """
    Resolve the artifact file for a contract.

    Hardhat writes one artifact per contract to
    artifacts/<source path>/<ContractName>.json. Bare names are searched for
    across the whole artifacts tree, except build-info/. Contract names may be given
    bare ("GuardianChain") or fully qualified
    ("contracts/GuardianChain.sol:GuardianChain").

    Args:
        contract_name: Bare or fully-qualified contract name
        artifacts_dir: Hardhat artifacts directory (defaults to ./artifacts)

    Returns:
        Path to the contract's artifact JSON file

    Raises:
        ArtifactNotFoundError: If no artifact matches the name
        AmbiguousArtifactError: If a bare name matches several artifacts
    """
    if artifacts_dir is None:
        artifacts_dir = get_default_artifacts_dir()
    else:
        artifacts_dir = Path(artifacts_dir).absolute()

    # Fully-qualified name maps straight to a file
    if ":" in contract_name:
        source_name, _, name = contract_name.rpartition(":")
        artifact_path = artifacts_dir / source_name / f"{name}.json"
        if not artifact_path.is_file():
            raise ArtifactNotFoundError(
                f"Artifact for contract '{contract_name}' not found at {artifact_path}. "
                "Compile the contracts first."
            )
        return artifact_path

    # Sources may live outside contracts/ (custom source paths, npm imports)
    matches = _find_artifacts_by_name(artifacts_dir, contract_name) if artifacts_dir.is_dir() else []

    if not matches:
        raise ArtifactNotFoundError(
            f"Artifact for contract '{contract_name}' not found in {artifacts_dir}. "
            "Compile the contracts first."
        )

    if len(matches) > 1:
        candidates = ", ".join(
            f"{p.parent.relative_to(artifacts_dir).as_posix()}:{contract_name}" for p in matches
        )
        raise AmbiguousArtifactError(
            f"Multiple artifacts for contract '{contract_name}'. "
            f"Use a fully qualified name instead: {candidates}"
        )

    return matches[0]
