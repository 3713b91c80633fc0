"""Hardhat artifact parsing for guardianchain-deploy."""

import json
from pathlib import Path
from typing import Optional, Union

from .exceptions import DefectiveArtifactError
from .paths import get_artifact_path
from .types import ContractArtifact


def parse_hardhat_artifact(file_path: Path) -> ContractArtifact:
    """
    Parse a Hardhat artifact JSON file.

    Args:
        file_path: Path to artifacts/<source>/<ContractName>.json

    Returns:
        ContractArtifact with abi and creation bytecode

    Raises:
        DefectiveArtifactError: If the file is not valid JSON or lacks abi/bytecode
    """
    try:
        with open(file_path) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise DefectiveArtifactError(f"Invalid JSON in artifact file {file_path}: {e}") from e

    for required_field in ["abi", "bytecode"]:
        if required_field not in data:
            raise DefectiveArtifactError(
                f"Missing '{required_field}' in artifact file: {file_path}"
            )

    return ContractArtifact(
        contract_name=data.get("contractName", file_path.stem),
        source_name=data.get("sourceName", file_path.parent.name),
        abi=data["abi"],
        bytecode=data["bytecode"],
        deployed_bytecode=data.get("deployedBytecode"),
        link_references=data.get("linkReferences") or {},
    )


def validate_deployable(artifact: ContractArtifact) -> None:
    """
    Check that an artifact can be deployed as-is.

    Args:
        artifact: Parsed artifact

    Raises:
        DefectiveArtifactError: If the contract is abstract, an interface,
                                or needs library linking
    """
    if artifact.bytecode in ("", "0x"):
        raise DefectiveArtifactError(
            f"Contract '{artifact.fully_qualified_name}' has no bytecode. "
            "Abstract contracts and interfaces cannot be deployed."
        )

    if artifact.link_references:
        libraries = sorted(
            f"{source}:{library}"
            for source, libs in artifact.link_references.items()
            for library in libs
        )
        raise DefectiveArtifactError(
            f"Contract '{artifact.fully_qualified_name}' must be linked against "
            f"libraries before deployment: {', '.join(libraries)}"
        )


def load_contract_artifact(
    contract_name: str, artifacts_dir: Optional[Union[Path, str]] = None
) -> ContractArtifact:
    """
    Locate, parse and validate the artifact for a contract.

    Args:
        contract_name: Bare or fully-qualified contract name
        artifacts_dir: Hardhat artifacts directory (defaults to ./artifacts)

    Returns:
        Deployable ContractArtifact

    Raises:
        ArtifactNotFoundError: If no artifact matches the name
        AmbiguousArtifactError: If a bare name matches several artifacts
        DefectiveArtifactError: If the artifact is not deployable
    """
    artifact = parse_hardhat_artifact(get_artifact_path(contract_name, artifacts_dir))
    validate_deployable(artifact)
    return artifact
