"""Deployment record persistence for guardianchain-deploy."""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from .types import DeploymentRecord


def format_timestamp(moment: datetime) -> str:
    """
    Format an instant as ISO-8601 UTC with millisecond precision.

    Args:
        moment: Timezone-aware datetime

    Returns:
        String such as "2025-01-01T12:00:00.000Z"
    """
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_deployment_record(
    contract: str, address: str, network: str, moment: Optional[datetime] = None
) -> DeploymentRecord:
    """
    Build a deployment record, stamping it with the current instant by default.

    Args:
        contract: Contract name
        address: Deployed contract address
        network: Network label
        moment: Instant to record (defaults to now)

    Returns:
        DeploymentRecord
    """
    if moment is None:
        moment = datetime.now(timezone.utc)
    return DeploymentRecord(
        contract=contract,
        address=address,
        network=network,
        timestamp=format_timestamp(moment),
    )


def save_deployment_record(record: DeploymentRecord, output_path: Path) -> None:
    """
    Write a deployment record to disk as indented JSON.

    Any existing file at output_path is overwritten.

    Args:
        record: Record to write
        output_path: Destination file (e.g., ./deployments.json)

    Creates parent directories if they don't exist.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(record.to_dict(), f, indent=2)
