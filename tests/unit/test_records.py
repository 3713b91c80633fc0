"""Unit tests for deployment record persistence."""

import json
from datetime import datetime, timedelta, timezone
from pathlib import Path

from guardianchain_deploy.records import (
    build_deployment_record,
    format_timestamp,
    save_deployment_record,
)
from guardianchain_deploy.types import DeploymentRecord


class TestFormatTimestamp:
    """Test the format_timestamp function."""

    def test_millisecond_precision_with_z_suffix(self):
        """Test the ISO-8601 shape of formatted instants."""
        moment = datetime(2025, 1, 2, 3, 4, 5, 678901, tzinfo=timezone.utc)
        assert format_timestamp(moment) == "2025-01-02T03:04:05.678Z"

    def test_converts_to_utc(self):
        """Test that non-UTC instants are normalized to UTC."""
        plus_two = timezone(timedelta(hours=2))
        moment = datetime(2025, 1, 2, 5, 0, 0, tzinfo=plus_two)
        assert format_timestamp(moment) == "2025-01-02T03:00:00.000Z"


class TestBuildDeploymentRecord:
    """Test the build_deployment_record function."""

    def test_uses_given_instant(self):
        """Test that all fields are filled from arguments."""
        moment = datetime(2025, 6, 1, 12, 0, 0, tzinfo=timezone.utc)
        record = build_deployment_record("GuardianChain", "0xABC", "hardhatMainnet", moment)

        assert record == DeploymentRecord(
            contract="GuardianChain",
            address="0xABC",
            network="hardhatMainnet",
            timestamp="2025-06-01T12:00:00.000Z",
        )

    def test_defaults_to_now(self):
        """Test that the timestamp defaults to the current instant."""
        before = datetime.now(timezone.utc).replace(microsecond=0)
        record = build_deployment_record("GuardianChain", "0xABC", "hardhatMainnet")
        after = datetime.now(timezone.utc)

        stamped = datetime.fromisoformat(record.timestamp.replace("Z", "+00:00"))
        assert before <= stamped <= after


class TestSaveDeploymentRecord:
    """Test the save_deployment_record function."""

    def _record(self, address: str) -> DeploymentRecord:
        return DeploymentRecord(
            contract="GuardianChain",
            address=address,
            network="hardhatMainnet",
            timestamp="2025-06-01T12:00:00.000Z",
        )

    def test_writes_indented_json(self, tmp_path: Path):
        """Test that the record is written as 2-space indented JSON."""
        output = tmp_path / "deployments.json"
        save_deployment_record(self._record("0xABC"), output)

        text = output.read_text()
        assert text.startswith('{\n  "contract": "GuardianChain"')
        assert json.loads(text) == {
            "contract": "GuardianChain",
            "address": "0xABC",
            "network": "hardhatMainnet",
            "timestamp": "2025-06-01T12:00:00.000Z",
        }

    def test_overwrites_existing_file(self, tmp_path: Path):
        """Test that a second save replaces the first record."""
        output = tmp_path / "deployments.json"
        save_deployment_record(self._record("0x111"), output)
        save_deployment_record(self._record("0x222"), output)

        with open(output) as f:
            loaded = json.load(f)
        assert loaded["address"] == "0x222"

    def test_creates_parent_directories(self, tmp_path: Path):
        """Test that parent directories are created if they don't exist."""
        nested = tmp_path / "level1" / "level2" / "deployments.json"
        save_deployment_record(self._record("0xABC"), nested)
        assert nested.exists()
