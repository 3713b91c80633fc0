"""Shared pytest fixtures for guardianchain-deploy tests."""

import json
import shutil
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest
import responses

from guardianchain_deploy.types import DeployerConfig

RPC_URL = "http://localhost:8545"

# Well-known Hardhat development account #0
HARDHAT_PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
HARDHAT_ACCOUNT = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"

DEPLOYED_ADDRESS = "0xabc1230000000000000000000000000000000001"
TX_HASH = "0x" + "ab" * 32


class FakeNode:
    """Minimal JSON-RPC node served through responses callbacks."""

    def __init__(self) -> None:
        self.accounts: List[str] = [HARDHAT_ACCOUNT]
        self.chain_id = 31337
        self.contract_address: Optional[str] = DEPLOYED_ADDRESS
        self.receipt_status = "0x1"
        self.pending_polls = 0
        self.code = "0x60806040525f5ffdfea2646970667358221220"
        self.errors: Dict[str, Dict[str, Any]] = {}
        self.calls: List[Dict[str, Any]] = []
        self.rpc_url = RPC_URL
        self.tx_hash = TX_HASH

    def methods(self) -> List[str]:
        return [call["method"] for call in self.calls]

    def params_for(self, method: str) -> List[Any]:
        return next(call["params"] for call in self.calls if call["method"] == method)

    def _receipt(self) -> Optional[Dict[str, Any]]:
        if self.pending_polls > 0:
            self.pending_polls -= 1
            return None
        return {
            "transactionHash": TX_HASH,
            "blockNumber": "0x1",
            "status": self.receipt_status,
            "contractAddress": self.contract_address,
        }

    def _result(self, method: str) -> Any:
        if method == "eth_chainId":
            return hex(self.chain_id)
        if method == "eth_accounts":
            return self.accounts
        if method == "eth_getTransactionCount":
            return "0x0"
        if method == "eth_estimateGas":
            return "0x5208"
        if method == "eth_gasPrice":
            return "0x3b9aca00"
        if method in ("eth_sendTransaction", "eth_sendRawTransaction"):
            return TX_HASH
        if method == "eth_getTransactionReceipt":
            return self._receipt()
        if method == "eth_getCode":
            return self.code
        raise AssertionError(f"Unexpected RPC method {method}")

    def handle(self, request):
        payload = json.loads(request.body)
        self.calls.append(payload)
        method = payload["method"]

        body: Dict[str, Any] = {"jsonrpc": "2.0", "id": payload["id"]}
        if method in self.errors:
            body["error"] = self.errors[method]
        else:
            body["result"] = self._result(method)
        return (200, {}, json.dumps(body))


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def artifacts_dir(tmp_path: Path, fixtures_dir: Path) -> Path:
    """Copy the sample Hardhat artifacts into a temporary project directory."""
    target = tmp_path / "artifacts"
    shutil.copytree(fixtures_dir / "artifacts", target)
    return target


@pytest.fixture
def guardian_artifact_path(artifacts_dir: Path) -> Path:
    """Return path to the GuardianChain artifact inside the temporary project."""
    return artifacts_dir / "contracts" / "GuardianChain.sol" / "GuardianChain.json"


@pytest.fixture
def output_path(tmp_path: Path) -> Path:
    """Return the deployment record path inside the temporary project."""
    return tmp_path / "deployments.json"


@pytest.fixture
def deployer_config(artifacts_dir: Path, output_path: Path) -> DeployerConfig:
    """Configuration that deploys through the node-managed account."""
    return DeployerConfig(
        rpc_url=RPC_URL,
        artifacts_dir=artifacts_dir,
        output_path=output_path,
        poll_interval=0,
    )


@pytest.fixture
def fake_node():
    """Serve a FakeNode at RPC_URL for the duration of a test."""
    node = FakeNode()
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        rsps.add_callback(
            responses.POST,
            RPC_URL,
            callback=node.handle,
            content_type="application/json",
        )
        yield node


def _write_artifact(path: Path, **overrides: Any) -> Path:
    """Write a Hardhat artifact file, overriding fields of a minimal deployable one."""
    data: Dict[str, Any] = {
        "_format": "hh-sol-artifact-1",
        "contractName": path.stem,
        "sourceName": f"contracts/{path.parent.name}",
        "abi": [],
        "bytecode": "0x6080604052",
        "deployedBytecode": "0x6080604052",
        "linkReferences": {},
        "deployedLinkReferences": {},
    }
    data.update(overrides)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(data, f, indent=2)
    return path


@pytest.fixture
def write_artifact():
    """Return a helper that writes Hardhat artifact files."""
    return _write_artifact


@pytest.fixture
def hardhat_private_key() -> str:
    """Return the private key of Hardhat development account #0."""
    return HARDHAT_PRIVATE_KEY


@pytest.fixture
def hardhat_account() -> str:
    """Return the address of Hardhat development account #0."""
    return HARDHAT_ACCOUNT
