"""Contract factories and deployed-contract handles for guardianchain-deploy."""

import asyncio
import logging
from typing import Any, Dict, Optional

from eth_account import Account
from eth_utils import encode_hex, to_checksum_address

from .artifacts import load_contract_artifact
from .constants import DEFAULT_POLL_INTERVAL
from .exceptions import ConfirmationError, SignerError
from .rpc import rpc_call, to_quantity
from .types import ContractArtifact, DeployerConfig

logger = logging.getLogger(__name__)


class DeployedContract:
    """Handle for a contract whose creation transaction has been sent."""

    def __init__(
        self,
        artifact: ContractArtifact,
        transaction_hash: str,
        rpc_url: str,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
    ):
        self.artifact = artifact
        self.transaction_hash = transaction_hash
        self.rpc_url = rpc_url
        self.poll_interval = poll_interval
        self.receipt: Optional[Dict[str, Any]] = None
        self._address: Optional[str] = None

    async def _call(self, method: str, *params: Any) -> Any:
        return await asyncio.to_thread(rpc_call, self.rpc_url, method, list(params))

    async def wait_for_deployment(self) -> "DeployedContract":
        """
        Suspend until the creation transaction is mined.

        Polls eth_getTransactionReceipt until the node returns a receipt. There
        is no timeout: an unresponsive node keeps this coroutine suspended.

        Returns:
            self, with receipt and address populated

        Raises:
            ConfirmationError: If the transaction reverted, created no contract,
                               or left no code at the new address
            RPCError: If a JSON-RPC call fails
        """
        receipt = await self._call("eth_getTransactionReceipt", self.transaction_hash)
        while receipt is None:
            await asyncio.sleep(self.poll_interval)
            receipt = await self._call("eth_getTransactionReceipt", self.transaction_hash)

        # Missing status means a pre-Byzantium receipt, which carries no revert flag
        status = receipt.get("status")
        if status is not None and to_quantity(status) == 0:
            raise ConfirmationError(
                f"Deployment transaction {self.transaction_hash} reverted "
                f"in block {receipt.get('blockNumber')}"
            )

        contract_address = receipt.get("contractAddress")
        if not contract_address:
            raise ConfirmationError(
                f"Receipt for transaction {self.transaction_hash} has no contract address"
            )
        address = to_checksum_address(contract_address)

        code = await self._call("eth_getCode", address, "latest")
        if not code or code == "0x":
            raise ConfirmationError(f"No contract code found at {address} after deployment")

        self.receipt = receipt
        self._address = address
        logger.debug(
            "Transaction %s confirmed in block %s", self.transaction_hash, receipt.get("blockNumber")
        )
        return self

    async def get_address(self) -> str:
        """
        Get the checksummed address of the confirmed contract.

        Raises:
            ConfirmationError: If called before wait_for_deployment() succeeded
        """
        if self._address is None:
            raise ConfirmationError(
                f"Contract from transaction {self.transaction_hash} is not confirmed yet"
            )
        return self._address


class ContractFactory:
    """Deploys new instances of one compiled contract through a JSON-RPC node."""

    def __init__(
        self,
        artifact: ContractArtifact,
        rpc_url: str,
        private_key: Optional[str] = None,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
    ):
        """
        Initialize the factory.

        Args:
            artifact: Deployable contract artifact
            rpc_url: RPC endpoint URL
            private_key: Hex private key used to sign locally. If None, the
                         node's first managed account sends the transaction.
            poll_interval: Seconds between receipt polls
        """
        self.artifact = artifact
        self.rpc_url = rpc_url
        self._private_key = private_key
        self.poll_interval = poll_interval

    def _send_from_node_account(self) -> str:
        accounts = rpc_call(self.rpc_url, "eth_accounts")
        if not accounts:
            raise SignerError(
                "Node manages no accounts: configure a private key to sign the deployment"
            )
        sender = accounts[0]
        logger.debug("Sending deployment from node account %s", sender)
        return rpc_call(
            self.rpc_url,
            "eth_sendTransaction",
            [{"from": sender, "data": self.artifact.bytecode}],
        )

    def _send_signed(self) -> str:
        account = Account.from_key(self._private_key)
        sender = account.address

        chain_id = to_quantity(rpc_call(self.rpc_url, "eth_chainId"))
        nonce = to_quantity(rpc_call(self.rpc_url, "eth_getTransactionCount", [sender, "pending"]))
        gas = to_quantity(
            rpc_call(self.rpc_url, "eth_estimateGas", [{"from": sender, "data": self.artifact.bytecode}])
        )
        gas_price = to_quantity(rpc_call(self.rpc_url, "eth_gasPrice"))

        # Contract creation: no "to" field
        transaction = {
            "nonce": nonce,
            "gas": gas,
            "gasPrice": gas_price,
            "value": 0,
            "data": self.artifact.bytecode,
            "chainId": chain_id,
        }
        signed = account.sign_transaction(transaction)
        logger.debug("Sending signed deployment from %s (chain %s, nonce %s)", sender, chain_id, nonce)
        return rpc_call(self.rpc_url, "eth_sendRawTransaction", [encode_hex(signed.raw_transaction)])

    async def deploy(self) -> DeployedContract:
        """
        Submit the contract-creation transaction (no constructor arguments).

        Returns:
            DeployedContract handle for the pending deployment

        Raises:
            SignerError: If no signer is available
            RPCError: If a JSON-RPC call fails
        """
        if self._private_key is None:
            tx_hash = await asyncio.to_thread(self._send_from_node_account)
        else:
            tx_hash = await asyncio.to_thread(self._send_signed)

        logger.debug("Deployment transaction sent: %s", tx_hash)
        return DeployedContract(self.artifact, tx_hash, self.rpc_url, self.poll_interval)


def get_contract_factory(contract_name: str, config: DeployerConfig) -> ContractFactory:
    """
    Resolve a deployable factory for a compiled contract.

    Args:
        contract_name: Bare or fully-qualified contract name
        config: Deployer configuration (artifacts dir, RPC URL, signer)

    Returns:
        ContractFactory bound to the configured node and signer

    Raises:
        ArtifactNotFoundError: If the contract has not been compiled
        AmbiguousArtifactError: If a bare name matches several artifacts
        DefectiveArtifactError: If the artifact is not deployable
    """
    artifact = load_contract_artifact(contract_name, config.artifacts_dir)
    return ContractFactory(
        artifact,
        config.rpc_url,
        private_key=config.private_key,
        poll_interval=config.poll_interval,
    )
