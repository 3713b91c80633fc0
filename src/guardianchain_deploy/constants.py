"""Configuration constants for guardianchain-deploy."""

# Contract deployed by this package and the label written into deployments.json
CONTRACT_NAME = "GuardianChain"
NETWORK_LABEL = "hardhatMainnet"

# Default file locations, relative to the working directory
DEFAULT_ARTIFACTS_DIRNAME = "artifacts"
DEFAULT_RECORD_FILENAME = "deployments.json"

# Hardhat node JSON-RPC endpoint
DEFAULT_RPC_URL = "http://127.0.0.1:8545"

# Seconds between eth_getTransactionReceipt polls
DEFAULT_POLL_INTERVAL = 1.0

# Seconds before a single JSON-RPC HTTP request is abandoned
RPC_REQUEST_TIMEOUT = 30

# Environment variables consulted by load_config()
ENV_RPC_URL = "RPC_URL"
ENV_PRIVATE_KEY = "DEPLOYER_PRIVATE_KEY"
ENV_ARTIFACTS_DIR = "ARTIFACTS_DIR"
ENV_DEPLOYMENTS_PATH = "DEPLOYMENTS_PATH"
ENV_POLL_INTERVAL = "POLL_INTERVAL"

# Suffix of Hardhat debug files that live next to each artifact
DEBUG_ARTIFACT_SUFFIX = ".dbg.json"

# Directory of compiler inputs/outputs under artifacts/, never contract artifacts
BUILD_INFO_DIRNAME = "build-info"
