"""Custom exception classes for guardianchain-deploy."""


class DeploymentError(Exception):
    """Base exception for deployment-related errors."""

    pass


class ArtifactNotFoundError(DeploymentError, FileNotFoundError):
    """Raised when no compiled artifact exists for the requested contract."""

    pass


class AmbiguousArtifactError(DeploymentError, ValueError):
    """Raised when a bare contract name matches more than one artifact."""

    pass


class DefectiveArtifactError(DeploymentError, ValueError):
    """Raised when an artifact cannot produce a deployable factory."""

    pass


class ConfigurationError(DeploymentError, ValueError):
    """Raised when the deployer configuration is invalid."""

    pass


class SignerError(DeploymentError, ValueError):
    """Raised when no account is available to sign the deployment."""

    pass


class RPCError(DeploymentError, RuntimeError):
    """Raised when a JSON-RPC request fails or returns an error object."""

    pass


class ConfirmationError(DeploymentError, RuntimeError):
    """Raised when a deployment transaction does not produce a contract."""

    pass
