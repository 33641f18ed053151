"""Custom exception definitions for SuperAI."""

from typing import Any


class SuperAIError(Exception):
    """Base exception for all SuperAI errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Error message.
            details: Additional error details.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class GitError(SuperAIError):
    """Exception raised for Git operation errors."""

    def __init__(
        self,
        message: str,
        repo_path: str | None = None,
        remote: str | None = None,
        branch: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize Git error.

        Args:
            message: Error message.
            repo_path: Repository path that caused the error.
            remote: Remote name involved.
            branch: Branch name involved.
            details: Additional error details.
        """
        details = details or {}
        if repo_path:
            details["repo_path"] = repo_path
        if remote:
            details["remote"] = remote
        if branch:
            details["branch"] = branch
        super().__init__(message, details)


class StateError(SuperAIError):
    """Exception raised when the install-state record cannot be read."""

    def __init__(
        self,
        message: str,
        state_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize state error.

        Args:
            message: Error message.
            state_path: Path to the install-state file.
            details: Additional error details.
        """
        details = details or {}
        if state_path:
            details["state_path"] = state_path
        super().__init__(message, details)


class NotInstalledError(StateError):
    """Exception raised when no prior installation is recorded."""


class InstallError(SuperAIError):
    """Exception raised for fatal installer preconditions."""

    def __init__(
        self,
        message: str,
        project_root: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize install error.

        Args:
            message: Error message.
            project_root: Target project directory.
            details: Additional error details.
        """
        details = details or {}
        if project_root:
            details["project_root"] = project_root
        super().__init__(message, details)


class ConfigurationError(SuperAIError):
    """Exception raised for configuration errors."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error.

        Args:
            message: Error message.
            config_key: Configuration key that caused the error.
            details: Additional error details.
        """
        details = details or {}
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, details)
