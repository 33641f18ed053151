"""Exception definitions module."""

from superai.core.exceptions.errors import (
    ConfigurationError,
    GitError,
    InstallError,
    NotInstalledError,
    StateError,
    SuperAIError,
)

__all__ = [
    "SuperAIError",
    "ConfigurationError",
    "GitError",
    "InstallError",
    "NotInstalledError",
    "StateError",
]
