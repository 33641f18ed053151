"""Git operations wrapper for the bundle checkout and the target project."""

from pathlib import Path
from types import ModuleType
from typing import TYPE_CHECKING

from superai.core.config.settings import get_settings
from superai.core.exceptions.errors import GitError as SuperAIGitError
from superai.core.logger.logger import get_logger

if TYPE_CHECKING:
    from git import Repo

logger = get_logger(__name__)


def _load_git() -> ModuleType:
    """Import GitPython on first use.

    GitPython fails at import time when no ``git`` executable is installed,
    and installing or detecting does not need one.

    Raises:
        GitError: If GitPython cannot be initialized.
    """
    try:
        import git
    except ImportError as e:
        raise SuperAIGitError(
            "Git is not available",
            details={"error": str(e)},
        ) from e
    return git


class GitOperations:
    """Handles repository checks and pulls."""

    def __init__(
        self,
        remote: str | None = None,
        branches: list[str] | None = None,
    ) -> None:
        """Initialize Git operations.

        Args:
            remote: Remote to pull from.
            branches: Branches tried in order when pulling.
        """
        settings = get_settings()

        self.remote = remote or settings.git.remote
        self.branches = branches or list(settings.git.branches)

    def is_git_repo(self, path: Path) -> bool:
        """Check if a path is the root of a Git repository.

        Only the presence of a ``.git`` directory is checked; no git
        executable is needed.

        Args:
            path: Path to check.

        Returns:
            True if path has a ``.git`` directory.
        """
        return (Path(path) / ".git").is_dir()

    def open_repo(self, path: Path) -> "Repo":
        """Open an existing Git repository.

        Args:
            path: Path to the repository.

        Returns:
            Repo object. Close it (or use it as a context manager) when done.

        Raises:
            GitError: If Git is unavailable or the repository cannot be opened.
        """
        git = _load_git()
        try:
            return git.Repo(path)
        except (git.InvalidGitRepositoryError, git.NoSuchPathError) as e:
            raise SuperAIGitError(
                f"Not a valid Git repository: {path}",
                repo_path=str(path),
                details={"error": str(e)},
            ) from e

    def pull(self, path: Path) -> str:
        """Pull the first configured branch that succeeds.

        Each branch is tried once, in order; there are no retries.

        Args:
            path: Path to the repository.

        Returns:
            Name of the branch that was pulled.

        Raises:
            GitError: If the repository cannot be opened or every pull fails.
        """
        git = _load_git()
        errors: dict[str, str] = {}

        with self.open_repo(path) as repo:
            for branch in self.branches:
                logger.debug(f"Pulling {self.remote}/{branch} into {path}")
                try:
                    repo.git.pull(self.remote, branch)
                except git.GitCommandError as e:
                    errors[branch] = str(e).strip()
                    logger.debug(f"Pull of {self.remote}/{branch} failed: {errors[branch]}")
                    continue

                logger.info(f"Pulled latest changes from {self.remote}/{branch}")
                return branch

        raise SuperAIGitError(
            f"Could not pull from {self.remote}",
            repo_path=str(path),
            remote=self.remote,
            details={"errors": errors},
        )

    def get_current_ref(self, repo: "Repo") -> str:
        """Get the current Git reference (branch name or short commit).

        Args:
            repo: Repo object.

        Returns:
            Current reference name.
        """
        if repo.head.is_detached:
            return repo.head.commit.hexsha[:8]
        return repo.active_branch.name
