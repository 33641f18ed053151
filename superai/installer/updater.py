"""Updater - refreshes the bundle checkout and reinstalls it."""

from pathlib import Path

from superai.core.config.settings import get_settings
from superai.core.exceptions.errors import GitError, NotInstalledError
from superai.core.logger.logger import get_logger
from superai.installer.git_operations import GitOperations
from superai.installer.installer import Installer
from superai.installer.state import StateStore
from superai.models.install import UpdateReport

logger = get_logger(__name__)


class Updater:
    """Checks for a prior install, pulls the bundle, and reinstalls."""

    def __init__(
        self,
        project_root: Path | None = None,
        bundle_root: Path | None = None,
        git_operations: GitOperations | None = None,
        state_store: StateStore | None = None,
        installer: Installer | None = None,
    ) -> None:
        """Initialize the updater.

        Args:
            project_root: Target project. Defaults to the working directory.
            bundle_root: Bundle source. Defaults to the configured bundle root.
            git_operations: Git operations instance.
            state_store: Install-state store for the project.
            installer: Installer to delegate to.
        """
        settings = get_settings()

        self.project_root = Path(project_root) if project_root else Path.cwd()
        self.bundle_root = (
            Path(bundle_root).resolve() if bundle_root else settings.installer.resolve_bundle_root()
        )
        self.git_operations = git_operations or GitOperations()
        self.state_store = state_store or StateStore(self.project_root)
        self.installer = installer or Installer(
            project_root=self.project_root,
            bundle_root=self.bundle_root,
            git_operations=self.git_operations,
            state_store=self.state_store,
        )

    def run(self) -> UpdateReport:
        """Update the installation.

        Returns:
            Report with the pull outcome and the reinstall report.

        Raises:
            NotInstalledError: If no prior installation is recorded.
            SuperAIError: Whatever the delegated installer raises.
        """
        if not self.state_store.exists():
            raise NotInstalledError(
                "SuperAI is not installed in this project",
                state_path=str(self.state_store.path),
            )

        report = UpdateReport()

        if self.git_operations.is_git_repo(self.bundle_root):
            logger.info("Pulling latest changes from SuperAI repository...")
            try:
                report.pulled_branch = self.git_operations.pull(self.bundle_root)
                report.pulled = True
                with self.git_operations.open_repo(self.bundle_root) as repo:
                    report.bundle_ref = self.git_operations.get_current_ref(repo)
            except GitError as e:
                report.pull_error = str(e)
                logger.warning("Could not pull from git. Continuing with local files...")
        else:
            logger.debug(f"Bundle at {self.bundle_root} is not a git checkout, skipping pull")

        logger.info("Reinstalling SuperAI configuration...")
        report.install = self.installer.run(auto_confirm=True)
        return report
