"""Installer - copies the SuperAI bundle into a project and records the install."""

from collections.abc import Callable
from pathlib import Path

from superai.core.config.settings import get_settings
from superai.core.exceptions.errors import InstallError
from superai.core.logger.logger import get_logger
from superai.installer.bundle import DEFAULT_COPY_STEPS, BundleCopier
from superai.installer.git_operations import GitOperations
from superai.installer.state import StateStore
from superai.installer.tech_stack_detector import TechStack, TechStackDetector
from superai.models.install import CopyStep, InstallReport, InstallState

logger = get_logger(__name__)

# (question, default answer) -> answer
ConfirmCallback = Callable[[str, bool], bool]
StackCallback = Callable[[TechStack], None]


def answer_default(question: str, default: bool) -> bool:
    """Non-interactive confirmation: always take the default answer."""
    return default


class Installer:
    """Runs the installation steps against one project directory."""

    def __init__(
        self,
        project_root: Path | None = None,
        bundle_root: Path | None = None,
        detector: TechStackDetector | None = None,
        git_operations: GitOperations | None = None,
        state_store: StateStore | None = None,
        steps: list[CopyStep] | None = None,
        confirm: ConfirmCallback | None = None,
        on_stack_detected: StackCallback | None = None,
    ) -> None:
        """Initialize the installer.

        Args:
            project_root: Target project. Defaults to the working directory.
            bundle_root: Bundle source. Defaults to the configured bundle root.
            detector: Tech stack detector instance.
            git_operations: Git operations instance.
            state_store: Install-state store for the project.
            steps: Copy steps. Defaults to the standard bundle layout.
            confirm: Asks the user a yes/no question.
            on_stack_detected: Called with the detected stack before confirmation.
        """
        settings = get_settings()

        self.project_root = Path(project_root) if project_root else Path.cwd()
        self.bundle_root = (
            Path(bundle_root).resolve() if bundle_root else settings.installer.resolve_bundle_root()
        )
        self.detector = detector or TechStackDetector()
        self.git_operations = git_operations or GitOperations()
        self.state_store = state_store or StateStore(self.project_root)
        self.steps = steps if steps is not None else list(DEFAULT_COPY_STEPS)
        self.confirm = confirm or answer_default
        self.on_stack_detected = on_stack_detected

    def describe_plan(self) -> list[str]:
        """Describe where each bundle entry will be installed."""
        return [
            f"{step.description} to: {step.destination.as_posix()}/"
            for step in self.steps
        ]

    def run(self, auto_confirm: bool = False) -> InstallReport:
        """Install the bundle into the project.

        Args:
            auto_confirm: Skip every confirmation prompt.

        Returns:
            Report of the run; ``cancelled`` is set when the user declined.

        Raises:
            InstallError: If the project directory is unusable or cannot be written.
        """
        self._check_project_root()

        report = InstallReport(project_root=self.project_root, bundle_root=self.bundle_root)

        report.is_git_repo = self.git_operations.is_git_repo(self.project_root)
        if not report.is_git_repo:
            logger.warning("Not in a git repository. Some features may not work properly.")
            if not auto_confirm and not self.confirm("Continue anyway?", False):
                return self._cancel(report)

        logger.info("Detecting technology stack...")
        stack = self.detector.detect(self.project_root)
        report.tech_stack = stack.labels
        if self.on_stack_detected:
            self.on_stack_detected(stack)

        if not auto_confirm:
            question = "\n".join(
                ["This will install the following:"]
                + [f"  - {line}" for line in self.describe_plan()]
                + ["Continue?"]
            )
            if not self.confirm(question, True):
                return self._cancel(report)

        copier = BundleCopier(self.bundle_root, self.project_root, steps=self.steps)

        logger.info("Creating directories...")
        try:
            report.created_dirs = copier.ensure_directories()
        except OSError as e:
            raise InstallError(
                f"Could not create directories in {self.project_root}: {e}",
                project_root=str(self.project_root),
            ) from e

        report.copy_results = copier.copy_all()

        logger.info("Saving installation state...")
        state = InstallState(tech_stack=stack.labels, repo_root=str(self.bundle_root))
        try:
            report.state_path = self.state_store.save(state)
        except OSError as e:
            raise InstallError(
                f"Could not save installation state: {e}",
                project_root=str(self.project_root),
            ) from e
        report.state = state
        logger.info("Installation state saved.")

        if report.warnings:
            logger.warning(f"Installation finished with {len(report.warnings)} warning(s)")

        return report

    def _check_project_root(self) -> None:
        """Fail before any write when the project directory is unusable."""
        if not self.project_root.exists():
            raise InstallError(
                f"Project directory does not exist: {self.project_root}",
                project_root=str(self.project_root),
            )
        if not self.project_root.is_dir():
            raise InstallError(
                f"Project path is not a directory: {self.project_root}",
                project_root=str(self.project_root),
            )

    @staticmethod
    def _cancel(report: InstallReport) -> InstallReport:
        logger.info("Installation cancelled.")
        report.cancelled = True
        return report
