"""Bundle copier - copies agents, skills, commands and workflows into a project."""

import shutil
from pathlib import Path

from superai.core.logger.logger import get_logger
from superai.models.install import CopyResult, CopyStatus, CopyStep

logger = get_logger(__name__)

# Destination directories created in every project, relative to its root.
DESTINATION_DIRS: list[Path] = [
    Path(".opencode/agent"),
    Path(".opencode/skill"),
    Path(".opencode/command"),
    Path(".github/workflows"),
]

DEFAULT_COPY_STEPS: list[CopyStep] = [
    CopyStep(
        source=Path(".opencode/opencode.json"),
        destination=Path(".opencode"),
        description="OpenCode configuration",
    ),
    CopyStep(
        source=Path(".opencode/agent"),
        destination=Path(".opencode/agent"),
        description="OpenCode agents",
    ),
    CopyStep(
        source=Path(".opencode/skill"),
        destination=Path(".opencode/skill"),
        description="OpenCode skills",
    ),
    CopyStep(
        source=Path(".opencode/command"),
        destination=Path(".opencode/command"),
        description="OpenCode commands",
        optional=True,
    ),
    CopyStep(
        source=Path(".github/workflows"),
        destination=Path(".github/workflows"),
        description="GitHub workflows",
    ),
]


def _count_files(path: Path) -> int:
    """Count regular files under path (path itself if it is a file)."""
    if path.is_file():
        return 1
    return sum(1 for p in path.rglob("*") if p.is_file())


class BundleCopier:
    """Copies bundle entries into a project without removing anything.

    Directory copies are a union: same-named files are overwritten, files
    that only exist in the destination are left alone, and hidden top-level
    entries of a source directory are not copied.
    """

    def __init__(
        self,
        bundle_root: Path,
        project_root: Path,
        steps: list[CopyStep] | None = None,
        destination_dirs: list[Path] | None = None,
    ) -> None:
        """Initialize the copier.

        Args:
            bundle_root: Root of the bundle source.
            project_root: Root of the target project.
            steps: Copy steps in execution order.
            destination_dirs: Directories to create before copying.
        """
        self.bundle_root = Path(bundle_root)
        self.project_root = Path(project_root)
        self.steps = steps if steps is not None else list(DEFAULT_COPY_STEPS)
        self.destination_dirs = (
            destination_dirs if destination_dirs is not None else list(DESTINATION_DIRS)
        )

    def ensure_directories(self) -> list[Path]:
        """Create the destination directories if absent.

        Returns:
            Directories that did not exist before.
        """
        created: list[Path] = []

        for rel_dir in self.destination_dirs:
            target = self.project_root / rel_dir
            if not target.is_dir():
                created.append(target)
            target.mkdir(parents=True, exist_ok=True)
            logger.debug(f"Ensured directory {target}")

        return created

    def copy_all(self) -> list[CopyResult]:
        """Run every copy step; a failed step never stops the next one.

        Returns:
            One result per step, in order.
        """
        return [self.copy(step) for step in self.steps]

    def copy(self, step: CopyStep) -> CopyResult:
        """Copy one bundle entry.

        Args:
            step: Copy step to execute.

        Returns:
            Result describing what happened.
        """
        source = self.bundle_root / step.source
        destination = self.project_root / step.destination

        if step.optional and not self._has_content(source):
            logger.debug(f"No {step.description} in bundle, skipping")
            return CopyResult(step=step, status=CopyStatus.SKIPPED)

        logger.info(f"Copying {step.description}...")

        if not source.exists():
            message = f"Source not found: {source}"
            logger.warning(message)
            return CopyResult(step=step, status=CopyStatus.MISSING, message=message)

        try:
            destination.mkdir(parents=True, exist_ok=True)
            if source.is_dir():
                copied = self._copy_directory_contents(source, destination)
            else:
                shutil.copy2(source, destination / source.name)
                copied = 1
        except OSError as e:
            message = f"Failed to copy {step.description}: {e}"
            logger.warning(message)
            return CopyResult(step=step, status=CopyStatus.FAILED, message=message)

        logger.info(f"Copied {step.description} ({copied} files)")
        return CopyResult(step=step, status=CopyStatus.COPIED, files_copied=copied)

    def _copy_directory_contents(self, source: Path, destination: Path) -> int:
        """Merge the visible entries of source into destination.

        Args:
            source: Source directory.
            destination: Existing destination directory.

        Returns:
            Number of files copied.
        """
        copied = 0

        for entry in sorted(source.iterdir()):
            if entry.name.startswith("."):
                continue

            target = destination / entry.name
            if entry.is_dir():
                shutil.copytree(entry, target, dirs_exist_ok=True)
            else:
                shutil.copy2(entry, target)
            copied += _count_files(entry)

        return copied

    @staticmethod
    def _has_content(path: Path) -> bool:
        """Whether path is a file or a non-empty directory."""
        if path.is_dir():
            return any(path.iterdir())
        return path.is_file()
