"""Install-state record persistence."""

import json
from pathlib import Path

from pydantic import ValidationError

from superai.core.config.settings import get_settings
from superai.core.exceptions.errors import NotInstalledError, StateError
from superai.core.logger.logger import get_logger
from superai.models.install import InstallState

logger = get_logger(__name__)


class StateStore:
    """Loads and saves the install-state record of one project.

    The record lives at a fixed path relative to the project root. Its mere
    existence marks a prior installation.
    """

    def __init__(self, project_root: Path, state_file: str | None = None) -> None:
        """Initialize the state store.

        Args:
            project_root: Root directory of the target project.
            state_file: State file name relative to the project root.
        """
        self.project_root = Path(project_root)
        self.state_file = state_file or get_settings().installer.state_file

    @property
    def path(self) -> Path:
        """Absolute path of the install-state file."""
        return self.project_root / self.state_file

    def exists(self) -> bool:
        """Check whether a prior installation was recorded."""
        return self.path.is_file()

    def load(self) -> InstallState:
        """Load and validate the install-state record.

        Returns:
            The recorded install state.

        Raises:
            NotInstalledError: If no record exists.
            StateError: If the record cannot be read or is malformed.
        """
        if not self.exists():
            raise NotInstalledError(
                "SuperAI is not installed in this project",
                state_path=str(self.path),
            )

        try:
            return InstallState.model_validate_json(self.path.read_text(encoding="utf-8"))
        except OSError as e:
            raise StateError(
                f"Could not read install state: {self.path}",
                state_path=str(self.path),
                details={"error": str(e)},
            ) from e
        except ValidationError as e:
            raise StateError(
                f"Invalid install state: {self.path}",
                state_path=str(self.path),
                details={"errors": e.error_count()},
            ) from e

    def save(self, state: InstallState) -> Path:
        """Write the install-state record, replacing any previous one.

        Args:
            state: State to persist.

        Returns:
            Path of the written file.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(state.model_dump(mode="json"), indent=2, ensure_ascii=False)
        self.path.write_text(payload + "\n", encoding="utf-8")

        logger.debug(f"Saved install state to {self.path}")
        return self.path
