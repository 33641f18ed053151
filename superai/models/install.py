"""Installation-related data models."""

from datetime import datetime, timezone
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

STATE_VERSION = "1.0.0"
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def utc_timestamp(moment: datetime | None = None) -> str:
    """Format a moment (default: now) as a second-precision UTC timestamp."""
    moment = moment or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)


class InstallState(BaseModel):
    """Persisted record of the last installation.

    Field names and types are read by every future update run, so they
    must stay exactly as they are.
    """

    version: str = Field(
        default=STATE_VERSION,
        description="Install-state format version",
    )
    installed_at: str = Field(
        default_factory=utc_timestamp,
        description="UTC timestamp of the last install",
    )
    tech_stack: list[str] = Field(
        default_factory=list,
        description="Technology labels detected at install time",
    )
    repo_root: str = Field(
        description="Path to the bundle source that was installed",
    )


class CopyStatus(str, Enum):
    """Outcome of a single copy step."""

    COPIED = "copied"
    MISSING = "missing"
    FAILED = "failed"
    SKIPPED = "skipped"


class CopyStep(BaseModel):
    """A bundle entry to copy into the project."""

    source: Path = Field(description="Source path, relative to the bundle root")
    destination: Path = Field(description="Destination directory, relative to the project root")
    description: str = Field(description="Human-readable name used in log messages")
    optional: bool = Field(
        default=False,
        description="Skip silently when the source is absent or empty",
    )


class CopyResult(BaseModel):
    """Result of a single copy step."""

    step: CopyStep
    status: CopyStatus
    files_copied: int = Field(default=0, ge=0)
    message: str | None = None

    @property
    def is_warning(self) -> bool:
        """Whether this result should be reported as a warning."""
        return self.status in (CopyStatus.MISSING, CopyStatus.FAILED)


class InstallReport(BaseModel):
    """Result of an installer run."""

    project_root: Path
    bundle_root: Path
    cancelled: bool = False
    is_git_repo: bool = False
    tech_stack: list[str] = Field(default_factory=list)
    created_dirs: list[Path] = Field(default_factory=list)
    copy_results: list[CopyResult] = Field(default_factory=list)
    state: InstallState | None = None
    state_path: Path | None = None

    @property
    def warnings(self) -> list[str]:
        """Messages of every copy step that ended in a warning."""
        return [r.message or str(r.step.source) for r in self.copy_results if r.is_warning]


class UpdateReport(BaseModel):
    """Result of an updater run."""

    pulled: bool = False
    pulled_branch: str | None = None
    bundle_ref: str | None = None
    pull_error: str | None = None
    install: InstallReport | None = None
