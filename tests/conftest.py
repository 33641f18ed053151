"""Pytest configuration and shared fixtures."""

import os
import shutil
import tempfile
from pathlib import Path
from typing import Generator

import pytest
from git import Repo

from superai.core.config.settings import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Isolate tests from SUPERAI_* environment variables and cached settings."""
    for key in list(os.environ):
        if key.startswith("SUPERAI_"):
            monkeypatch.delenv(key, raising=False)

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory that is cleaned up after the test.

    Yields:
        Path to the temporary directory.
    """
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def empty_temp_dir(temp_dir: Path) -> Path:
    """Create an empty directory for testing.

    Args:
        temp_dir: Temporary directory fixture.

    Returns:
        Path to empty directory.
    """
    empty_dir = temp_dir / "empty"
    empty_dir.mkdir()
    return empty_dir


@pytest.fixture
def project_dir(temp_dir: Path) -> Path:
    """Create an empty target project directory.

    Args:
        temp_dir: Temporary directory fixture.

    Returns:
        Path to the project directory.
    """
    path = temp_dir / "project"
    path.mkdir()
    return path


@pytest.fixture
def bundle_dir(temp_dir: Path) -> Path:
    """Create a bundle source tree with every kind of content.

    Args:
        temp_dir: Temporary directory fixture.

    Returns:
        Path to the bundle root.
    """
    root = temp_dir / "bundle"

    agent_dir = root / ".opencode" / "agent"
    agent_dir.mkdir(parents=True)
    (agent_dir / "orchestrator.md").write_text("# Orchestrator\n")
    (agent_dir / "reviewer.md").write_text("# Reviewer\n")
    (agent_dir / ".DS_Store").write_text("junk")

    skill_dir = root / ".opencode" / "skill" / "testing-patterns"
    skill_dir.mkdir(parents=True)
    (skill_dir / "SKILL.md").write_text("# Testing patterns\n")
    (skill_dir / "examples.md").write_text("# Examples\n")

    command_dir = root / ".opencode" / "command"
    command_dir.mkdir(parents=True)
    (command_dir / "review.md").write_text("# /review\n")

    (root / ".opencode" / "opencode.json").write_text('{"$schema": "https://opencode.ai/config.json"}\n')

    workflows_dir = root / ".github" / "workflows"
    workflows_dir.mkdir(parents=True)
    (workflows_dir / "superai-review.yml").write_text("name: SuperAI Review\n")

    return root


@pytest.fixture
def sample_git_repo(temp_dir: Path) -> Generator[Path, None, None]:
    """Create a sample Git repository for testing.

    Args:
        temp_dir: Temporary directory fixture.

    Yields:
        Path to the sample Git repository.
    """
    repo_path = temp_dir / "sample_repo"
    repo_path.mkdir()

    repo = Repo.init(repo_path)

    (repo_path / "README.md").write_text("# Sample Repository\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")

    yield repo_path
