"""Tests for Updater."""

import json
import sys
from pathlib import Path

import pytest
from git import Repo

from superai.core.exceptions.errors import InstallError, NotInstalledError
from superai.installer.installer import Installer
from superai.installer.state import StateStore
from superai.installer.updater import Updater


def _commit_bundle(bundle_dir: Path) -> Repo:
    """Turn the bundle fixture into a git repository with one commit."""
    repo = Repo.init(bundle_dir)
    repo.git.add(A=True)
    repo.index.commit("Bundle")
    return repo


class TestUpdater:
    """Tests for Updater class."""

    def test_not_installed(self, bundle_dir: Path, project_dir: Path) -> None:
        """Test updating a project without a record fails before any write."""
        with pytest.raises(NotInstalledError):
            Updater(project_root=project_dir, bundle_root=bundle_dir).run()

        assert list(project_dir.iterdir()) == []

    def test_update_without_git_bundle(self, bundle_dir: Path, project_dir: Path) -> None:
        """Test a plain bundle directory is reinstalled without pulling."""
        Installer(project_root=project_dir, bundle_root=bundle_dir).run(auto_confirm=True)
        (bundle_dir / ".opencode" / "agent" / "new-agent.md").write_text("# New\n")

        report = Updater(project_root=project_dir, bundle_root=bundle_dir).run()

        assert report.pulled is False
        assert report.pull_error is None
        assert report.install is not None
        assert not report.install.cancelled
        assert (project_dir / ".opencode" / "agent" / "new-agent.md").is_file()

    def test_update_refreshes_tech_stack(self, bundle_dir: Path, project_dir: Path) -> None:
        """Test the record is rewritten with the current stack."""
        Installer(project_root=project_dir, bundle_root=bundle_dir).run(auto_confirm=True)
        (project_dir / "composer.json").write_text(json.dumps({"require": {"php": "^8.2"}}))

        Updater(project_root=project_dir, bundle_root=bundle_dir).run()

        assert StateStore(project_dir).load().tech_stack == ["PHP"]

    def test_pull_failure_is_not_fatal(self, bundle_dir: Path, project_dir: Path) -> None:
        """Test a bundle checkout without a remote still reinstalls."""
        _commit_bundle(bundle_dir)
        Installer(project_root=project_dir, bundle_root=bundle_dir).run(auto_confirm=True)

        report = Updater(project_root=project_dir, bundle_root=bundle_dir).run()

        assert report.pulled is False
        assert report.pull_error
        assert report.install is not None
        assert StateStore(project_dir).exists()

    def test_git_unavailable_is_not_fatal(
        self, monkeypatch: pytest.MonkeyPatch, bundle_dir: Path, project_dir: Path
    ) -> None:
        """Test a checkout that cannot be pulled without git still reinstalls."""
        (bundle_dir / ".git").mkdir()
        Installer(project_root=project_dir, bundle_root=bundle_dir).run(auto_confirm=True)
        monkeypatch.setitem(sys.modules, "git", None)

        report = Updater(project_root=project_dir, bundle_root=bundle_dir).run()

        assert report.pulled is False
        assert "Git is not available" in (report.pull_error or "")
        assert report.install is not None
        assert not report.install.cancelled

    def test_pull_then_reinstall(
        self, bundle_dir: Path, project_dir: Path, temp_dir: Path
    ) -> None:
        """Test new bundle content pulled from the remote reaches the project."""
        upstream = _commit_bundle(bundle_dir)
        branch = upstream.active_branch.name
        checkout = temp_dir / "checkout"
        Repo.clone_from(str(bundle_dir), str(checkout))

        Installer(project_root=project_dir, bundle_root=checkout).run(auto_confirm=True)

        new_workflow = bundle_dir / ".github" / "workflows" / "nightly.yml"
        new_workflow.write_text("name: Nightly\n")
        upstream.index.add([str(new_workflow.relative_to(bundle_dir))])
        upstream.index.commit("Add nightly workflow")

        report = Updater(project_root=project_dir, bundle_root=checkout).run()

        assert report.pulled is True
        assert report.pulled_branch == branch
        assert report.bundle_ref == branch
        assert (project_dir / ".github" / "workflows" / "nightly.yml").is_file()

    def test_installer_errors_propagate(self, bundle_dir: Path, project_dir: Path) -> None:
        """Test a failure in the reinstall is not swallowed."""
        Installer(project_root=project_dir, bundle_root=bundle_dir).run(auto_confirm=True)

        class FailingInstaller:
            def run(self, auto_confirm: bool = False):
                raise InstallError("boom")

        updater = Updater(
            project_root=project_dir,
            bundle_root=bundle_dir,
            installer=FailingInstaller(),  # type: ignore[arg-type]
        )

        with pytest.raises(InstallError, match="boom"):
            updater.run()
