"""Main CLI entry point for SuperAI."""

import json
import sys
from pathlib import Path
from typing import NoReturn

import click

from superai.cli.display import (
    console,
    show_banner,
    show_error,
    show_info,
    show_install_state,
    show_install_summary,
    show_tech_stack,
    show_update_summary,
)
from superai.cli.prompts import confirm_action
from superai.core.exceptions.errors import NotInstalledError, StateError, SuperAIError
from superai.core.logger.logger import setup_logging
from superai.installer import Installer, StateStore, TechStackDetector, Updater

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

EXIT_INTERRUPTED = 130


def _build_installer(project_dir: Path | None, bundle: Path | None) -> Installer:
    """Create an installer wired to the interactive prompts and display."""
    return Installer(
        project_root=project_dir,
        bundle_root=bundle,
        confirm=confirm_action,
        on_stack_detected=lambda stack: show_tech_stack(stack.labels),
    )


def _fail(title: str, error: SuperAIError) -> NoReturn:
    """Report a fatal error and exit with status 1."""
    show_error(title, error.message)
    if isinstance(error, NotInstalledError):
        console.print("[dim]Run 'superai install' first.[/]")
    sys.exit(1)


def _interrupted() -> NoReturn:
    console.print()
    show_info("Interrupted", "Operation cancelled by user.")
    sys.exit(EXIT_INTERRUPTED)


@click.group(invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.option("--version", is_flag=True, help="Show version")
@click.pass_context
def main(ctx: click.Context, version: bool) -> None:
    """SuperAI - install OpenCode agents, skills and workflows into a project."""
    if version:
        from superai import __version__

        click.echo(f"SuperAI version {__version__}")
        return

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@main.command(context_settings=CONTEXT_SETTINGS)
@click.option("--yes", "-y", is_flag=True, help="Auto-confirm all prompts")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option(
    "--project-dir",
    type=click.Path(path_type=Path),
    default=None,
    help="Project to install into (default: current directory)",
)
@click.option(
    "--bundle",
    type=click.Path(path_type=Path),
    default=None,
    help="Bundle source directory (default: the SuperAI checkout)",
)
def install(yes: bool, verbose: bool, project_dir: Path | None, bundle: Path | None) -> None:
    """Install the SuperAI configuration into a project.

    Example:
        superai install --yes
    """
    show_banner("OpenCode Installer")

    try:
        setup_logging(verbose=verbose)
        installer = _build_installer(project_dir, bundle)
        report = installer.run(auto_confirm=yes)
    except SuperAIError as e:
        _fail("Installation Failed", e)
    except KeyboardInterrupt:
        _interrupted()

    if not report.cancelled:
        show_install_summary(report)


@main.command(context_settings=CONTEXT_SETTINGS)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option(
    "--project-dir",
    type=click.Path(path_type=Path),
    default=None,
    help="Project to update (default: current directory)",
)
@click.option(
    "--bundle",
    type=click.Path(path_type=Path),
    default=None,
    help="Bundle source directory (default: the SuperAI checkout)",
)
def update(verbose: bool, project_dir: Path | None, bundle: Path | None) -> None:
    """Pull the latest bundle and reinstall it without prompting.

    Example:
        superai update
    """
    show_banner("Updater")

    try:
        setup_logging(verbose=verbose)
        installer = _build_installer(project_dir, bundle)
        updater = Updater(
            project_root=installer.project_root,
            bundle_root=installer.bundle_root,
            git_operations=installer.git_operations,
            state_store=installer.state_store,
            installer=installer,
        )
        report = updater.run()
    except SuperAIError as e:
        _fail("Update Failed", e)
    except KeyboardInterrupt:
        _interrupted()

    show_update_summary(report)


@main.command(context_settings=CONTEXT_SETTINGS)
@click.option(
    "--path",
    "-p",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
    help="Project directory to inspect",
)
@click.option("--json", "as_json", is_flag=True, help="Print labels as a JSON array")
def detect(path: Path, as_json: bool) -> None:
    """Detect the technology stack of a project.

    Example:
        superai detect --path ../my-app --json
    """
    stack = TechStackDetector().detect(path)

    if as_json:
        click.echo(json.dumps(stack.labels))
        return

    if stack.is_empty:
        show_info("No Technologies", f"No recognised manifest files in {path}")
        return

    show_tech_stack(stack.labels)


@main.command(context_settings=CONTEXT_SETTINGS)
@click.option(
    "--project-dir",
    type=click.Path(path_type=Path),
    default=None,
    help="Project to inspect (default: current directory)",
)
def status(project_dir: Path | None) -> None:
    """Show the recorded installation of a project."""
    try:
        store = StateStore(project_dir or Path.cwd())
        state = store.load()
    except NotInstalledError as e:
        _fail("Not Installed", e)
    except StateError as e:
        _fail("Invalid State", e)
    except SuperAIError as e:
        _fail("Configuration Error", e)

    show_install_state(state, str(store.path))


if __name__ == "__main__":
    main()
