"""Display components for CLI using Rich."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from superai.models.install import CopyStatus, InstallReport, InstallState, UpdateReport

console = Console()

BANNER_TITLE = "SuperAI GitHub"

STATUS_STYLES = {
    CopyStatus.COPIED: "[green]copied[/]",
    CopyStatus.MISSING: "[yellow]missing[/]",
    CopyStatus.FAILED: "[red]failed[/]",
    CopyStatus.SKIPPED: "[dim]skipped[/]",
}

NEXT_STEPS = (
    "[bold]Next steps:[/bold]\n"
    "  [cyan]1.[/] Run: opencode\n"
    "  [cyan]2.[/] Check available agents: /agents\n"
    "  [cyan]3.[/] Try the orchestrator: ask it to review some code\n\n"
    "[bold]For GitHub integration:[/bold]\n"
    "  [cyan]1.[/] Set ANTHROPIC_API_KEY in your repository secrets\n"
    "  [cyan]2.[/] Push to GitHub\n"
    "  [cyan]3.[/] Open a PR to see SuperAI in action\n\n"
    "[dim]For updates, run: superai update[/dim]"
)


def show_banner(subtitle: str) -> None:
    """Display the SuperAI banner.

    Args:
        subtitle: Name of the running tool (installer, updater, ...).
    """
    console.print()
    console.print(
        Panel(
            f"[bold]{BANNER_TITLE}[/bold] - {subtitle}",
            border_style="blue",
            padding=(0, 8),
            expand=False,
        )
    )
    console.print()


def show_success(title: str, message: str) -> None:
    """Display a success message."""
    console.print()
    console.print(
        Panel(
            f"[bold green]{message}[/]",
            title=f"[bold]{title}[/]",
            border_style="green",
        )
    )


def show_error(title: str, message: str) -> None:
    """Display an error message."""
    console.print()
    console.print(
        Panel(
            f"[bold red]{escape(message)}[/]",
            title=f"[bold]{escape(title)}[/]",
            border_style="red",
        )
    )


def show_info(title: str, message: str) -> None:
    """Display an info message."""
    console.print()
    console.print(
        Panel(
            message,
            title=f"[bold]{title}[/]",
            border_style="blue",
        )
    )


def show_tech_stack(labels: list[str]) -> None:
    """Display detected technologies.

    Args:
        labels: Technology labels. Nothing is shown when empty.
    """
    if not labels:
        return

    table = Table(title="[bold]Detected technologies[/]", show_header=False, box=None)
    table.add_column("Technology", style="cyan")
    for label in labels:
        table.add_row(f"- {escape(label)}")

    console.print(table)
    console.print()


def show_copy_results(report: InstallReport) -> None:
    """Display one row per copy step of an install run."""
    table = Table(title="[bold]Installed files[/]", box=None)
    table.add_column("Content", style="cyan")
    table.add_column("Destination", style="white")
    table.add_column("Status")
    table.add_column("Files", justify="right")

    for result in report.copy_results:
        table.add_row(
            result.step.description,
            f"{result.step.destination.as_posix()}/",
            STATUS_STYLES[result.status],
            str(result.files_copied) if result.status == CopyStatus.COPIED else "-",
        )

    console.print()
    console.print(table)


def show_install_summary(report: InstallReport) -> None:
    """Display the final summary and next-step suggestions.

    Args:
        report: Report of a completed (not cancelled) install.
    """
    show_copy_results(report)

    if report.warnings:
        console.print()
        for warning in report.warnings:
            console.print(f"[yellow]![/] {escape(warning)}")

    show_success("Installation Complete!", "SuperAI has been installed in your project!")
    console.print()
    console.print(Panel(NEXT_STEPS, border_style="cyan"))
    console.print()


def show_update_summary(report: UpdateReport) -> None:
    """Display the outcome of an update run."""
    if report.pulled:
        ref = f" (now at {report.bundle_ref})" if report.bundle_ref else ""
        console.print(f"[green]Bundle updated from branch {report.pulled_branch}{ref}[/]")
    elif report.pull_error:
        console.print("[yellow]Bundle not updated; installed from local files[/]")

    if report.install and not report.install.cancelled:
        show_install_summary(report.install)


def show_install_state(state: InstallState, state_path: str) -> None:
    """Display a recorded installation.

    Args:
        state: Loaded install state.
        state_path: Location of the state file.
    """
    table = Table(title="[bold]Installation[/]", show_header=False, box=None)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("State File", escape(state_path))
    table.add_row("Version", state.version)
    table.add_row("Installed At", state.installed_at)
    table.add_row("Bundle Source", escape(state.repo_root))
    table.add_row(
        "Tech Stack",
        escape(", ".join(state.tech_stack)) if state.tech_stack else "[dim]none detected[/]",
    )

    console.print()
    console.print(Panel(table, border_style="green"))
