"""
ⒸAngelaMos | 2026
cli.py
"""
from __future__ import annotations

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from officewatch.core import configure_logging, load_settings

console = Console()


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--config-dir", type=click.Path(path_type=Path), default=None, help="Directory holding config.yaml")
@click.pass_context
def cli(ctx: click.Context, debug: bool, config_dir: Path | None) -> None:
    """
    OfficeWatch - live "what am I working on" status from a workspace
    """
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    ctx.obj["config_dir"] = config_dir


def _settings(ctx: click.Context, **overrides):
    return load_settings(
        ctx.obj["config_dir"],
        debug=ctx.obj["debug"] or None,
        **overrides,
    )


@cli.command()
@click.option("--workspace", type=click.Path(exists=True, file_okay=False, path_type=Path), help="Directory to watch")
@click.option("--host", default=None, help="Interface to bind the dashboard")
@click.option("--port", type=int, default=None, help="TCP port for the dashboard")
@click.option("--static-dir", type=click.Path(path_type=Path), default=None, help="Built dashboard assets")
@click.pass_context
def serve(
    ctx: click.Context,
    workspace: Path | None,
    host: str | None,
    port: int | None,
    static_dir: Path | None,
) -> None:
    """
    Watch the workspace and serve the status API and push channel
    """
    import uvicorn

    from dashboard.backend.app import create_app
    from officewatch.activity import ActivityEngine
    from officewatch.daemon import OfficeWatchDaemon

    settings = _settings(
        ctx,
        workspace=workspace,
        host=host,
        port=port,
        static_dir=static_dir,
    )
    configure_logging(json_mode=settings.json_logs, debug=settings.debug)

    engine = ActivityEngine.from_settings(settings)
    daemon = OfficeWatchDaemon(settings, engine)
    app = create_app(engine, daemon=daemon, static_dir=settings.static_dir)

    console.print("[bold green]Starting OfficeWatch[/bold green]")
    console.print(f"  Workspace: {engine.workspace}")
    console.print(f"  Rooms: {', '.join(r.name for r in settings.rooms)}")
    console.print(f"  Dashboard: http://{settings.host}:{settings.port}")

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


@cli.command()
@click.argument("path")
@click.option("--command", "command", default=None, help="Shell command to classify alongside the path")
@click.option("--git-status", default=None, help="git status output used as a room hint")
@click.pass_context
def classify(ctx: click.Context, path: str, command: str | None, git_status: str | None) -> None:
    """
    Show which room and activity a path maps to
    """
    from officewatch.activity import classify_activity, classify_room, describe_task

    settings = _settings(ctx)

    room = classify_room(path, settings.rooms, git_status=git_status)
    activity = classify_activity(path, command)
    task = describe_task(room, Path(path).name, settings.rooms)

    console.print(f"Room:     [cyan]{room}[/cyan]")
    console.print(f"Activity: [green]{activity.value}[/green]")
    if task:
        console.print(f"Task:     {task}")


@cli.command()
@click.option("--workspace", type=click.Path(exists=True, file_okay=False, path_type=Path), help="Workspace root")
@click.pass_context
def commits(ctx: click.Context, workspace: Path | None) -> None:
    """
    Show the recent commits the dashboard would display
    """
    from officewatch.activity import count_commits_today
    from officewatch.git import GitHistoryReader

    settings = _settings(ctx, workspace=workspace)
    configure_logging(json_mode=settings.json_logs, debug=settings.debug)

    reader = GitHistoryReader(
        workspace=settings.workspace.resolve(),
        subdirectories=list(settings.subdirectories),
    )
    recent = reader.fetch_recent_commits()

    if not recent:
        console.print("[yellow]No commits found[/yellow]")
        return

    table = Table(title=f"Recent commits in {reader.workspace}")
    table.add_column("Date", style="cyan")
    table.add_column("Author", style="dim")
    table.add_column("Message", style="green")

    for commit in recent:
        table.add_row(
            commit.date.astimezone().strftime("%Y-%m-%d %H:%M"),
            commit.author,
            commit.message,
        )

    console.print(table)
    console.print(f"\n[dim]Commits today: {count_commits_today(recent)}[/dim]")


@cli.command()
@click.option("--limit", default=10, help="Number of commands to show")
@click.pass_context
def history(ctx: click.Context, limit: int) -> None:
    """
    Classify the most recent shell commands
    """
    from officewatch.activity import classify_activity, read_recent_commands

    settings = _settings(ctx)
    recent = read_recent_commands(settings.history_file, limit=limit)

    if not recent:
        console.print(f"[yellow]No commands found in {settings.history_file}[/yellow]")
        return

    table = Table(title=f"Last {len(recent)} commands")
    table.add_column("Activity", style="cyan")
    table.add_column("Command")

    for command in recent:
        table.add_row(classify_activity("", command).value, command)

    console.print(table)


@cli.command()
def version() -> None:
    """
    Show version information
    """
    from officewatch import __version__

    console.print(f"[bold]OfficeWatch[/bold] v{__version__}")


def main() -> int:
    """
    CLI entry point
    """
    try:
        cli(standalone_mode=False)
        return 0
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/yellow]")
        return 130
    except click.exceptions.Abort:
        console.print("\n[yellow]Interrupted[/yellow]")
        return 130
    except click.ClickException as e:
        e.show()
        return e.exit_code
    except Exception as e:
        console.print(f"[red]Error:[/red] {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
