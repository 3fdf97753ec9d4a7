"""
Command line interface for commitwizard.

This module defines the ``main`` click command used as the entry point of
the ``commitwizard`` executable. It wires the wizard together: repository
check, configuration, staging, message questions, preview and finally the
commit. Any clean abort exits with status 0; hard failures exit with 1.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import click

from commitwizard import __version__
from commitwizard.config.loader import ConfigError, load_config
from commitwizard.executor import CommitExecutor, CommitFailure
from commitwizard.message.collector import collect_commit_fields
from commitwizard.message.composer import compose_message
from commitwizard.prompts.backend import QuestionaryBackend
from commitwizard.staging import StagingAbort, StagingCoordinator
from commitwizard.vcs.git_client import GitClient, NotARepositoryError

# Create a module-level logger. Attach a null handler and disable
# propagation to avoid logging errors when the root logger's stream is
# closed (such as during unit tests). When logging is configured by
# the CLI, root handlers will be added and messages will propagate.
logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------
EXIT_SUCCESS = 0
EXIT_FAILURE = 1


@dataclass(frozen=True)
class WizardOptions:
    """Options parsed once from the command line."""

    pick: bool = False
    dry_run: bool = False
    config_path: Optional[Path] = None


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------

def print_info(message: str, indent: int = 0) -> None:
    """Print an info message."""
    prefix = "  " * indent
    click.echo(f"{prefix}ℹ {message}")


def print_success(message: str, indent: int = 0) -> None:
    """Print a success message."""
    prefix = "  " * indent
    click.echo(f"{prefix}✓ {message}")


def print_warning(message: str, indent: int = 0) -> None:
    """Print a warning message."""
    prefix = "  " * indent
    click.echo(f"{prefix}⚠ {message}")


def print_error(message: str, indent: int = 0) -> None:
    """Print an error message."""
    prefix = "  " * indent
    click.echo(f"{prefix}✗ {message}", err=True)


def show_preview(message: str, flags: List[str]) -> None:
    """Print the rendered message and the selected flags."""
    click.echo("\n--- Commit message preview ---")
    click.echo(message)
    click.echo("------------------------------")
    if flags:
        click.echo(f"Flags: {' '.join(flags)}")
    click.echo("")


# ---------------------------------------------------------------------------
# Wizard
# ---------------------------------------------------------------------------

def run_wizard(options: WizardOptions) -> int:
    """Run the whole wizard and return the process exit code."""
    client = GitClient(Path.cwd())
    try:
        client.ensure_repository()
    except NotARepositoryError as exc:
        logger.debug("Repository check failed: %s", exc)
        print_error("Error: not inside a git repository.")
        return EXIT_FAILURE

    # Porcelain paths are relative to the root, so run everything from there
    repo_root = client.get_toplevel()
    client.repo_root = repo_root
    logger.debug("Working tree root: %s", repo_root)

    try:
        config = load_config(repo_root, options.config_path)
    except ConfigError as exc:
        print_error(f"Configuration error: {exc}")
        return EXIT_FAILURE

    backend = QuestionaryBackend()
    coordinator = StagingCoordinator(client, backend, stage_all_default=config["stage_all_default"])
    try:
        staged = coordinator.prepare(pick=options.pick)
    except StagingAbort as exc:
        print_info(str(exc))
        return EXIT_SUCCESS

    print_success(f"{len(staged)} file{'s' if len(staged) != 1 else ''} staged")
    for path in staged[:5]:
        print_info(path, indent=1)
    if len(staged) > 5:
        print_info(f"... and {len(staged) - 5} more", indent=1)

    fields = collect_commit_fields(backend, config, on_warning=print_warning)
    message = compose_message(fields)
    show_preview(message, fields.flags)

    if not fields.confirm_commit:
        print_info("Commit cancelled.")
        return EXIT_SUCCESS

    try:
        CommitExecutor(client).execute(message, fields.flags, dry_run=options.dry_run)
    except CommitFailure as exc:
        print_error(f"Commit failed: {exc}")
        return EXIT_FAILURE

    if not options.dry_run:
        print_success("Commit created.")
    return EXIT_SUCCESS


@click.command()
@click.option("--pick", "-p", "pick", is_flag=True, help="Pick the files to stage from a checklist.")
@click.option("--dry-run", "dry_run", is_flag=True, help="Print the git command and message instead of committing.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Use this configuration file instead of the repository's .commitwizard.json.",
)
@click.option("--verbose", is_flag=True, help="Enable verbose (debug) output.")
@click.version_option(version=__version__, prog_name="commitwizard")
def main(pick: bool, dry_run: bool, config_path: Optional[Path], verbose: bool) -> None:
    """Stage files and write a Conventional Commit, one question at a time."""
    # Use force=True to ensure handlers are reconfigured on subsequent
    # invocations (important for tests).
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
        force=True,
    )

    ctx = click.get_current_context(silent=True)
    options = WizardOptions(pick=pick, dry_run=dry_run, config_path=config_path)
    logger.debug("Options: %s", options)

    try:
        raise click.exceptions.Exit(run_wizard(options))
    except click.exceptions.Exit:
        # Click uses its own Exit exception; re-raise to let Click handle it
        raise
    except Exception as exc:
        logging.exception("Unhandled error: %s", exc)
        print_error(f"Unexpected error: {exc}")
        ctx.exit(EXIT_FAILURE)
