"""Command-line interface for syncing and validating assets.

This module provides three entry points:

- ``sync-agents``: copy agent prompt documents into ``.claude/agents``
- ``sync-workflows``: copy workflow templates into ``.github/workflows``
- ``validate-agents``: check agent documents against the header schema
"""

import argparse
import sys
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path

from .catalog import AssetEntry
from .config import SyncConfig
from .copier import SyncSummary
from .errors import AssetSyncError
from .kinds import AGENTS, WORKFLOWS
from .kinds.base import AssetKind
from .pipeline import SyncPipeline
from .platforms.git.transport import Transport
from .validation import ValidationReport, ValidationSummary, summarize, validate_directory

RULE = "━" * 48

MARKERS = {"pass": "✓", "fail": "✗", "warn": "⚠"}

InputFn = Callable[[str], str]


def build_sync_parser(kind: AssetKind) -> argparse.ArgumentParser:
    """Build the argument parser shared by the sync commands."""
    command = f"sync-{kind.name}"
    parser = argparse.ArgumentParser(
        prog=command,
        description=f"Sync {kind.label.lower()} from an asset repository into this project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  # Interactive selection from the default repository
  {command}

  # Use another repository
  {command} https://github.com/user/my-{kind.name}.git

  # Same, via the environment
  {kind.env_var}=https://github.com/user/repo.git {command}

  # Non-interactive: install entries 1, 3, 4 and 5
  {command} --select "1 3-5" --yes

Environment variables:
  {kind.env_var}    Repository URL (overridden by REPOSITORY_URL)
        """,
    )

    parser.add_argument(
        "repository_url",
        nargs="?",
        metavar="REPOSITORY_URL",
        help=f"URL of the {kind.name} repository (optional)",
    )

    parser.add_argument(
        "--dest",
        type=Path,
        help=f"Destination folder (default: ./{kind.destination})",
    )

    parser.add_argument(
        "--select",
        metavar="SELECTION",
        help='Entries to install without prompting, e.g. "1 3 5-7" or "all"',
    )

    parser.add_argument(
        "--yes",
        action="store_true",
        help="Skip the confirmation prompt for custom selections",
    )

    return parser


def print_catalog(entries: Sequence[AssetEntry], kind: AssetKind) -> None:
    print()
    print(f"Available {kind.label.lower()}:")
    print(RULE)
    for entry in entries:
        print(f"[{entry.index}] {entry.display_name}")
        print(f"    {entry.summary}")
        print()
    print(RULE)


def print_sync_summary(summary: SyncSummary, kind: AssetKind) -> None:
    """Print per-item results followed by the totals block."""
    print()
    for result in summary.results:
        if result.ok:
            print(f"✓ Synced: {result.entry.display_name} → {result.entry.destination_name}")
        elif result.status == "not_found":
            print(f"⚠ Not found: {result.entry.display_name}")
        else:
            print(f"✗ Copy failed: {result.entry.display_name}: {result.error}")

    print()
    print("Sync summary")
    print(RULE)
    print(f"  {kind.label} synced: {summary.copied_count}")
    print(f"  Errors:{' ' * (len(kind.label) + 1)}{summary.failed_count}")
    print(f"  Location:{' ' * (len(kind.label) - 1)}{summary.destination}")
    print(RULE)


def print_post_sync_notes(summary: SyncSummary, kind: AssetKind) -> None:
    """List the secrets each installed workflow expects to be configured."""
    notes: dict[str, list[str]] = {}
    for result in summary.results:
        if not result.ok:
            continue
        try:
            text = result.target.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            print(f"Warning: Could not re-read {result.target}: {e}", file=sys.stderr)
            continue
        names = kind.post_sync_notes(text)
        if names:
            notes[result.entry.display_name] = names

    if not notes:
        return

    print()
    print("⚠ Check that the secrets these workflows use are configured:")
    print()
    for display_name, names in notes.items():
        print(f"{display_name}:")
        for name in names:
            print(f"  - {name}")
    print()
    print("ℹ Configure secrets in: Repository → Settings → Secrets → Actions")


def choose_entries(
    pipeline: SyncPipeline,
    args: argparse.Namespace,
    input_fn: InputFn,
) -> list[AssetEntry] | None:
    """Run the selection step.

    Returns:
        Entries to copy, or None if the user cancelled

    Raises:
        SelectionEmptyError: If a custom selection resolves to nothing
        ValueError: If the menu option is not recognized
    """
    catalog = pipeline.catalog()

    if args.select is not None:
        return pipeline.select(args.select)

    print()
    print(f"Which {pipeline.kind.label.lower()} do you want to sync?")
    print()
    print(f"[1] All {pipeline.kind.label.lower()}")
    print("[2] Custom selection")
    print("[3] Exit")
    print()
    option = input_fn("Select an option [1-3]: ").strip()

    if option == "1":
        return list(catalog)

    if option == "3":
        print("ℹ Exiting...")
        return None

    if option != "2":
        raise ValueError(f"Invalid option: {option or '(empty)'}")

    print()
    print("ℹ Enter the numbers to install, separated by spaces (e.g. 1 3 5) or as ranges (e.g. 1-3)")
    print()
    entries = pipeline.select(input_fn("Entries to install: "))

    print()
    print(f"ℹ Selected: {' '.join(entry.display_name for entry in entries)}")
    print()
    if not args.yes:
        confirm = input_fn("Continue with the installation? [y/N]: ").strip()
        if confirm not in ("y", "Y"):
            print("ℹ Installation cancelled")
            return None

    return entries


def run_sync(
    kind: AssetKind,
    argv: Sequence[str] | None = None,
    environ: Mapping[str, str] | None = None,
    cwd: Path | None = None,
    transport: Transport | None = None,
    input_fn: InputFn = input,
) -> int:
    """Run the sync workflow for one asset kind.

    Args:
        kind: Asset kind to sync
        argv: Command-line arguments (defaults to sys.argv[1:])
        environ: Environment mapping (defaults to os.environ)
        cwd: Consumer project directory (defaults to the current directory)
        transport: Git transport override
        input_fn: Prompt function used for interactive input

    Returns:
        Process exit status
    """
    args = build_sync_parser(kind).parse_args(argv)

    config = SyncConfig.from_environment(
        kind,
        cli_url=args.repository_url,
        environ=environ,
        cwd=cwd,
        destination=args.dest,
    )

    print(f"{kind.label} Synchronization Tool")
    print(f"Sync {kind.label.lower()} to local projects")
    if not config.uses_default_repo:
        print(f"ℹ Using repository: {config.repo_url}")

    try:
        pipeline = SyncPipeline.from_config(config, transport)
        print_catalog(pipeline.catalog(), kind)
        entries = choose_entries(pipeline, args, input_fn)
        if entries is None:
            return 0

        print()
        print(f"ℹ Syncing {kind.label.lower()}...")
        summary = pipeline.sync(entries, config.destination)
    except (AssetSyncError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except EOFError:
        print("Error: No input received", file=sys.stderr)
        return 1

    print_sync_summary(summary, kind)
    print()
    print("✓ Synchronization complete!")
    print_post_sync_notes(summary, kind)
    return 0


def print_report(report: ValidationReport) -> None:
    for outcome in report.outcomes:
        print(f"{MARKERS[outcome.status]} {outcome.message}")


def print_validation_summary(summary: ValidationSummary) -> None:
    print("Validation summary")
    print(RULE)
    print(f"  Passed:   {summary.passed}")
    print(f"  Failed:   {summary.failed}")
    print(f"  Warnings: {summary.warnings}")
    print(f"  Total:    {summary.total}")
    print(RULE)


def run_validate(argv: Sequence[str] | None = None, cwd: Path | None = None) -> int:
    """Validate every agent document in a directory.

    Returns:
        0 if no check failed, 1 otherwise
    """
    parser = argparse.ArgumentParser(
        prog="validate-agents",
        description="Validate the structure and format of agent documents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Validate ./agents
  validate-agents

  # Validate another folder
  validate-agents path/to/agents
        """,
    )
    parser.add_argument(
        "directory",
        nargs="?",
        type=Path,
        help="Folder of agent documents (default: ./agents)",
    )
    args = parser.parse_args(argv)

    directory = args.directory or (cwd or Path.cwd()) / AGENTS.source_subdir

    print("Agent Validation Test Suite")
    print()

    reports = validate_directory(directory)
    directory_report, file_reports = reports[0], reports[1:]

    print_report(directory_report)
    print()
    for report in file_reports:
        print(f"Testing agent: {report.path.stem}")
        print("─" * 48)
        print_report(report)
        print()

    summary = summarize(reports)
    print_validation_summary(summary)
    print()

    if summary.ok:
        print("✓ All validation tests passed!")
        return 0

    print("✗ Some validation tests failed")
    return 1


def sync_agents() -> None:
    """Entry point for ``sync-agents``."""
    sys.exit(run_sync(AGENTS))


def sync_workflows() -> None:
    """Entry point for ``sync-workflows``."""
    sys.exit(run_sync(WORKFLOWS))


def validate_agents() -> None:
    """Entry point for ``validate-agents``."""
    sys.exit(run_validate())


if __name__ == "__main__":
    sync_agents()
