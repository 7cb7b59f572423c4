"""Command-line interface for setrepo."""

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

from app import SettingsRepositoryApp, setup_logging
from constants import APP_NAME, SETREPO_VERSION
from repository import GitRepositoryManager, RepositoryError
from settings import AppSettings, SettingsValidationError, get_config_path, load_settings


@dataclass
class ParsedArgs:
    """Parsed command-line arguments."""

    config_path: Path
    repository_dir: Path | None
    print_upstream: bool


def print_error_box(title: str, *lines: str) -> None:
    """Print a formatted error box to stderr.

    Args:
        title: The error title (will be prefixed with "Error: ")
        *lines: Additional lines to print in the box
    """
    print("=" * 60, file=sys.stderr)
    print(f"Error: {title}", file=sys.stderr)
    print("", file=sys.stderr)
    for line in lines:
        print(line, file=sys.stderr)
    print("=" * 60, file=sys.stderr)


class SetrepoHelpFormatter(argparse.RawDescriptionHelpFormatter):
    """Custom formatter that shows our structured help."""

    def format_help(self) -> str:
        lines = [
            "setrepo - Configure and sync a settings repository.",
            f"Version: {SETREPO_VERSION}",
            "",
            "Usage:",
            f"  {APP_NAME}                               Open the settings repository dialog",
            f"  {APP_NAME} --print-upstream              Print the configured upstream URL",
            "",
            "Options:",
            f"  --config <file>                       Settings file (default: {get_config_path()})",
            "  --repo-dir <dir>                      Local settings repository directory",
            "  --version                             Print version and exit",
            "",
            "Sync actions (in the dialog):",
            "  Merge              Merge remote changes, then push local ones",
            "  Overwrite Local    Replace local settings with the remote ones",
            "  Overwrite Remote   Force-push local settings to the remote",
        ]
        return "\n".join(lines) + "\n"


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for setrepo CLI."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        formatter_class=SetrepoHelpFormatter,
        add_help=True,
    )
    parser.add_argument("--config", metavar="FILE", help=argparse.SUPPRESS)
    parser.add_argument("--repo-dir", metavar="DIR", help=argparse.SUPPRESS)
    parser.add_argument("--print-upstream", action="store_true", help=argparse.SUPPRESS)
    parser.add_argument(
        "--version", action="version", version=f"{APP_NAME} {SETREPO_VERSION}", help=argparse.SUPPRESS
    )
    return parser


def parse_args(argv: list[str] | None = None) -> ParsedArgs:
    """Parse command line arguments.

    Returns:
        ParsedArgs with config path and overrides.
    """
    args = create_parser().parse_args(sys.argv[1:] if argv is None else argv)
    return ParsedArgs(
        config_path=Path(args.config).expanduser() if args.config else get_config_path(),
        repository_dir=Path(args.repo_dir).expanduser().resolve() if args.repo_dir else None,
        print_upstream=args.print_upstream,
    )


def load_app_settings(args: ParsedArgs) -> AppSettings:
    """Load settings, apply command-line overrides, and report problems.

    Exits with status 1 if the settings file is unusable.
    """
    try:
        settings, warnings = load_settings(args.config_path)
    except SettingsValidationError as e:
        print_error_box("Invalid settings", str(e), "", f"Fix or remove {args.config_path}")
        sys.exit(1)

    for warning in warnings:
        print(f"Warning: {warning}", file=sys.stderr)

    if args.repository_dir is not None:
        settings.repository_dir = args.repository_dir
    return settings


def create_repository_manager(settings: AppSettings) -> GitRepositoryManager:
    return GitRepositoryManager(
        settings.repository_dir,
        remote_name=settings.remote_name,
        branch=settings.branch,
    )


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)
    settings = load_app_settings(args)
    setup_logging(settings.log_level)
    manager = create_repository_manager(settings)

    if args.print_upstream:
        try:
            upstream = manager.get_upstream()
        except RepositoryError as e:
            print_error_box("Cannot read upstream", str(e))
            sys.exit(1)
        print(upstream or "")
        sys.exit(0)

    app = SettingsRepositoryApp(manager, version=SETREPO_VERSION)
    accepted = app.run()

    if accepted:
        print(f"Settings repository synced: {manager.repository_dir}")
        sys.exit(0)
    print("Cancelled.")
    sys.exit(1)


if __name__ == "__main__":
    main()
