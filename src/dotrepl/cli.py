# dotrepl.cli - Command line interface
"""
CLI entry point for dotrepl.
"""
import argparse
import logging
import sys
from pathlib import Path

from dotrepl.version import __version__
from dotrepl.config import Config, load_config
from dotrepl.repl import Repl


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="dotrepl",
        description="Interactive Python front-end with dotted-name tab completion",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"dotrepl {__version__}",
    )

    parser.add_argument(
        "-c", "--command",
        help="Execute a single statement and exit",
    )

    parser.add_argument(
        "-s", "--script",
        type=Path,
        help="Execute a script file statement by statement",
    )

    parser.add_argument(
        "--history-file",
        type=Path,
        help="History file (default: ~/.dotrepl_history)",
    )

    parser.add_argument(
        "--no-highlight",
        action="store_true",
        help="Disable input syntax highlighting",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config file",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging on stderr",
    )

    return parser


def configure_logging(debug: bool) -> None:
    """Route dotrepl's log records to stderr."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def build_repl(config: Config, **overrides) -> Repl:
    """Create a Repl from configuration."""
    options = dict(
        history_file=config.history_file,
        prompt=config.prompt,
        block_prompt=config.block_prompt,
        highlight=config.highlight,
        completion=config.completion_enabled,
        extra_keywords=config.extra_keywords,
        label=config.label,
    )
    options.update(overrides)
    return Repl(**options)


def main(argv=None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(args.debug)

    # Load config
    config = load_config(args.config)

    # Merge CLI args with config
    if args.history_file:
        config.history_file = args.history_file
    if args.no_highlight:
        config.highlight = False

    # Single statement mode
    if args.command:
        return run_command(args.command, config)

    # Script mode
    if args.script:
        return run_script(args.script, config)

    # Interactive REPL mode
    return run_repl(config)


def run_command(command: str, config: Config) -> int:
    """Run a single statement and exit."""
    repl = build_repl(config, terminal=_StreamTerminal())
    source = command if command.endswith("\n") else command + "\n"
    repl.execute(source)
    if repl.exit_requested:
        return exit_status(repl.exit_code)
    return 1 if repl.failures else 0


def run_script(script_path: Path, config: Config) -> int:
    """Run a script file."""
    repl = build_repl(config, terminal=_StreamTerminal())
    failures = repl.execute_script(script_path)
    if repl.exit_requested:
        return exit_status(repl.exit_code)
    return failures


def exit_status(code) -> int:
    """Process status for an exit() argument, following sys.exit."""
    if code is None:
        return 0
    if isinstance(code, int):
        return code
    print(code, file=sys.stderr)
    return 1


def run_repl(config: Config) -> int:
    """Run interactive REPL."""
    repl = build_repl(config)
    repl.run()
    if repl.exit_requested:
        return exit_status(repl.exit_code)
    return 0


class _StreamTerminal:
    """Output-only terminal for non-interactive modes."""

    def read_line(self, prompt: str, preload: str = "") -> str:
        return ""

    def show_result(self, text) -> None:
        if text is None:
            print(" => Unable to produce representation for value.")
        else:
            print(f" => {text}")

    def show_message(self, text: str) -> None:
        print(text)


if __name__ == "__main__":
    sys.exit(main())
