"""Command-line interface for the Gopher shell."""

import argparse
import logging
import sys
from dataclasses import replace

from .config import Config, load_config
from .core import CommandInterpreter, MenuRenderer, Navigator, Paginator, Session
from .shell import GopherShell
from .terminal import ConsoleLineReader, ConsolePager, SubprocessLauncher
from .transport import SocketDownloader


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="gopher-shell - a simple terminal gopher client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                               # Use default config
  %(prog)s gopher://example.org/1/       # Open a hole at startup
  %(prog)s -c config.yaml                # Use specific config file
  %(prog)s -r ~/.gopher_shell.conf       # Evaluate a specific rc file
""",
    )

    parser.add_argument(
        "url",
        nargs="?",
        help="Selector URL to open at startup",
    )

    parser.add_argument(
        "-c", "--config",
        metavar="FILE",
        help="Path to YAML configuration file",
    )

    parser.add_argument(
        "-r", "--rc",
        metavar="RCFILE",
        action="append",
        help="Command file to evaluate at startup (repeatable)",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def build_shell(config: Config) -> GopherShell:
    """Create and wire all components for the console."""
    reader = ConsoleLineReader()
    pager = ConsolePager(Paginator(lines=config.lines, columns=config.columns), reader)
    session = Session.create(download_directory=config.download_directory)
    navigator = Navigator(
        session,
        SocketDownloader(),
        reader,
        pager,
        SubprocessLauncher(),
        MenuRenderer(columns=config.columns),
    )
    interpreter = CommandInterpreter(session, navigator, pager)
    return GopherShell(session, navigator, interpreter, reader, pager, config)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    logger = logging.getLogger(__name__)

    # Load configuration
    if args.config:
        try:
            config = load_config(args.config)
        except FileNotFoundError:
            logger.error(f"Config file not found: {args.config}")
            return 1
        except ValueError as e:
            logger.error(f"Invalid config file {args.config}: {e}")
            return 1
    else:
        config = Config()

    # Override config with command line arguments
    if args.rc:
        config = replace(config, rc_files=args.rc)
    if args.url:
        config = replace(config, home=args.url)

    shell = build_shell(config)
    try:
        shell.run()
    except KeyboardInterrupt:
        logger.info("Interrupted")
    finally:
        shell.pager.echo("")

    return 0


if __name__ == "__main__":
    sys.exit(main())
