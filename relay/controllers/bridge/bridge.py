"""
Process entry point for the stdio-to-HTTP relay.

Usage:
    mcp-http-relay [options] <server-url>
"""

import argparse
import sys
from typing import Optional

from relay import __version__
from relay.configs import create_default_config, get_config_path, get_full_config, get_logger, setup_logging
from relay.controllers.bridge.pump import LinePump
from relay.controllers.bridge.session import SessionBridge
from relay.exceptions import ConfigurationError, MissingConfigError

PROG = "mcp-http-relay"

logger = get_logger("bridge")


def parse_header(value: str) -> tuple[str, str]:
    """Parse a "Name: value" header option."""
    name, sep, header_value = value.partition(":")
    if not sep or not name.strip():
        raise argparse.ArgumentTypeError(f"expected 'Name: value', got {value!r}")
    return name.strip(), header_value.strip()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Relay newline-delimited JSON-RPC on stdio to a streamable-HTTP server",
    )
    parser.add_argument(
        "server_url",
        nargs="?",
        help="Remote endpoint URL (default: $MCP_RELAY_URL or server_url in config.yaml)",
    )
    parser.add_argument("--timeout", type=float, dest="read_timeout", help="Read timeout in seconds")
    parser.add_argument("--connect-timeout", type=float, help="Connect timeout in seconds")
    parser.add_argument(
        "-H",
        "--header",
        action="append",
        type=parse_header,
        default=[],
        dest="headers",
        metavar="'NAME: VALUE'",
        help="Extra header sent with every request (repeatable)",
    )
    parser.add_argument("--debug", action="store_true", default=None, help="Enable debug logging")
    parser.add_argument("--log-file", help="Log file path")
    parser.add_argument("--init-config", action="store_true", help="Write a default config.yaml and exit")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(argv: Optional[list[str]] = None) -> int:
    """Parse arguments, then pump stdin to the remote server until EOF."""
    args = build_parser().parse_args(argv)

    if args.init_config:
        if create_default_config():
            print(f"Created {get_config_path()}", file=sys.stderr)
        else:
            print(f"Config already exists: {get_config_path()}", file=sys.stderr)
        return 0

    try:
        config = get_full_config(
            server_url=args.server_url,
            connect_timeout=args.connect_timeout,
            read_timeout=args.read_timeout,
            headers=dict(args.headers) or None,
            debug=args.debug,
            log_file=args.log_file,
        )
    except MissingConfigError:
        print(f"Usage: {PROG} <server-url>", file=sys.stderr)
        return 1
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    setup_logging(debug=config.debug, log_file=config.log_file)
    logger.info(f"Relay starting, server URL: {config.server_url}")

    bridge = SessionBridge(config.server_url, timeout=config.timeout, headers=config.headers)
    try:
        LinePump(bridge).run()
    finally:
        bridge.close()
    return 0


def main() -> None:
    """Console script entry point."""
    try:
        sys.exit(run())
    except KeyboardInterrupt:
        logger.info("Relay interrupted")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Relay error: {e}")
        sys.exit(1)
