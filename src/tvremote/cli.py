"""Command-line interface for tvremote.

Provides the main entry point for running the relay server, pairing
with a TV and sending key presses or app launches.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="tvremote",
        description="Remote control for TVs with a local JSON/HTTP API",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to YAML configuration file (default: config/tvremote.yaml)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument("--host", type=str, default=None, help="TV IP address or hostname")
    parser.add_argument("--port", type=str, default=None, help="TV API port (default: 1925)")
    parser.add_argument(
        "--no-cors", dest="cors_mode", action="store_true", default=None,
        help="Send opaque requests; the TV's answer cannot be read",
    )
    parser.add_argument(
        "--proxy", dest="proxy_mode", action="store_true", default=None,
        help="Route requests through the relay server",
    )
    parser.add_argument("--relay-url", type=str, default=None, help="Base URL of the relay server")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("relay", help="Start the relay server")

    key_parser = subparsers.add_parser("key", help="Send a key press")
    key_parser.add_argument("key", type=str, help="Key name, e.g. VolumeUp (see 'keys')")

    launch_parser = subparsers.add_parser("launch", help="Launch an app by intent action")
    launch_parser.add_argument("action", type=str, help="Intent action")

    pair_parser = subparsers.add_parser("pair", help="Pair with the TV")
    pair_sub = pair_parser.add_subparsers(dest="pair_command", required=True)
    pair_sub.add_parser("request", help="Ask the TV to display a pairing code")
    grant_parser = pair_sub.add_parser("grant", help="Confirm the code shown on the TV")
    grant_parser.add_argument("pin", type=str, help="Pairing code")

    subparsers.add_parser("keys", help="List known key names")

    return parser.parse_args(argv)


def _transport_config(settings, args):
    """Merge command-line overrides onto the configured TV settings."""
    from tvremote.domain.models import TransportConfig

    tv = settings.tv
    return TransportConfig(
        host=args.host if args.host is not None else tv.host,
        port=args.port if args.port is not None else tv.port,
        cors_mode=args.cors_mode if args.cors_mode is not None else tv.cors_mode,
        proxy_mode=args.proxy_mode if args.proxy_mode is not None else tv.proxy_mode,
        relay_base_url=args.relay_url or tv.relay_base_url,
    )


async def _run_remote(settings, args) -> bool:
    """Run one remote operation and print what the operator would see."""
    from tvremote.remote.client import TvRemote
    from tvremote.storage.json_file import JsonFileStore
    from tvremote.transport.http_backend import HttpTransport

    config = _transport_config(settings, args)
    if not config.host:
        print("No TV host configured. Pass --host or set tv.host in the config file.")
        return False

    store = JsonFileStore(settings.storage.path)
    async with HttpTransport(timeout=settings.tv.timeout) as transport:
        remote = TvRemote(transport, store, config)
        if args.command == "key":
            outcome = await remote.send_key(args.key)
        elif args.command == "launch":
            outcome = await remote.launch_app(args.action)
        elif args.pair_command == "request":
            outcome = await remote.request_pairing()
        else:
            outcome = await remote.confirm_pairing(args.pin)

    for entry in reversed(remote.board.entries):
        print(f"[{entry.time_label}] {entry.message}")
    status = remote.board.status
    print(f"Status: {status.label} ({'ok' if status.ok else 'error'})")
    return outcome.ok


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the tvremote CLI."""
    args = parse_args(argv)

    if args.command is None:
        parse_args(["--help"])
        return

    from tvremote.config.settings import load_settings
    from tvremote.utils.logging import setup_logging

    settings = load_settings(args.config)

    if args.verbose:
        settings.logging.level = "DEBUG"

    setup_logging(settings.logging)

    if args.command == "relay":
        from tvremote.relay.server import main as run_relay

        relay = settings.relay
        logger.info("Starting relay server on port %d", relay.port)
        run_relay(
            host=relay.host,
            port=relay.port,
            static_root=relay.static_root,
            upstream_timeout=relay.upstream_timeout,
        )

    elif args.command == "keys":
        from tvremote.remote.keys import KNOWN_KEYS

        for key in KNOWN_KEYS:
            print(key)

    else:
        if args.command == "key":
            from tvremote.remote.keys import is_known_key

            if not is_known_key(args.key):
                logger.warning("Key %r is not a known key name, sending anyway", args.key)
        ok = asyncio.run(_run_remote(settings, args))
        if not ok:
            sys.exit(1)


if __name__ == "__main__":
    main()
