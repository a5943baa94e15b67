import argparse
import logging
import os
import sys
from pathlib import Path

import uvicorn

from lanshare.adapters.net.interfaces import InterfaceAddressSource
from lanshare.api.deps import DEFAULT_PORT, get_settings
from lanshare.api.main import app
from lanshare.components.sharing import compose_link
from lanshare.rules.loader import load_rules_or_default

logger = logging.getLogger("cli")


def share_base_urls(port: int) -> list[str]:
    """Base URLs other devices on the LAN can use to reach this server."""
    addresses = InterfaceAddressSource().list_lan_addresses()
    return [compose_link(address, port, "") for address in addresses]


def _absolute(path: str | None) -> str | None:
    return str(Path(path).resolve()) if path else None


def apply_overrides(args: argparse.Namespace) -> None:
    """Push CLI options into the environment read by Settings."""
    overrides = {
        "LANSHARE_HOST": args.host,
        "LANSHARE_PORT": str(args.port) if args.port is not None else None,
        "LANSHARE_UPLOADS_DIR": _absolute(args.uploads_dir),
        "LANSHARE_RULES_PATH": _absolute(args.rules),
    }
    for key, value in overrides.items():
        if value is not None:
            os.environ[key] = value
    get_settings.cache_clear()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Share text and files with devices on the local network"
    )
    parser.add_argument("--host", help="Interface to bind (default: 0.0.0.0)")
    parser.add_argument("--port", type=int, help=f"Port to listen on (default: {DEFAULT_PORT})")
    parser.add_argument("--uploads-dir", help="Directory for shared items (default: ./uploads)")
    parser.add_argument("--rules", help="Path to rules.yaml (default: ./rules.yaml)")
    parser.add_argument(
        "--log-level",
        default="info",
        choices=["debug", "info", "warning", "error"],
        help="Logging level",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    apply_overrides(args)
    settings = get_settings()

    try:
        load_rules_or_default(settings.rules_path)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)

    urls = share_base_urls(settings.port)
    if not urls:
        logger.warning("No LAN address found; other devices may not reach this server")
    for url in urls:
        logger.info("Share from: %s", url)

    uvicorn.run(app, host=settings.host, port=settings.port, log_level=args.log_level)


if __name__ == "__main__":
    main()
