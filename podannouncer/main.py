"""Command line entry point: announce this pod's IP to skydns."""

import argparse
import logging
import sys

import yaml
from pydantic import ValidationError
from pydantic_settings import SettingsError

from .announcer import announce_target
from .config import config_path, load_settings
from .errors import AnnouncerError
from .identity import resolve_target

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skydns-pod-announcer",
        description="Search for the first non-local ip and announce it to skydns.",
    )
    parser.add_argument(
        "--config", type=str,
        help="Config file (default is $HOME/.skydns-pod-announcer.yaml)",
    )
    parser.add_argument("--hostname", type=str, help="Hostname to announce")
    parser.add_argument("--etcd", type=str, help="etcd endpoint (default: http://etcd:2379)")
    parser.add_argument("--ip", type=str, help="IP to announce")
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Log the outgoing request",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    path = config_path(args.config)
    if path is not None and path.is_file():
        logger.info(f"Using config file: {path}")

    # Unset flags must not shadow the environment or the config file.
    overrides = {
        name: value
        for name, value in (("hostname", args.hostname), ("etcd", args.etcd), ("ip", args.ip))
        if value is not None
    }

    try:
        settings = load_settings(args.config, **overrides)
    except (ValidationError, SettingsError, yaml.YAMLError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    try:
        target = resolve_target(settings)
        announce_target(target)
    except AnnouncerError as e:
        logger.error(f"Announce failed: {e}")
        return 1
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
