"""
ipxedust command line entry point.

Usage:
    ipxedust list
    ipxedust extract <name> [-o FILE] [-p TEXT | --patch-file FILE]
    ipxedust magic
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import structlog

from ipxedust import __version__
from ipxedust import binary
from ipxedust.config import LOG_LEVELS, Config

logger = structlog.get_logger()


def configure_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Configure structured logging on stderr."""
    if level.upper() not in LOG_LEVELS:
        raise ValueError(f"Invalid log level: {level}")
    log_level = logging.getLevelName(level.upper())
    renderer = (
        structlog.dev.ConsoleRenderer()
        if fmt == "console"
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


# ── Commands ─────────────────────────────────────────────────────────


def cmd_list(args: argparse.Namespace, config: Config) -> int:
    print(f"  {'Name':<28} {'Size':>10}  {'Patchable':<9}")
    print(f"  {'─' * 49}")
    for asset in binary.assets():
        patchable = "yes" if binary.is_patchable(asset.content) else "no"
        print(f"  {asset.name:<28} {asset.size:>10}  {patchable:<9}")
    return 0


def _resolve_payload(args: argparse.Namespace, config: Config) -> bytes:
    if args.patch_file:
        return Path(args.patch_file).read_bytes()
    if args.patch is not None:
        return args.patch.encode("utf-8")
    return config.patch_bytes


def cmd_extract(args: argparse.Namespace, config: Config) -> int:
    payload = _resolve_payload(args, config)
    content = binary.serve(args.name, payload)

    if args.output == "-":
        sys.stdout.buffer.write(content)
        sys.stdout.buffer.flush()
    else:
        Path(args.output).write_bytes(content)
        logger.info("binary_written", name=args.name, path=args.output, size=len(content))
    return 0


def cmd_magic(args: argparse.Namespace, config: Config) -> int:
    print(binary.MAGIC_STRING.decode("ascii"))
    print(f"# {len(binary.MAGIC_STRING)} bytes")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ipxedust",
        description="Embedded iPXE binaries with magic string patching",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Override IPXEDUST_LOG_LEVEL",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    p_list = sub.add_parser("list", help="List the embedded binaries")
    p_list.set_defaults(func=cmd_list)

    p_extract = sub.add_parser("extract", help="Write a binary, optionally patched")
    p_extract.add_argument("name", help="Binary name, e.g. ipxe.efi")
    p_extract.add_argument("-o", "--output", default="-", help="Output file (default: stdout)")
    group = p_extract.add_mutually_exclusive_group()
    group.add_argument("-p", "--patch", help="Text written over the magic string")
    group.add_argument("--patch-file", help="File whose bytes are written over the magic string")
    p_extract.set_defaults(func=cmd_extract)

    p_magic = sub.add_parser("magic", help="Print the magic string")
    p_magic.set_defaults(func=cmd_magic)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = Config.from_env()
    except ValueError as e:
        configure_logging()
        logger.error("configuration_error", error=str(e))
        return 1

    configure_logging(args.log_level or config.log_level, config.log_format)

    try:
        return args.func(args, config)
    except (binary.BinaryError, OSError) as e:
        logger.error("command_failed", command=args.command, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("interrupted")
        return 130


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
