from __future__ import annotations

import argparse
import math
import re

from .errors import RangeValidationError, ScanError
from .logger import create_logger
from .models import ScanConfig
from .ports import parse_ports
from .scanner import ScanSession
from .signals import install_interrupt_handler
from .targets import parse_target

DEFAULT_THREADS = 100
DEFAULT_TIMEOUT = 3.0

_UNITS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}
_DURATION_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|ms|s|m|h)")


def parse_duration(value: str) -> float:
    """
    Parses a duration into seconds.
    Supports:
    - Bare numbers, in seconds: "5", "0.5"
    - Unit suffixes: "300ms", "0.5s", "2m"
    - Compound forms: "1m30s"
    """
    text = value.strip()
    try:
        seconds = float(text)
    except ValueError:
        pos = 0
        seconds = 0.0
        for m in _DURATION_PART.finditer(text):
            if m.start() != pos:
                break
            seconds += float(m.group(1)) * _UNITS[m.group(2)]
            pos = m.end()
        if not text or pos != len(text):
            raise RangeValidationError(f"Invalid duration: {value!r} (examples: 300ms, 0.5s, 5)")
    if not math.isfinite(seconds) or seconds <= 0:
        raise RangeValidationError(f"Timeout must be positive: {value!r}")
    return seconds


def _duration(value: str) -> float:
    try:
        return parse_duration(value)
    except RangeValidationError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="tcpsweep",
        description="TCP connect scanner for IPv4 address and port ranges",
        epilog="Example: tcpsweep 192.168.0.1:192.168.1.255 10:10000 -w 200 -t 300ms",
    )
    p.add_argument(
        "target",
        help="<IP>[:<IP>] - IPv4, IPv6 or host name; ranges are IPv4 only",
    )
    p.add_argument(
        "ports",
        nargs="?",
        help="<port>[:<port>] (default 1:65535)",
    )
    p.add_argument(
        "-w", "--threads",
        type=int,
        default=DEFAULT_THREADS,
        help=f"Concurrent probes (default: {DEFAULT_THREADS})",
    )
    p.add_argument(
        "-t", "--timeout",
        type=_duration,
        default=DEFAULT_TIMEOUT,
        help="Connect timeout, e.g. 300ms, 0.5s, 5 (default: 3s)",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Log scan progress to stderr")
    return p


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logger = create_logger(verbose=args.verbose)

    try:
        config = ScanConfig(
            addresses=parse_target(args.target),
            ports=parse_ports(args.ports),
            threads=args.threads,
            timeout=args.timeout,
        )
    except ScanError as e:
        logger.error(str(e))
        raise SystemExit(1) from e

    install_interrupt_handler()

    try:
        ScanSession(config, logger=logger).run()
    except ScanError as e:
        logger.error(str(e))
        raise SystemExit(1) from e

    return 0
