from __future__ import annotations

import re
from typing import Optional

from .errors import RangeValidationError
from .models import PortRange

MIN_PORT = 1
MAX_PORT = 65535

_PORT_SPEC = re.compile(r"^(-?\d+)?\s*(?:([:-])\s*(-?\d+)?)?$")


def validate_ports(start: int, end: int) -> PortRange:
    if end < start:
        raise RangeValidationError("Port end must be greater than port start")
    if not (MIN_PORT <= start <= MAX_PORT and MIN_PORT <= end <= MAX_PORT):
        raise RangeValidationError(f"Port range must be between {MIN_PORT} and {MAX_PORT}")
    return PortRange(start, end)


def parse_ports(spec: Optional[str] = None) -> PortRange:
    """
    Parses a port specification string into a validated range.
    Supports:
    - Nothing: full range 1:65535
    - Single port: "80"
    - Ranges: "1:1024" or "1-1024"
    - Open ranges: "80:" (up to 65535), ":1024" (from 1)

    A start that is missing or below 1 is raised to 1; an end that is
    missing, below 1 or above 65535 is lowered to 65535.
    """
    if spec is None or not spec.strip():
        return PortRange(MIN_PORT, MAX_PORT)

    m = _PORT_SPEC.match(spec.strip())
    if not m:
        raise RangeValidationError(f"Invalid port spec: {spec}")
    start_s, separator, end_s = m.groups()

    start = int(start_s) if start_s else MIN_PORT
    if separator:
        end = int(end_s) if end_s else MAX_PORT
    else:
        end = start

    if start < MIN_PORT:
        start = MIN_PORT
    if end < MIN_PORT or end > MAX_PORT:
        end = MAX_PORT
    return validate_ports(start, end)
