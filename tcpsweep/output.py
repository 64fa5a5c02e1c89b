from __future__ import annotations

import sys
import threading
from typing import Callable, Optional, TextIO

from .models import ProbeResult
from .services import describe_port


def format_row(r: ProbeResult) -> str:
    return f"{r.port:>9} {r.address:>10} {r.service or '':>45}"


def format_elapsed(elapsed_s: float) -> str:
    return f"completed in {elapsed_s:.4f}s"


class Reporter:
    """
    Writes one line per reachable port. Each line is written whole under
    the reporter's lock; the order of lines between probes is whatever
    order the probes finish in.
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        lookup: Callable[[int], str] = describe_port,
    ):
        self.stream = stream if stream is not None else sys.stdout
        self.lookup = lookup
        self.lock = threading.Lock()
        self.reported = 0

    def _write(self, line: str, count: bool = False) -> None:
        with self.lock:
            self.stream.write(line + "\n")
            self.stream.flush()
            if count:
                self.reported += 1

    def report(self, r: ProbeResult) -> bool:
        if not r.reachable:
            return False
        if r.service is None:
            r = ProbeResult(r.address, r.port, True, self.lookup(r.port))
        self._write(format_row(r), count=True)
        return True

    def finish(self, elapsed_s: float) -> None:
        self._write(format_elapsed(elapsed_s))
