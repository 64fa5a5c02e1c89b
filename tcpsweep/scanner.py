from __future__ import annotations

import logging
import socket
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterator, Optional, Tuple

from .logger import LOGGER_NAME
from .models import AddressRange, PortRange, ProbeResult, ScanConfig
from .output import Reporter
from .targets import iter_addresses

Probe = Callable[[str, int, float], ProbeResult]


def probe(address: str, port: int, timeout_s: float) -> ProbeResult:
    """
    One TCP connect attempt, closed right away with nothing sent.

    Only the first resolved address is tried. Refused, timed out and
    unresolvable all come back as unreachable; a closed port cannot be
    told apart from a filtered one.
    """
    sock: Optional[socket.socket] = None
    try:
        family, socktype, proto, _, sockaddr = socket.getaddrinfo(
            address, port, 0, socket.SOCK_STREAM
        )[0]
        sock = socket.socket(family, socktype, proto)
        sock.settimeout(timeout_s)
        sock.connect(sockaddr)
        return ProbeResult(address=address, port=port, reachable=True)
    except (OSError, ValueError, OverflowError):
        return ProbeResult(address=address, port=port, reachable=False)
    finally:
        if sock:
            sock.close()


def iter_jobs(addresses: AddressRange, ports: PortRange) -> Iterator[Tuple[str, int]]:
    for a in iter_addresses(addresses):
        for p in ports:
            yield (a, p)


class ScanSession:
    """
    Owns everything shared by the probes of one scan: the limiter that
    caps how many probes run at once and the reporter that serializes
    their output.
    """

    def __init__(
        self,
        config: ScanConfig,
        reporter: Optional[Reporter] = None,
        probe: Probe = probe,
        logger: Optional[logging.Logger] = None,
    ):
        self.config = config
        self.reporter = reporter if reporter is not None else Reporter()
        self.probe = probe
        self.logger = logger or logging.getLogger(LOGGER_NAME)
        self.limiter = threading.BoundedSemaphore(config.threads)
        self._in_flight = 0
        self._count_lock = threading.Lock()
        self.started_at: Optional[float] = None

    @property
    def in_flight(self) -> int:
        with self._count_lock:
            return self._in_flight

    def _run_probe(self, address: str, port: int) -> None:
        try:
            self.reporter.report(self.probe(address, port, self.config.timeout))
        except Exception as e:
            self.logger.error(f"[!] {address}:{port} not reported: {e!r}")
        finally:
            with self._count_lock:
                self._in_flight -= 1
            self.limiter.release()

    def run(self) -> int:
        """
        Dispatches one probe per (address, port), addresses then ports in
        ascending order, and blocks until every probe has finished.
        Returns the number of reachable ports.
        """
        cfg = self.config
        self.logger.debug(
            f"[*] Addresses: {cfg.addresses.start}-{cfg.addresses.end} | "
            f"Ports: {cfg.ports.start}-{cfg.ports.end} | "
            f"Threads: {cfg.threads} | Timeout: {cfg.timeout}s"
        )
        self.started_at = time.perf_counter()
        current = None

        # Leaving the block joins every submitted probe, including on error
        with ThreadPoolExecutor(max_workers=cfg.threads) as pool:
            for address, port in iter_jobs(cfg.addresses, cfg.ports):
                if address != current:
                    current = address
                    self.logger.debug(f"[*] Scanning {address}")
                # Blocks dispatch while all slots are taken
                self.limiter.acquire()
                with self._count_lock:
                    self._in_flight += 1
                pool.submit(self._run_probe, address, port)

        self.reporter.finish(time.perf_counter() - self.started_at)
        return self.reporter.reported


def scan(
    addresses: AddressRange,
    ports: PortRange,
    threads: int = 100,
    timeout_s: float = 3.0,
    reporter: Optional[Reporter] = None,
) -> int:
    config = ScanConfig(addresses=addresses, ports=ports, threads=threads, timeout=timeout_s)
    return ScanSession(config, reporter=reporter).run()
