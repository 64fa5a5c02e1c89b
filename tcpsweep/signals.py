from __future__ import annotations

import os
import signal
import sys

INTERRUPT_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def handle_interrupt(signum, frame) -> None:
    """
    Reports the signal and ends the process on the spot. In-flight probes
    are abandoned; their sockets are released by the OS on exit.
    """
    sys.stderr.write(f"\n{signal.Signals(signum).name} received.\n")
    sys.stderr.flush()
    os._exit(1)


def install_interrupt_handler() -> None:
    for sig in INTERRUPT_SIGNALS:
        signal.signal(sig, handle_interrupt)
