"""Tests for result reporting"""

import io
import re
import threading

from tcpsweep.models import ProbeResult
from tcpsweep.output import Reporter, format_elapsed, format_row
from tcpsweep.services import PORT_DESCRIPTIONS, describe_port


ROW = re.compile(r"^\s*(\d+) +(\S+) +(.*)$")


def test_format_row_is_fixed_width():
    row = format_row(ProbeResult("10.0.0.1", 22, True, "ssh"))
    assert row == f"{22:>9} {'10.0.0.1':>10} {'ssh':>45}"
    assert len(row) == 9 + 1 + 10 + 1 + 45


def test_format_elapsed():
    assert format_elapsed(1.23456) == "completed in 1.2346s"


def test_describe_port():
    assert describe_port(22) == "(ssh) Secure Shell (SSH) service"
    assert describe_port(80).startswith("(http)")
    assert describe_port(65000) == ""


def test_descriptions_are_single_line():
    assert all("\n" not in d for d in PORT_DESCRIPTIONS.values())


def test_unreachable_results_are_not_printed():
    out = io.StringIO()
    reporter = Reporter(stream=out)
    assert not reporter.report(ProbeResult("10.0.0.1", 22, False))
    assert out.getvalue() == ""
    assert reporter.reported == 0


def test_reachable_result_gets_description():
    out = io.StringIO()
    reporter = Reporter(stream=out)
    assert reporter.report(ProbeResult("10.0.0.1", 22, True))
    line = out.getvalue()
    assert line.endswith("\n")
    assert "(ssh) Secure Shell (SSH) service" in line
    assert reporter.reported == 1


def test_unregistered_port_has_blank_description():
    out = io.StringIO()
    Reporter(stream=out).report(ProbeResult("10.0.0.1", 65000, True))
    assert out.getvalue().rstrip() == f"{65000:>9} {'10.0.0.1':>10}"


def test_concurrent_reports_do_not_interleave():
    out = io.StringIO()
    reporter = Reporter(stream=out, lookup=lambda p: "x" * 40)
    barrier = threading.Barrier(16)

    def worker(n):
        barrier.wait()
        for i in range(50):
            reporter.report(ProbeResult(f"10.0.{n}.{i}", 1000 + i, True))

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    lines = out.getvalue().splitlines()
    assert len(lines) == 16 * 50 == reporter.reported
    for line in lines:
        m = ROW.match(line)
        assert m, line
        assert m.group(3) == "x" * 40


def test_finish_writes_elapsed_line():
    out = io.StringIO()
    Reporter(stream=out).finish(0.5)
    assert out.getvalue() == "completed in 0.5000s\n"
