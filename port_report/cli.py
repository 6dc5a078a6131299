from __future__ import annotations

import argparse

from .config import DEFAULT_HOST, DEFAULT_REPORT, ScanConfig
from .logger import create_logger, log_event
from .output import print_results, save_report
from .scanner import DEFAULT_TIMEOUT
from .sources import MissingFixtureError, build_source
from .targets import is_localhost


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Localhost port check with an HTML security report")
    p.add_argument("--target", default=DEFAULT_HOST, help=f"IP or hostname (default: {DEFAULT_HOST})")
    p.add_argument("--ports", help="Comma-separated ports (default: 21,22,25,80,443,3306)")
    p.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT,
                   help=f"Connect timeout seconds (default: {DEFAULT_TIMEOUT})")
    p.add_argument("--workers", type=int, help="Thread cap (default: one thread per port)")
    p.add_argument("--demo", action="store_true", help="Use canned demo results instead of scanning")
    p.add_argument("--out", default=DEFAULT_REPORT, help=f"Report path (default: {DEFAULT_REPORT})")
    p.add_argument("--log-file", help="Also write JSON event log to this file")
    p.add_argument("-v", "--verbose", action="store_true", help="Log every probe")
    return p


def disclaimer(host: str) -> str:
    if is_localhost(host):
        return f"Note: only localhost ({host}) was scanned."
    return f"Note: only {host} was scanned. Scan hosts you are authorized to test."


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = ScanConfig.from_args(args)
    except ValueError as e:
        parser.error(str(e))

    logger = create_logger(verbose=args.verbose, log_path=args.log_file)
    log_event(logger, "scan_start", {
        "host": config.host,
        "ports": list(config.ports),
        "mode": config.mode,
        "timeout_s": config.timeout,
    })

    try:
        results = build_source(config).results(config.ports)
    except MissingFixtureError as e:
        parser.error(f"no demo data for port {e.args[0]}")

    log_event(logger, "scan_complete", {
        "host": config.host,
        "open": [r.port for r in results if r.is_open],
        "closed": [r.port for r in results if not r.is_open],
    })

    print_results(results)
    path = save_report(config.host, results, config.out_path)
    log_event(logger, "report_written", {"path": path})

    print(f"Report saved to {path}")
    print(disclaimer(config.host))
    return 0
