from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .ports import DEFAULT_PORTS, parse_ports
from .scanner import DEFAULT_TIMEOUT
from .targets import LOCALHOST, resolve_target

DEFAULT_HOST = LOCALHOST
DEFAULT_REPORT = "PortScanReport.html"
MODES = ("live", "demo")


@dataclass(frozen=True)
class ScanConfig:
    host: str = DEFAULT_HOST
    ports: Tuple[int, ...] = field(default_factory=lambda: tuple(DEFAULT_PORTS))
    timeout: float = DEFAULT_TIMEOUT
    workers: Optional[int] = None
    mode: str = "live"
    out_path: str = DEFAULT_REPORT

    def __post_init__(self) -> None:
        if self.mode not in MODES:
            raise ValueError(f"Unsupported mode: {self.mode}")
        if self.timeout <= 0:
            raise ValueError("timeout must be > 0")
        if self.workers is not None and self.workers < 1:
            raise ValueError("workers must be >= 1")

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "ScanConfig":
        ports: List[int] = parse_ports(args.ports) if args.ports else list(DEFAULT_PORTS)
        return cls(
            host=resolve_target(args.target),
            ports=tuple(ports),
            timeout=args.timeout,
            workers=args.workers,
            mode="demo" if args.demo else "live",
            out_path=args.out,
        )
