"""
Where scan results come from.

A source is anything with ``results(ports)`` returning one PortProbeResult per
requested port. ``LiveSource`` probes the network; ``FixtureSource`` replays a
fixed dataset so the report can be demonstrated without touching any socket.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Protocol

from .config import ScanConfig
from .models import PortProbeResult, PortStatus
from .scanner import DEFAULT_TIMEOUT, scan
from .services import advice_for, classify


class ResultSource(Protocol):
    def results(self, ports: Iterable[int]) -> List[PortProbeResult]:
        ...


class MissingFixtureError(KeyError):
    pass


class LiveSource:
    def __init__(self, host: str, timeout: float = DEFAULT_TIMEOUT, workers: Optional[int] = None):
        self.host = host
        self.timeout = timeout
        self.workers = workers

    def results(self, ports: Iterable[int]) -> List[PortProbeResult]:
        return scan(self.host, ports, timeout=self.timeout, workers=self.workers)


class FixtureSource:
    def __init__(self, fixture: Iterable[PortProbeResult]):
        self._by_port: Dict[int, PortProbeResult] = {r.port: r for r in fixture}

    def results(self, ports: Iterable[int]) -> List[PortProbeResult]:
        out = []
        for p in ports:
            if p not in self._by_port:
                raise MissingFixtureError(p)
            out.append(self._by_port[p])
        return out


def _canned(port: int, is_open: bool) -> PortProbeResult:
    if not is_open:
        return PortProbeResult(port=port, service=classify(port), status=PortStatus.CLOSED)
    advice = advice_for(port)
    return PortProbeResult(
        port=port,
        service=classify(port),
        status=PortStatus.OPEN,
        recommendation=advice.recommendation,
        example_command=advice.example_command,
    )


DEMO_RESULTS = (
    _canned(22, True),
    _canned(80, True),
    _canned(443, True),
    _canned(21, False),
    _canned(25, False),
    _canned(3306, False),
)


def build_source(config: ScanConfig) -> ResultSource:
    if config.mode == "live":
        return LiveSource(config.host, timeout=config.timeout, workers=config.workers)
    if config.mode == "demo":
        return FixtureSource(DEMO_RESULTS)
    raise ValueError(f"Unsupported mode: {config.mode}")
