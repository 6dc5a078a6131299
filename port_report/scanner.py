from __future__ import annotations

import logging
import socket
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional

from .models import PortProbeResult, PortStatus
from .services import advice_for, classify

DEFAULT_TIMEOUT = 0.2

log = logging.getLogger(__name__)


def probe(host: str, port: int, timeout: float = DEFAULT_TIMEOUT) -> PortProbeResult:
    service = classify(port)
    try:
        # handshake only: nothing is sent or read
        with socket.create_connection((host, port), timeout=timeout):
            pass
    except (socket.timeout, ConnectionRefusedError, OSError, UnicodeError) as e:
        log.debug("%s:%d closed (%s)", host, port, e.__class__.__name__)
        return PortProbeResult(port=port, service=service, status=PortStatus.CLOSED)

    log.debug("%s:%d open", host, port)
    advice = advice_for(port)
    return PortProbeResult(
        port=port,
        service=service,
        status=PortStatus.OPEN,
        recommendation=advice.recommendation,
        example_command=advice.example_command,
    )


def scan(
    host: str,
    ports: Iterable[int],
    timeout: float = DEFAULT_TIMEOUT,
    workers: Optional[int] = None,
) -> List[PortProbeResult]:
    """
    One probe per port, each on its own worker (one thread per port unless
    `workers` caps it). Every probe gets its own future and the results are
    read back in request order once all of them have finished.
    """
    ports = list(ports)
    if not ports:
        return []
    if workers is not None and workers < 1:
        raise ValueError("workers must be >= 1")

    with ThreadPoolExecutor(max_workers=workers or len(ports)) as pool:
        futures = [pool.submit(probe, host, p, timeout) for p in ports]
        return [f.result() for f in futures]
