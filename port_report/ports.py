from __future__ import annotations

from typing import List

DEFAULT_PORTS: List[int] = [21, 22, 25, 80, 443, 3306]


def parse_ports(spec: str) -> List[int]:
    """
    Parses a comma-separated port list into a list of ports.
    Supports:
    - Single ports: "80"
    - Comma-separated: "22,80,443"
    Ranges are not accepted. Order is kept, duplicates are dropped.
    """
    spec = spec.strip()
    if not spec:
        raise ValueError("Empty port spec")

    ports: List[int] = []
    for part in spec.split(","):
        part = part.strip()
        if not part:
            continue
        if "-" in part:
            raise ValueError(f"Port ranges are not supported: {part}")
        try:
            p = int(part)
        except ValueError:
            raise ValueError(f"Invalid port: {part}") from None
        if p < 1 or p > 65535:
            raise ValueError(f"Invalid port: {p}")
        if p not in ports:
            ports.append(p)

    if not ports:
        raise ValueError("Empty port spec")
    return ports
