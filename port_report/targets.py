from __future__ import annotations

import ipaddress
import socket

LOCALHOST = "127.0.0.1"


def resolve_target(target: str) -> str:
    """
    Supports:
      - Single IP: "127.0.0.1"
      - Hostname: "localhost" (resolves to one IPv4 address)
    Networks (CIDR) are rejected; only one host is scanned per run.
    """
    target = target.strip()
    if not target:
        raise ValueError("Empty target")

    try:
        return str(ipaddress.ip_address(target))
    except ValueError:
        pass

    if "/" in target:
        raise ValueError(f"Network ranges are not supported: {target}")

    try:
        return socket.gethostbyname(target)
    except (socket.gaierror, UnicodeError) as e:
        raise ValueError(f"Could not resolve target '{target}': {e}") from e


def is_localhost(address: str) -> bool:
    try:
        return ipaddress.ip_address(address).is_loopback
    except ValueError:
        return False
