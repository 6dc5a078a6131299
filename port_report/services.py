"""
Static service classification and hardening advice.

Both tables are keyed by port number and are read-only once the module is
imported. Ports missing from a table fall back to an explicit default.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, NamedTuple

UNKNOWN_SERVICE = "Unknown"


class Advice(NamedTuple):
    recommendation: str
    example_command: str


SERVICES: Mapping[int, str] = MappingProxyType({
    21: "FTP",
    22: "SSH",
    25: "SMTP",
    80: "HTTP",
    443: "HTTPS",
    3306: "MySQL",
})

_WEB = Advice(
    "Keep web server updated and monitor traffic.",
    "sudo apt update && sudo apt upgrade",
)

ADVICE: Mapping[int, Advice] = MappingProxyType({
    21: Advice("Secure FTP access or disable if unused.", "sudo ufw deny 21"),
    22: Advice(
        "Restrict SSH access to trusted IPs.",
        "sudo ufw allow from <trusted_IP> to any port 22",
    ),
    25: Advice("Monitor SMTP traffic for spam or abuse.", "sudo ufw deny 25"),
    80: _WEB,
    443: _WEB,
    3306: Advice(
        "Restrict database access to local only.",
        "sudo ufw allow from 127.0.0.1 to any port 3306",
    ),
})

DEFAULT_ADVICE = Advice("Monitor service regularly.", "")


def classify(port: int) -> str:
    return SERVICES.get(port, UNKNOWN_SERVICE)


def advice_for(port: int) -> Advice:
    return ADVICE.get(port, DEFAULT_ADVICE)
