from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict


class PortStatus(str, Enum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"


@dataclass(frozen=True)
class PortProbeResult:
    port: int
    service: str
    status: PortStatus
    recommendation: str = ""
    example_command: str = ""

    def __post_init__(self) -> None:
        if not 1 <= self.port <= 65535:
            raise ValueError(f"Invalid port: {self.port}")
        # advice only ever accompanies an open port
        if self.status is PortStatus.CLOSED and (self.recommendation or self.example_command):
            raise ValueError(f"Closed port {self.port} cannot carry a recommendation")

    @property
    def is_open(self) -> bool:
        return self.status is PortStatus.OPEN

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["status"] = self.status.value
        return d
