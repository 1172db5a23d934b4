from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

DEFAULT_TIMEOUT_SECONDS = 2.0


class PortState(str, Enum):
    OPEN = "open"
    CLOSED = "closed"
    FILTERED = "filtered"


@dataclass(frozen=True)
class ScanRequest:
    host: str
    ports: Sequence[int] = ()
    timeout: float = DEFAULT_TIMEOUT_SECONDS


@dataclass(frozen=True)
class ResolvedHost:
    original_host: str
    ip: str


@dataclass(frozen=True)
class PortProbeOutcome:
    port: int
    state: PortState
    service: str

    def to_dict(self) -> Dict[str, Any]:
        return {"port": self.port, "state": self.state.value, "service": self.service}


def format_duration(seconds: float) -> str:
    """
    Renders an elapsed time compactly: '480ns', '12.5µs', '850.2ms', '2.013s', '1m4.5s'.
    """
    if seconds < 0:
        seconds = 0.0
    if seconds < 1e-6:
        return f"{seconds * 1e9:.0f}ns"
    if seconds < 1e-3:
        return f"{_trim(seconds * 1e6, 1)}µs"
    if seconds < 1:
        return f"{_trim(seconds * 1e3, 1)}ms"
    if seconds < 60:
        return f"{_trim(seconds, 3)}s"
    minutes, rest = divmod(seconds, 60)
    return f"{int(minutes)}m{_trim(rest, 3)}s"


def _trim(value: float, digits: int) -> str:
    text = f"{value:.{digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


@dataclass
class ScanReport:
    """
    Result of one scan. ``ports`` is sorted ascending by port number before the
    report leaves the coordinator; ``duration`` is wall-clock seconds.
    """

    host: str
    ip: str = ""
    ports: List[PortProbeOutcome] = field(default_factory=list)
    duration: float = 0.0
    error: Optional[str] = None

    @property
    def duration_text(self) -> str:
        return format_duration(self.duration)

    @property
    def open_ports(self) -> List[PortProbeOutcome]:
        return [p for p in self.ports if p.state is PortState.OPEN]

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "host": self.host,
            "ip": self.ip,
            "ports": [p.to_dict() for p in self.ports],
            "duration": self.duration_text,
        }
        if self.error:
            data["error"] = self.error
        return data
