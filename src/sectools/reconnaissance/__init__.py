# -*- coding: utf-8 -*-
"""
The 'reconnaissance' package contains the information-gathering tools:
host resolution, TCP connect probing, the bounded-concurrency port scan
coordinator and the DNS record lookup.
"""

from .models import PortProbeOutcome, PortState, ResolvedHost, ScanReport, ScanRequest
from .tcp_connect_scan import PortScanCoordinator, scan_ports

__all__ = [
    "PortProbeOutcome",
    "PortScanCoordinator",
    "PortState",
    "ResolvedHost",
    "ScanReport",
    "ScanRequest",
    "scan_ports",
]
