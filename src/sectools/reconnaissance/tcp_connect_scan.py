# -*- coding: utf-8 -*-
"""
tcp_connect_scan.py: bounded-concurrency TCP connect scanner.

A scan resolves the target once, then starts one worker thread per port.
A semaphore caps how many probes are in flight at the same time; a thread
that cannot get a slot waits for one, so every port is eventually probed.
Outcomes are collected under a lock and sorted by port once all workers
have joined.

MITRE ATT&CK Mapping:
- T1046: Network Service Discovery
"""

import logging
import threading
import time
from typing import Callable, List, Optional, Sequence

from .. import config
from .errors import HostUnresolvable, InvalidInput, ReconError
from .models import PortProbeOutcome, PortState, ResolvedHost, ScanReport, ScanRequest
from .port_prober import probe_port
from .ports import DEFAULT_PORTS, filter_valid_ports
from .resolver import resolve_host
from .services import get_service_name

logger = logging.getLogger(__name__)

Resolver = Callable[[str], ResolvedHost]
Prober = Callable[[str, int, float], PortProbeOutcome]


class PortScanCoordinator:
    """Runs one scan per call to scan(); holds no state between scans."""

    def __init__(self,
                 max_concurrency: Optional[int] = None,
                 max_ports: Optional[int] = None,
                 resolver: Resolver = resolve_host,
                 prober: Prober = probe_port):
        """
        Args:
            max_concurrency: Ceiling on simultaneously in-flight probes.
            max_ports: Longest effective port list; extra ports are dropped.
            resolver: Resolves the host string to a ResolvedHost.
            prober: Probes one (ip, port, timeout) and returns its outcome.
        """
        self.max_concurrency = max_concurrency or config.SCAN_MAX_CONCURRENCY
        self.max_ports = max_ports or config.SCAN_MAX_PORTS
        self.resolver = resolver
        self.prober = prober

    def effective_ports(self, ports: Sequence[int]) -> List[int]:
        """Range-filtered ports (or the default set), capped and sorted ascending."""
        effective = filter_valid_ports(ports)
        if not effective:
            effective = list(DEFAULT_PORTS)
        if len(effective) > self.max_ports:
            logger.warning(f"Port list truncated from {len(effective)} to {self.max_ports} entries")
            effective = effective[:self.max_ports]
        return sorted(effective)

    def scan(self, request: ScanRequest) -> ScanReport:
        """
        Scans request.ports on request.host. Always returns a report; failures
        are reported through ScanReport.error, never raised.
        """
        start_time = time.perf_counter()
        report = ScanReport(host=request.host)

        try:
            if not request.host:
                raise InvalidInput("Host cannot be empty")
            resolved = self.resolver(request.host)
        except ReconError as e:
            report.error = str(e)
            report.duration = time.perf_counter() - start_time
            if isinstance(e, HostUnresolvable):
                logger.warning(f"Scan aborted: {e}")
            return report

        report.ip = resolved.ip
        ports = self.effective_ports(request.ports)
        logger.info(f"Starting TCP connect scan on {request.host} ({resolved.ip}) for {len(ports)} ports")

        report.ports = self._probe_all(resolved.ip, ports, request.timeout)
        report.ports.sort(key=lambda outcome: outcome.port)
        report.duration = time.perf_counter() - start_time

        logger.info(f"Scan of {request.host} completed in {report.duration_text}: "
                    f"{len(report.open_ports)}/{len(report.ports)} ports open")
        return report

    def _probe_all(self, ip: str, ports: List[int], timeout: float) -> List[PortProbeOutcome]:
        slots = threading.BoundedSemaphore(self.max_concurrency)
        results_lock = threading.Lock()
        results: List[PortProbeOutcome] = []

        def worker(port: int):
            try:
                try:
                    outcome = self.prober(ip, port, timeout)
                except Exception:
                    logger.exception(f"Probe of port {port} on {ip} failed unexpectedly")
                    outcome = PortProbeOutcome(port=port, state=PortState.FILTERED,
                                               service=get_service_name(port))
                with results_lock:
                    results.append(outcome)
            finally:
                slots.release()

        threads = []
        for index, port in enumerate(ports):
            slots.acquire()
            thread = threading.Thread(target=worker, args=(port,), name=f"probe-{port}", daemon=True)
            try:
                thread.start()
            except RuntimeError as e:
                slots.release()
                undispatched = ports[index:]
                logger.error(f"Could not start probe thread for port {port}: {e}. "
                             f"Marking {len(undispatched)} undispatched ports as filtered")
                with results_lock:
                    results.extend(PortProbeOutcome(port=p, state=PortState.FILTERED,
                                                    service=get_service_name(p)) for p in undispatched)
                break
            threads.append(thread)

        for thread in threads:
            thread.join()
        return results


def scan_ports(host: str, ports: Sequence[int], timeout: float) -> ScanReport:
    """Scans `ports` on `host`; an empty port list scans the default set."""
    return PortScanCoordinator().scan(ScanRequest(host=host, ports=tuple(ports), timeout=timeout))
