"""
Single TCP connect probe, classified into open / closed / filtered.
"""

import errno
import logging
import socket

from .models import PortProbeOutcome, PortState
from .services import get_service_name

logger = logging.getLogger(__name__)

# errno values that mean the peer actively answered with a reset
_REFUSAL_ERRNOS = frozenset({errno.ECONNREFUSED, errno.ECONNRESET})


def classify_connect_error(error: OSError) -> PortState:
    """Maps a failed connect to CLOSED (active refusal) or FILTERED (anything else)."""
    if isinstance(error, (ConnectionRefusedError, ConnectionResetError)):
        return PortState.CLOSED
    if error.errno in _REFUSAL_ERRNOS:
        return PortState.CLOSED
    return PortState.FILTERED


def probe_port(ip: str, port: int, timeout: float) -> PortProbeOutcome:
    """
    Attempts a TCP connection to ip:port within `timeout` seconds.

    Never raises: every failure mode ends up in the outcome's state. An open
    connection is closed as soon as it is established; no data is exchanged.
    """
    try:
        with socket.create_connection((ip, port), timeout=timeout):
            state = PortState.OPEN
    except socket.timeout:
        state = PortState.FILTERED
    except OSError as e:
        state = classify_connect_error(e)

    logger.debug(f"Port {port} on {ip} is {state.value}")
    return PortProbeOutcome(port=port, state=state, service=get_service_name(port))
