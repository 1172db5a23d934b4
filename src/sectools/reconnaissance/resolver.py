"""Host normalization and forward resolution for a single scan."""

import logging
import socket
from typing import List

from .errors import HostUnresolvable
from .models import ResolvedHost

logger = logging.getLogger(__name__)

_SCHEME_PREFIXES = ("http://", "https://")


def normalize_host(host_input: str) -> str:
    """
    Turns user input such as 'https://example.com/login' into 'example.com'.

    'http://' is stripped first, then 'https://', then everything from the
    first '/' onward.
    """
    host = host_input
    for prefix in _SCHEME_PREFIXES:
        if host.startswith(prefix):
            host = host[len(prefix):]
    return host.split("/", 1)[0]


def _lookup_addresses(host: str) -> List[str]:
    infos = socket.getaddrinfo(host, None, proto=socket.IPPROTO_TCP)
    addresses: List[str] = []
    ipv4: List[str] = []
    for family, _type, _proto, _canon, sockaddr in infos:
        address = sockaddr[0]
        if address in addresses:
            continue
        addresses.append(address)
        if family == socket.AF_INET:
            ipv4.append(address)
    # IPv4 first, otherwise keep the resolver's ordering
    return ipv4 + [a for a in addresses if a not in ipv4]


def resolve_host(host_input: str) -> ResolvedHost:
    """
    Resolves a host string to one IP address.

    Raises HostUnresolvable carrying the normalized host when resolution fails
    or yields no addresses. There is no retry.
    """
    host = normalize_host(host_input)
    if not host:
        raise HostUnresolvable(host)

    try:
        addresses = _lookup_addresses(host)
    except (ValueError, OSError) as e:
        logger.warning(f"Could not resolve {host}: {e}")
        raise HostUnresolvable(host) from e

    if not addresses:
        logger.warning(f"Resolution of {host} returned no addresses")
        raise HostUnresolvable(host)

    logger.debug(f"Resolved {host} -> {addresses[0]} (candidates: {addresses})")
    return ResolvedHost(original_host=host_input, ip=addresses[0])
