"""Port list parsing and validation."""

import logging
from typing import Iterable, List, Optional

logger = logging.getLogger(__name__)

MIN_PORT = 1
MAX_PORT = 65535

DEFAULT_PORTS = (21, 22, 23, 25, 53, 80, 110, 143, 443, 465, 587, 993, 995, 3306, 3389, 5432, 8080, 8443)


def is_valid_port(port: int) -> bool:
    return MIN_PORT <= port <= MAX_PORT


def filter_valid_ports(ports: Iterable[int]) -> List[int]:
    """
    Drops ports outside 1-65535 and repeated ports, keeping the order in which
    the remaining ports were supplied.
    """
    seen = set()
    valid: List[int] = []
    for port in ports:
        if not is_valid_port(port) or port in seen:
            continue
        seen.add(port)
        valid.append(port)
    return valid


def parse_port_list(ports_str: Optional[str]) -> List[int]:
    """
    Parses a port string such as "22,80,443" or "22,8000-8010".

    Entries that are not integers, reversed ranges and ports outside 1-65535
    are skipped rather than rejected; an empty or missing string yields [].
    """
    if not ports_str:
        return []

    ports: List[int] = []
    for part in ports_str.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            if "-" in part:
                start_s, end_s = part.split("-", 1)
                start, end = int(start_s), int(end_s)
                if start > end:
                    logger.warning(f"Ignoring reversed port range: {part}")
                    continue
                ports.extend(range(max(start, MIN_PORT), min(end, MAX_PORT) + 1))
            else:
                ports.append(int(part))
        except ValueError:
            logger.warning(f"Ignoring invalid port entry: {part!r}")

    return filter_valid_ports(ports)
