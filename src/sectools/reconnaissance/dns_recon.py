# -*- coding: utf-8 -*-
"""
dns_recon.py: DNS record enumeration for a single domain.

Queries the common record types and flattens the answers into a list of
records. This lookup is independent of the port scanner.

MITRE ATT&CK Mapping:
- T1590.002: Gather Victim Network Information: DNS
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from dns import exception, resolver

from .resolver import normalize_host

logger = logging.getLogger(__name__)

RECORD_TYPES = ["A", "AAAA", "CNAME", "MX", "TXT", "NS"]


@dataclass(frozen=True)
class DNSRecord:
    type: str
    name: str
    value: str
    ttl: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": self.type, "name": self.name, "value": self.value}
        if self.ttl:
            data["ttl"] = self.ttl
        return data


@dataclass
class DNSLookupResult:
    domain: str
    records: List[DNSRecord] = field(default_factory=list)
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"domain": self.domain, "records": [r.to_dict() for r in self.records]}
        if self.error:
            data["error"] = self.error
        return data


def normalize_domain(domain: str) -> str:
    domain = normalize_host(domain)
    if domain.startswith("www."):
        domain = domain[len("www."):]
    return domain


def _format_rdata(record_type: str, rdata) -> str:
    if record_type in ("A", "AAAA"):
        return rdata.address
    if record_type == "MX":
        return f"{str(rdata.exchange).rstrip('.')} (priority: {rdata.preference})"
    if record_type == "TXT":
        return b"".join(rdata.strings).decode("utf-8", "replace")
    # CNAME, NS
    return str(rdata.target).rstrip(".")


def lookup_dns(domain: str, dns_resolver: Optional[resolver.Resolver] = None) -> DNSLookupResult:
    """
    Collects A, AAAA, CNAME, MX, TXT and NS records for `domain`.

    A missing record type is not an error; a non-existent domain or a lookup
    that yields nothing at all is reported through the result's `error`.
    """
    result = DNSLookupResult(domain=domain)
    name = normalize_domain(domain)
    if not name:
        result.error = "Domain cannot be empty"
        return result

    dns_resolver = dns_resolver or resolver.Resolver()
    logger.info(f"Starting DNS lookup for domain: {name}")

    for record_type in RECORD_TYPES:
        try:
            answers = dns_resolver.resolve(name, record_type)
        except resolver.NXDOMAIN:
            logger.warning(f"Domain '{name}' does not exist.")
            result.records = []
            result.error = f"Domain '{name}' does not exist."
            return result
        except (resolver.NoAnswer, resolver.NoNameservers):
            continue
        except exception.DNSException as e:
            logger.error(f"Error querying {record_type} records for {name}: {e}")
            continue

        ttl = answers.rrset.ttl if answers.rrset is not None else None
        for rdata in answers:
            result.records.append(DNSRecord(type=record_type, name=name,
                                            value=_format_rdata(record_type, rdata), ttl=ttl))

    if not result.records:
        result.error = "No DNS records found or error occurred during lookup"

    logger.info(f"DNS lookup for {name} returned {len(result.records)} records")
    return result
