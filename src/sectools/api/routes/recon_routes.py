"""
Reconnaissance API Routes
"""

import asyncio
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel

from ... import config
from ...reconnaissance.dns_recon import lookup_dns
from ...reconnaissance.ports import parse_port_list
from ...reconnaissance.tcp_connect_scan import scan_ports
from ..security import verify_api_key

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["reconnaissance"],
    dependencies=[Depends(verify_api_key)],
)


class PortInfo(BaseModel):
    port: int
    state: str
    service: str


class PortScanResponse(BaseModel):
    host: str
    ip: str
    ports: List[PortInfo]
    duration: str
    error: Optional[str] = None


class DNSRecordInfo(BaseModel):
    type: str
    name: str
    value: str
    ttl: Optional[int] = None


class DNSLookupResponse(BaseModel):
    domain: str
    records: List[DNSRecordInfo]
    error: Optional[str] = None


def parse_timeout(timeout: Optional[str]) -> int:
    """Returns the requested timeout in seconds, or the default when it is missing or outside 1-SCAN_MAX_TIMEOUT."""
    if not timeout:
        return config.SCAN_DEFAULT_TIMEOUT
    try:
        seconds = int(timeout)
    except ValueError:
        logger.warning(f"Ignoring non-numeric timeout: {timeout!r}")
        return config.SCAN_DEFAULT_TIMEOUT
    if not 1 <= seconds <= config.SCAN_MAX_TIMEOUT:
        logger.warning(f"Ignoring out-of-range timeout: {seconds}")
        return config.SCAN_DEFAULT_TIMEOUT
    return seconds


@router.get("/port", response_model=PortScanResponse, response_model_exclude_none=True,
            summary="Scan TCP ports on a host")
async def port_scan(host: Optional[str] = Query(None, description="Hostname, IP address or URL to scan"),
                    ports: Optional[str] = Query(None, description="Comma-separated ports, e.g. 22,80,443"),
                    timeout: Optional[str] = Query(None, description="Per-port connect timeout in seconds (1-10)")):
    """
    Probes the requested ports (or the default set) and classifies each one
    as open, closed or filtered. Resolution failures are reported in `error`.
    """
    if not host:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing 'host' query param")

    port_list = parse_port_list(ports)
    timeout_s = parse_timeout(timeout)

    report = await asyncio.to_thread(scan_ports, host, port_list, timeout_s)
    return PortScanResponse(**report.to_dict())


@router.get("/dns", response_model=DNSLookupResponse, response_model_exclude_none=True,
            summary="Look up DNS records for a domain")
async def dns_lookup(domain: Optional[str] = Query(None, description="Domain name or URL")):
    """
    Returns the A, AAAA, CNAME, MX, TXT and NS records of a domain.
    """
    if not domain:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing 'domain' query param")

    result = await asyncio.to_thread(lookup_dns, domain)
    return DNSLookupResponse(**result.to_dict())
