"""Static port number to service label table."""

from typing import Dict

UNKNOWN_SERVICE = "unknown"

COMMON_SERVICES: Dict[int, str] = {
    20: "FTP Data",
    21: "FTP Control",
    22: "SSH",
    23: "Telnet",
    25: "SMTP",
    53: "DNS",
    80: "HTTP",
    110: "POP3",
    143: "IMAP",
    443: "HTTPS",
    465: "SMTPS",
    587: "SMTP Submission",
    993: "IMAPS",
    995: "POP3S",
    1433: "MSSQL",
    3306: "MySQL",
    3389: "RDP",
    5432: "PostgreSQL",
    6379: "Redis",
    8080: "HTTP Alternate",
    8443: "HTTPS Alternate",
    9000: "Prometheus",
    9090: "Prometheus",
    9200: "Elasticsearch",
    9300: "Elasticsearch",
    27017: "MongoDB",
}


def get_service_name(port: int) -> str:
    """Returns the service label for a port, or 'unknown' if it is not mapped."""
    return COMMON_SERVICES.get(port, UNKNOWN_SERVICE)
