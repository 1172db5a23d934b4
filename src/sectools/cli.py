"""
Command line interface: `sectools scan <host>` and `sectools dns <domain>`.
"""

import argparse
import json
import logging
import sys

from rich.console import Console
from rich.table import Table

from . import config
from .reconnaissance.dns_recon import DNSLookupResult, lookup_dns
from .reconnaissance.models import PortState, ScanReport
from .reconnaissance.ports import parse_port_list
from .reconnaissance.tcp_connect_scan import scan_ports

logger = logging.getLogger(__name__)

SAFETY_WARNING = (
    "Only scan hosts you own or have explicit, written permission to test. "
    "Unauthorized scanning may be illegal."
)

_STATE_STYLES = {
    PortState.OPEN: "bold green",
    PortState.CLOSED: "red",
    PortState.FILTERED: "yellow",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sectools", description="TCP port scanner and DNS lookup tool.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    scan = subparsers.add_parser("scan", help="Scan TCP ports on a host.")
    scan.add_argument("target", help="The target hostname, IP address or URL.")
    scan.add_argument("-p", "--ports", default="",
                      help="Ports to scan, e.g. 22,80,443 or 1-1024 (default: common service ports).")
    scan.add_argument("-t", "--timeout", type=float, default=config.SCAN_DEFAULT_TIMEOUT,
                      help="Per-port connect timeout in seconds.")
    scan.add_argument("--open-only", action="store_true", help="Only display open ports.")
    scan.add_argument("--json", action="store_true", help="Print the report as JSON.")

    dns = subparsers.add_parser("dns", help="Look up DNS records for a domain.")
    dns.add_argument("domain", help="The domain name or URL.")
    dns.add_argument("--json", action="store_true", help="Print the result as JSON.")
    return parser


def render_scan_report(console: Console, report: ScanReport, open_only: bool = False) -> None:
    if report.error:
        console.print(f"[bold red]Error: {report.error}[/bold red]")
        return

    console.print(f"[bold green]Scan of {report.host} ({report.ip}) completed in {report.duration_text}.[/bold green]")
    console.print(f"[bold]Found {len(report.open_ports)} open ports out of {len(report.ports)} scanned.[/bold]")

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Port", justify="right")
    table.add_column("State")
    table.add_column("Service")
    for outcome in report.ports:
        if open_only and outcome.state is not PortState.OPEN:
            continue
        style = _STATE_STYLES[outcome.state]
        table.add_row(str(outcome.port), f"[{style}]{outcome.state.value}[/{style}]", outcome.service)
    console.print(table)


def render_dns_result(console: Console, result: DNSLookupResult) -> None:
    if result.error:
        console.print(f"[bold red]Error: {result.error}[/bold red]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Type", style="dim", width=6)
    table.add_column("Name")
    table.add_column("Value")
    table.add_column("TTL", justify="right")
    for record in result.records:
        table.add_row(record.type, record.name, record.value, str(record.ttl or ""))
    console.print(table)


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else config.LOG_LEVEL, format=config.LOG_FORMAT)
    console = Console()

    if args.command == "scan":
        if args.timeout <= 0:
            parser.error("--timeout must be greater than 0")
        ports = parse_port_list(args.ports)
        if args.ports and not ports:
            logger.warning(f"No valid ports in {args.ports!r}; scanning the default port set")

        if not args.json:
            console.print(f"[dim]{SAFETY_WARNING}[/dim]")
            console.print(f"[bold cyan]Scanning {args.target}...[/bold cyan]")
        report = scan_ports(args.target, ports, args.timeout)

        if args.json:
            print(json.dumps(report.to_dict(), indent=2))
        else:
            render_scan_report(console, report, open_only=args.open_only)
        return 1 if report.error else 0

    result = lookup_dns(args.domain)
    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        render_dns_result(console, result)
    return 1 if result.error else 0


if __name__ == "__main__":
    sys.exit(main())
