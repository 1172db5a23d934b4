import pytest

from sectools.reconnaissance.models import PortProbeOutcome, PortState, ScanReport, format_duration


@pytest.mark.parametrize("seconds, expected", [
    (0.0, "0ns"),
    (0.000015, "15µs"),
    (0.8502, "850.2ms"),
    (2.0134, "2.013s"),
    (64.5, "1m4.5s"),
])
def test_format_duration(seconds, expected):
    assert format_duration(seconds) == expected


def test_report_to_dict_omits_empty_error():
    report = ScanReport(
        host="example.com",
        ip="93.184.216.34",
        ports=[PortProbeOutcome(80, PortState.OPEN, "HTTP")],
        duration=1.5,
    )
    assert report.to_dict() == {
        "host": "example.com",
        "ip": "93.184.216.34",
        "ports": [{"port": 80, "state": "open", "service": "HTTP"}],
        "duration": "1.5s",
    }


def test_report_to_dict_includes_error():
    report = ScanReport(host="", error="Host cannot be empty")
    data = report.to_dict()
    assert data["error"] == "Host cannot be empty"
    assert data["ports"] == []


def test_open_ports_filters_by_state():
    report = ScanReport(host="h", ports=[
        PortProbeOutcome(22, PortState.CLOSED, "SSH"),
        PortProbeOutcome(80, PortState.OPEN, "HTTP"),
        PortProbeOutcome(81, PortState.FILTERED, "unknown"),
    ])
    assert [p.port for p in report.open_ports] == [80]


def test_package_public_surface():
    from sectools import reconnaissance

    assert sorted(reconnaissance.__all__) == [
        "PortProbeOutcome", "PortScanCoordinator", "PortState",
        "ResolvedHost", "ScanReport", "ScanRequest", "scan_ports",
    ]
    assert all(hasattr(reconnaissance, name) for name in reconnaissance.__all__)
