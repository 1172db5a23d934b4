import pytest

from sectools.reconnaissance.ports import DEFAULT_PORTS, filter_valid_ports, parse_port_list


def test_default_ports_has_eighteen_sorted_entries():
    assert len(DEFAULT_PORTS) == 18
    assert list(DEFAULT_PORTS) == sorted(DEFAULT_PORTS)


def test_filter_drops_out_of_range_and_keeps_order():
    assert filter_valid_ports([443, 0, 22, 65536, 80, -1, 65535]) == [443, 22, 80, 65535]


def test_filter_removes_duplicates():
    assert filter_valid_ports([80, 22, 80, 22]) == [80, 22]


@pytest.mark.parametrize("ports_str, expected", [
    ("80,81", [80, 81]),
    (" 22 , 443 ", [22, 443]),
    ("8000-8003", [8000, 8001, 8002, 8003]),
    ("22,8000-8001,22", [22, 8000, 8001]),
    ("0,80,65536", [80]),
    ("abc,80,,x-y", [80]),
    ("90-80", []),
    ("65534-70000", [65534, 65535]),
    ("", []),
    (None, []),
])
def test_parse_port_list(ports_str, expected):
    assert parse_port_list(ports_str) == expected
