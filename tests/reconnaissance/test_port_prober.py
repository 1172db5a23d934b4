import errno
import socket
import unittest
from unittest.mock import patch

from sectools.reconnaissance.models import PortState
from sectools.reconnaissance.port_prober import classify_connect_error, probe_port
from sectools.reconnaissance.services import get_service_name


class TestProbePortLoopback(unittest.TestCase):
    """Probes against real sockets bound to the loopback interface."""

    def test_listening_port_is_open(self):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server:
            server.bind(("127.0.0.1", 0))
            server.listen(1)
            port = server.getsockname()[1]

            outcome = probe_port("127.0.0.1", port, 1)

        self.assertEqual(outcome.port, port)
        self.assertEqual(outcome.state, PortState.OPEN)
        self.assertEqual(outcome.service, get_service_name(port))

    def test_bound_but_not_listening_port_is_closed(self):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as placeholder:
            placeholder.bind(("127.0.0.1", 0))
            port = placeholder.getsockname()[1]

            outcome = probe_port("127.0.0.1", port, 1)

        self.assertEqual(outcome.state, PortState.CLOSED)


class TestProbePortClassification(unittest.TestCase):

    @patch("socket.create_connection", side_effect=socket.timeout("timed out"))
    def test_timeout_is_filtered(self, _mock_connect):
        outcome = probe_port("192.0.2.1", 81, 2)
        self.assertEqual(outcome.state, PortState.FILTERED)
        self.assertEqual(outcome.service, "unknown")

    @patch("socket.create_connection", side_effect=ConnectionRefusedError(errno.ECONNREFUSED, "Connection refused"))
    def test_refusal_is_closed(self, _mock_connect):
        outcome = probe_port("192.0.2.1", 22, 2)
        self.assertEqual(outcome.state, PortState.CLOSED)
        self.assertEqual(outcome.service, "SSH")

    @patch("socket.create_connection", side_effect=OSError(errno.EHOSTUNREACH, "No route to host"))
    def test_no_route_is_filtered(self, _mock_connect):
        self.assertEqual(probe_port("192.0.2.1", 80, 2).state, PortState.FILTERED)

    @patch("socket.create_connection")
    def test_open_connection_is_closed_immediately(self, mock_connect):
        outcome = probe_port("192.0.2.1", 80, 2)

        self.assertEqual(outcome.state, PortState.OPEN)
        self.assertEqual(outcome.service, "HTTP")
        mock_connect.assert_called_once_with(("192.0.2.1", 80), timeout=2)
        mock_connect.return_value.__exit__.assert_called_once()

    def test_classify_connect_error(self):
        self.assertEqual(classify_connect_error(ConnectionResetError()), PortState.CLOSED)
        self.assertEqual(classify_connect_error(OSError(errno.ECONNREFUSED, "refused")), PortState.CLOSED)
        self.assertEqual(classify_connect_error(OSError(errno.ENETUNREACH, "unreachable")), PortState.FILTERED)
        self.assertEqual(classify_connect_error(OSError("no errno")), PortState.FILTERED)


if __name__ == "__main__":
    unittest.main()
