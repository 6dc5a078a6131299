import pytest

from port_report.ports import DEFAULT_PORTS, parse_ports
from port_report.targets import is_localhost, resolve_target


class TestParsePorts:
    def test_defaults(self):
        assert DEFAULT_PORTS == [21, 22, 25, 80, 443, 3306]

    def test_single(self):
        assert parse_ports("80") == [80]

    def test_keeps_order_and_drops_duplicates(self):
        assert parse_ports(" 443, 22 ,443,,80") == [443, 22, 80]

    @pytest.mark.parametrize("spec", ["", "  ", ",", "0", "65536", "http", "1-1024"])
    def test_invalid(self, spec):
        with pytest.raises(ValueError):
            parse_ports(spec)


class TestResolveTarget:
    def test_ip_literal(self):
        assert resolve_target(" 127.0.0.1 ") == "127.0.0.1"

    def test_hostname(self, mocker):
        mocker.patch("socket.gethostbyname", return_value="127.0.0.1")
        assert resolve_target("localhost") == "127.0.0.1"

    def test_unresolvable(self, mocker):
        import socket

        mocker.patch("socket.gethostbyname", side_effect=socket.gaierror("nope"))
        with pytest.raises(ValueError):
            resolve_target("no-such-host.invalid")

    def test_unencodable_hostname(self, mocker):
        mocker.patch("socket.gethostbyname", side_effect=UnicodeError("label too long"))
        with pytest.raises(ValueError, match="Could not resolve"):
            resolve_target("a" * 64 + ".example")

    @pytest.mark.parametrize("target", ["", "10.0.0.0/24"])
    def test_rejected(self, target):
        with pytest.raises(ValueError):
            resolve_target(target)

    def test_is_localhost(self):
        assert is_localhost("127.0.0.1")
        assert is_localhost("::1")
        assert not is_localhost("192.168.1.10")
        assert not is_localhost("example.com")
