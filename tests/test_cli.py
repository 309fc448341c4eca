"""Tests for the netrange command-line tool"""
import pytest
from click.testing import CliRunner

from netrange import __version__
from netrange.cli import main


@pytest.fixture
def runner():
    return CliRunner()


class TestInfo:
    """netrange info"""

    def test_ipv4(self, runner):
        result = runner.invoke(main, ["info", "192.168.1.0/24"])

        assert result.exit_code == 0
        assert "192.168.1.255" in result.output
        assert "192.168.1.254" in result.output
        assert "255.255.255.0" in result.output
        assert "Private" in result.output

    def test_ipv6(self, runner):
        result = runner.invoke(main, ["info", "fe80::/10"])

        assert result.exit_code == 0
        assert "IPv6" in result.output
        assert "Link-Local" in result.output

    def test_invalid(self, runner):
        result = runner.invoke(main, ["info", "10.0.0.0/40"])

        assert result.exit_code == 1
        assert "Error:" in result.output


class TestContainsAndOverlap:
    """netrange contains / overlap / relation"""

    def test_contains_yes(self, runner):
        result = runner.invoke(main, ["contains", "10.0.0.0/8", "10.1.2.3"])

        assert result.exit_code == 0
        assert "Yes" in result.output

    def test_contains_other_family(self, runner):
        result = runner.invoke(main, ["contains", "10.0.0.0/8", "2001:db8::1"])

        assert result.exit_code == 0
        assert "No" in result.output

    def test_contains_bad_address(self, runner):
        result = runner.invoke(main, ["contains", "10.0.0.0/8", "10.0.0.300"])

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_overlap(self, runner):
        result = runner.invoke(main, ["overlap", "10.0.0.0/16", "10.0.255.0/24"])

        assert result.exit_code == 0
        assert "Yes" in result.output

    def test_no_overlap(self, runner):
        result = runner.invoke(main, ["overlap", "10.0.0.0/16", "172.16.0.0/16"])

        assert result.exit_code == 0
        assert "do not overlap" in result.output

    def test_relation(self, runner):
        result = runner.invoke(main, ["relation", "10.0.10.0/24", "10.0.0.0/16"])

        assert result.exit_code == 0
        assert "after" in result.output

    def test_relation_mixed_families(self, runner):
        result = runner.invoke(main, ["relation", "10.0.0.0/8", "::/0"])

        assert result.exit_code == 1
        assert "Error:" in result.output


class TestSplitAndSupernet:
    """netrange split / supernet"""

    def test_split(self, runner):
        result = runner.invoke(main, ["split", "192.168.1.0/24", "26"])

        assert result.exit_code == 0
        for cidr in ("192.168.1.0/26", "192.168.1.64/26", "192.168.1.128/26", "192.168.1.192/26"):
            assert cidr in result.output
        assert "Total subnets: 4" in result.output

    def test_split_accepts_slash_prefix(self, runner):
        result = runner.invoke(main, ["split", "10.0.0.0/8", "/16", "--limit", "2"])

        assert result.exit_code == 0
        assert "10.0.0.0/16" in result.output
        assert "10.1.0.0/16" in result.output
        assert "10.2.0.0/16" not in result.output
        assert "254 more" in result.output

    def test_split_limit_from_config(self, runner, default_config):
        default_config.max_display = 3

        result = runner.invoke(main, ["split", "10.0.0.0/24", "28"])

        assert result.exit_code == 0
        assert "10.0.0.32/28" in result.output
        assert "10.0.0.48/28" not in result.output
        assert "13 more" in result.output

    def test_split_refuses_huge_ipv6_split(self, runner):
        result = runner.invoke(main, ["split", "2001:db8::/32", "96"])

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_split_bad_prefix_text(self, runner):
        result = runner.invoke(main, ["split", "10.0.0.0/8", "abc"])

        assert result.exit_code == 2

    def test_supernet(self, runner):
        result = runner.invoke(main, ["supernet", "192.168.1.0/24", "16"])

        assert result.exit_code == 0
        assert result.output.strip() == "192.168.0.0/16"

    def test_supernet_wrong_direction(self, runner):
        result = runner.invoke(main, ["supernet", "192.168.1.0/24", "25"])

        assert result.exit_code == 1


class TestSortAndValidate:
    """netrange sort / validate"""

    def test_sort(self, runner):
        result = runner.invoke(
            main, ["sort", "192.168.1.128/25", "2001:db8::/32", "10.0.0.0/8", "192.168.1.0/24", "10.0.0.0/16"]
        )

        assert result.exit_code == 0
        assert result.output.split() == [
            "10.0.0.0/8",
            "10.0.0.0/16",
            "192.168.1.0/24",
            "192.168.1.128/25",
            "2001:db8::/32",
        ]

    def test_sort_invalid(self, runner):
        result = runner.invoke(main, ["sort", "10.0.0.0/8", "bogus"])

        assert result.exit_code == 1

    def test_validate_all_valid(self, runner):
        text = "# prefixes\n10.0.0.0/8\n\n2001:db8::/32\n"

        result = runner.invoke(main, ["validate"], input=text)

        assert result.exit_code == 0
        assert "2 valid" in result.output
        assert "0 invalid" in result.output

    def test_validate_reports_invalid_lines(self, runner):
        text = "10.0.0.0/8\n10.0.0.0/33\nnot-a-cidr\n"

        result = runner.invoke(main, ["validate"], input=text)

        assert result.exit_code == 1
        assert "not-a-cidr" in result.output
        assert "10.0.0.0/33" in result.output
        assert "1 valid" in result.output
        assert "2 invalid" in result.output

    def test_validate_file(self, runner, tmp_path):
        path = tmp_path / "ranges.txt"
        path.write_text("192.168.0.0/16\nfe80::/10\n")

        result = runner.invoke(main, ["validate", str(path)])

        assert result.exit_code == 0
        assert "2 valid" in result.output

    def test_validate_oversized_prefix(self, runner):
        text = "10.0.0.0/8\n10.0.0.0/" + "9" * 5000 + "\n"

        result = runner.invoke(main, ["validate"], input=text)

        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "1 valid" in result.output
        assert "1 invalid" in result.output


class TestMisc:
    """demo, version, logging options"""

    def test_demo(self, runner):
        result = runner.invoke(main, ["demo"])

        assert result.exit_code == 0
        assert "172.16.10.192/26" in result.output
        assert "10.0.0.0/8, 10.0.0.0/16, 192.168.1.0/24, 192.168.1.128/25" in result.output

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_log_file(self, runner, tmp_path):
        log_path = tmp_path / "logs" / "netrange.log"

        result = runner.invoke(main, ["--log-file", str(log_path), "supernet", "10.0.0.0/8", "4"])

        assert result.exit_code == 0
        assert log_path.exists()
