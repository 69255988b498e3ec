"""Tests for the demo script."""

import pytest
import demo


class TestFormatting:
    """Tests for formatting helpers."""

    def test_format_count(self):
        assert demo.format_count(999) == "999"
        assert demo.format_count(1_500) == "1.5K"
        assert demo.format_count(2_000_000) == "2.0M"

    def test_format_time(self):
        assert demo.format_time(2.0) == "2.00s"
        assert demo.format_time(0.005) == "5.00ms"
        assert demo.format_time(0.000_002) == "2.0us"
        assert demo.format_time(0.000_000_05) == "50ns"


class TestDemo:
    """Smoke tests for demo output."""

    def test_permutation_demo(self, capsys):
        demo.run_permutation_demo(11, 0, 0)
        out = capsys.readouterr().out
        assert "PASS" in out
        assert "     0 ->      8" in out

    def test_benchmark(self, capsys):
        demo.run_benchmark(10)
        out = capsys.readouterr().out
        assert "uint64 (default params)" in out
        assert "ops/s" in out


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
