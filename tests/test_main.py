"""Tests for the example launcher."""

import pytest

import main
from solid import examples
import config


class TestMain:

    def test_runs_all_examples_by_default(self, capsys):
        assert main.main([]) == 0
        out = capsys.readouterr().out
        for name in config.EXAMPLE_ORDER:
            assert f"[{name.upper()}] {examples.TITLES[name]}" in out
        assert out.rstrip().endswith("[Main] Done.")

    def test_default_order(self, capsys):
        main.main([])
        out = capsys.readouterr().out
        positions = [out.index(f"[{name.upper()}]") for name in config.EXAMPLE_ORDER]
        assert positions == sorted(positions)

    def test_single_example(self, capsys):
        assert main.main(["lsp"]) == 0
        out = capsys.readouterr().out
        assert "Sparrow is flying" in out
        assert "Ostrich is running" in out
        assert "[DIP]" not in out

    def test_list(self, capsys):
        assert main.main(["--list"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert [line.split()[0] for line in lines] == config.EXAMPLE_ORDER

    def test_unknown_example_rejected(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main.main(["xyz"])
        assert exc_info.value.code == 2
        assert "unknown example" in capsys.readouterr().err

    def test_failing_example_returns_error_code(self, capsys, monkeypatch):
        def boom():
            raise RuntimeError("broken example")

        monkeypatch.setitem(examples.EXAMPLES, "dip", boom)
        assert main.main(["dip"]) == 1
        out = capsys.readouterr().out
        assert "[Main] Error: broken example" in out
        assert "[Main] Done." in out

    def test_interrupt_prints_notice_and_fails(self, capsys, monkeypatch):
        """An interrupted run prints a stop notice and does not report success."""
        def interrupt():
            raise KeyboardInterrupt

        monkeypatch.setitem(examples.EXAMPLES, "srp", interrupt)
        assert main.main(["srp", "dip"]) == 130
        out = capsys.readouterr().out
        assert "[Main] Stopped by user..." in out
        assert "[Main] Done." in out
        assert "[DIP]" not in out


class TestExamples:

    def test_ocp_output(self, capsys):
        examples.run_ocp()
        out = capsys.readouterr().out
        assert "Sending slack notification..." in out
        assert "Processing UPI payment of 500" in out

    def test_isp_reports_capabilities(self, capsys):
        examples.run_isp()
        out = capsys.readouterr().out
        assert "[ISP] SimplePrinter: print" in out
        assert "[ISP] AdvancedMachine: fax, print, scan" in out

    def test_run_example_unknown(self):
        with pytest.raises(KeyError):
            examples.run_example("nope")
