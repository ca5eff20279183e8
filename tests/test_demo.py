"""
Tests for the demo script.

Run with: pytest tests/test_demo.py -v
"""

import pytest

import demo


class TestDrawStructure:
    """Test the text rendering of structures."""

    def test_row_cells_are_joined(self, limited_partnership):
        lines = demo.draw_structure(limited_partnership.structure, indent=0)

        assert lines == [
            "1+ <management> [■ unlimited] | 1+ <shareholder> [□ limited]",
            "Capital <capital>",
        ]


class TestMain:
    """Test the demo entry point."""

    def test_default_run(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.argv", ["demo.py", "--env-file", "missing.env"])

        demo.main()

        out = capsys.readouterr().out
        assert "Partnerships" in out
        assert "Mixed Forms Builder" in out
        assert "GmbH & Co. KG" in out

    def test_query_without_matches(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.argv", ["demo.py", "--query", "zzz", "--env-file", "missing.env"])

        demo.main()

        assert "(no matches)" in capsys.readouterr().out

    def test_unknown_company_exits(self, monkeypatch):
        monkeypatch.setattr("sys.argv", ["demo.py", "--base", "plc", "--env-file", "missing.env"])

        with pytest.raises(SystemExit) as exc_info:
            demo.main()

        assert exc_info.value.code == 1
