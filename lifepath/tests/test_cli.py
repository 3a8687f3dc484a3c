"""
Tests for the command-line interface.
"""

import pytest

from ..cli import main


class TestCli:
    def test_simulate(self, capsys):
        assert main(["simulate", "--runs", "5", "--seed", "1", "--strategy", "safe"]) == 0
        out = capsys.readouterr().out

        assert "Simulation summary" in out
        assert "Runs: 5" in out
        assert "Strategy: safe" in out

    def test_simulate_unknown_character(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["simulate", "--runs", "1", "--character", "wizard"])

        assert exc_info.value.code == 2
        assert "wizard" in capsys.readouterr().err

    def test_simulate_rejects_unknown_strategy(self):
        with pytest.raises(SystemExit):
            main(["simulate", "--strategy", "psychic"])

    def test_characters(self, capsys):
        assert main(["characters"]) == 0
        out = capsys.readouterr().out

        for character_id in ("urchin", "apprentice", "refugee", "farmer"):
            assert f"{character_id}:" in out

    def test_validate(self, capsys):
        assert main(["validate"]) == 0
        assert "Content is valid" in capsys.readouterr().out

    def test_no_command(self):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 1
