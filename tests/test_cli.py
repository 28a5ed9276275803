"""Tests for the headless command line entry point."""

import logging

import pytest

from virus_sim.__main__ import main


class TestMain:
    """Tests for `python -m virus_sim`."""

    def test_runs_and_reports(self, caplog):
        """A short run logs a summary and exits cleanly."""
        caplog.set_level(logging.INFO, logger="virus_sim")

        code = main(["--duration", "5", "--agents", "8", "--infected", "2",
                     "--max-ticks", "3", "--fast", "--seed", "1"])

        assert code == 0
        assert "Done after 3 ticks" in caplog.text
        assert "infected=" in caplog.text

    def test_invalid_configuration_exits_with_usage_error(self, capsys):
        """Configuration errors go through argparse (exit status 2)."""
        with pytest.raises(SystemExit) as info:
            main(["--agents", "2", "--infected", "5"])

        assert info.value.code == 2
        assert "num_infected" in capsys.readouterr().err
