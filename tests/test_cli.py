"""Tests for the command-line entry point."""

import json
from unittest.mock import patch

import pytest

from cli.__main__ import main
from coderlayout import CoderLayoutConfig
from tests.samples import FIVE_PANES, FIVE_PANES_THREE_EDITORS, FOUR_PANES, FOUR_PANES_ONE_EDITOR, SINGLE_PANE


@pytest.fixture(autouse=True)
def isolated_config(tmp_path):
    """Point the config file at an empty temporary directory."""
    with patch("coderlayout.config.get_config_dir", return_value=tmp_path / "coderlayout"):
        yield tmp_path / "coderlayout" / "config.json"


class TestMain:
    """Tests for main()."""

    def test_prints_layout(self, capsys):
        """Test the new layout goes to stdout."""
        assert main(["1", "--layout", FOUR_PANES]) == 0

        assert capsys.readouterr().out == FOUR_PANES_ONE_EDITOR + "\n"

    def test_editor_count(self, capsys):
        """Test the editor count argument."""
        assert main(["3", "-l", FIVE_PANES]) == 0

        assert capsys.readouterr().out.strip() == FIVE_PANES_THREE_EDITORS

    def test_single_pane(self, capsys):
        """Test a single pane layout is printed unchanged."""
        assert main(["2", "--layout", SINGLE_PANE + "\n"]) == 0

        assert capsys.readouterr().out.strip() == SINGLE_PANE

    def test_default_editor_count_from_config(self, capsys, monkeypatch):
        """Test the editor count falls back to configuration."""
        monkeypatch.setenv("CODERLAYOUT_EDITOR_COUNT", "3")

        assert main(["--layout", FIVE_PANES]) == 0

        assert capsys.readouterr().out.strip() == FIVE_PANES_THREE_EDITORS

    def test_json(self, capsys):
        """Test JSON output."""
        assert main(["1", "--layout", FOUR_PANES, "--json"]) == 0

        result = json.loads(capsys.readouterr().out)
        assert result["status"] == "calculated"
        assert result["layout"] == FOUR_PANES_ONE_EDITOR
        assert result["input"] == FOUR_PANES
        assert result["panes"] == {"editor": [0], "console": [1, 2, 3]}

    def test_apply(self, capsys):
        """Test --apply hands the layout to the provider."""
        with patch("coderlayout.providers.static.StaticProvider.apply_layout_string",
                   return_value=True) as mock_apply:
            assert main(["1", "--layout", FOUR_PANES, "--apply"]) == 0

        mock_apply.assert_called_once_with(FOUR_PANES_ONE_EDITOR)

    def test_parse_error(self, capsys):
        """Test malformed input fails with a message."""
        assert main(["1", "--layout", "abcd,80x24,0,0{"]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error: expected width at position 15" in captured.err

    def test_parse_error_json(self, capsys):
        """Test errors are reported as JSON with --json."""
        assert main(["1", "--layout", "nope", "--json"]) == 1

        assert json.loads(capsys.readouterr().out)["status"] == "error"

    def test_too_many_editors(self, capsys):
        """Test an editor count leaving no consoles fails."""
        assert main(["4", "--layout", FOUR_PANES]) == 1

        assert "editor count must be between 1 and 3" in capsys.readouterr().err

    def test_checksum_mismatch_warns(self, capsys, caplog):
        """Test a wrong input checksum is only a warning."""
        assert main(["1", "--layout", "ffff" + FOUR_PANES[4:]]) == 0

        assert capsys.readouterr().out.strip() == FOUR_PANES_ONE_EDITOR
        assert "checksum ffff" in caplog.text

    def test_reads_tmux(self, capsys):
        """Test the current tmux window is used without --layout."""
        with patch("coderlayout.providers.tmux.TmuxProvider.is_available", return_value=True), \
                patch("coderlayout.providers.tmux.TmuxProvider.fetch_current_layout_string",
                      return_value=FOUR_PANES + "\n"):
            assert main(["1"]) == 0

        assert capsys.readouterr().out.strip() == FOUR_PANES_ONE_EDITOR

    def test_not_in_tmux(self, capsys):
        """Test a helpful error outside tmux."""
        with patch("coderlayout.providers.tmux.TmuxProvider.is_available", return_value=False):
            assert main(["1"]) == 1

        assert "Not in a tmux session" in capsys.readouterr().err

    def test_init_config(self, capsys, isolated_config):
        """Test writing a default config file."""
        assert main(["--init-config"]) == 0
        assert isolated_config.exists()
        assert json.loads(isolated_config.read_text()) == CoderLayoutConfig().to_dict()

        assert main(["--init-config"]) == 0
        assert "already exists" in capsys.readouterr().out

    def test_tmux_binary_not_executable(self, capsys, isolated_config):
        """Test an unusable tmux binary gives an error, not a traceback."""
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text(json.dumps({"tmux": {"binary": "/etc/passwd"}}))

        with patch("subprocess.run", side_effect=PermissionError(13, "Permission denied")):
            assert main(["1"]) == 1

        assert "Not in a tmux session" in capsys.readouterr().err
