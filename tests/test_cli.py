"""
Tests for the huecode command-line interface.
"""
from unittest.mock import patch

import pytest
import yaml

from huecode.cli import _insert_default_command, main
from huecode.styler import default_styler
from huecode.tiers import SupportTier

ESC = "\x1b"


class TestDefaultCommand:
    def test_text_becomes_both(self):
        assert _insert_default_command(["hello", "red"]) == ["both", "hello", "red"]

    def test_after_global_options(self):
        argv = ["--level", "1", "--no-color", "hi"]
        assert _insert_default_command(argv) == ["--level", "1", "--no-color", "both", "hi"]

    def test_known_command_untouched(self):
        assert _insert_default_command(["--level", "3", "detect"]) == ["--level", "3", "detect"]

    def test_help_untouched(self):
        assert _insert_default_command(["-h"]) == ["-h"]

    def test_double_dash(self):
        assert _insert_default_command(["--", "-x"]) == ["both", "-x"]


class TestMain:
    def test_no_arguments_prints_help(self, capsys):
        assert main([]) == 1
        assert "usage: huecode" in capsys.readouterr().out

    def test_help_exits_zero(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    @pytest.mark.parametrize("command", ["both", "format", "apply", "detect", "attributes", "config"])
    def test_subcommand_help(self, command):
        with pytest.raises(SystemExit) as exc_info:
            main([command, "--help"])
        assert exc_info.value.code == 0

    def test_no_color_help_is_plain(self, capsys, monkeypatch):
        monkeypatch.setenv("COLORTERM", "truecolor")
        with pytest.raises(SystemExit):
            main(["--no-color", "--help"])
        out = capsys.readouterr().out
        assert "ATTRIBUTES:" in out
        assert ESC not in out

    def test_help_colored_at_forced_level(self, capsys):
        with pytest.raises(SystemExit):
            main(["--level", "1", "--help"])
        assert f"{ESC}[1m{ESC}[33mATTRIBUTES:{ESC}[m" in capsys.readouterr().out

    def test_config_file_applies_to_subcommand_help(self, capsys, monkeypatch, tmp_path):
        monkeypatch.setenv("COLORTERM", "truecolor")
        (tmp_path / "huecode.yml").write_text("color_mode: never\n", encoding="utf-8")
        with pytest.raises(SystemExit):
            main(["config", "--help"])
        assert ESC not in capsys.readouterr().out

    def test_subcommand_level_is_not_global(self, tmp_path):
        path = tmp_path / "c.yml"
        assert main(["--level", "3", "config", "init", str(path), "--level", "0"]) == 0
        assert default_styler.level == SupportTier.TRUECOLOR

    def test_invalid_level(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["--level", "5", "detect"])
        assert exc_info.value.code == 2


class TestRenderCommands:
    def test_apply(self, capsys):
        assert main(["--level", "1", "apply", "hi", "red"]) == 0
        assert capsys.readouterr().out == f"{ESC}[31mhi{ESC}[m\n"

    def test_apply_leaves_placeholders(self, capsys):
        assert main(["--level", "1", "apply", "%{bold}x"]) == 0
        assert capsys.readouterr().out == f"%{{bold}}x{ESC}[m\n"

    def test_format(self, capsys):
        assert main(["--level", "1", "format", "%{green}ok%{reset}"]) == 0
        assert capsys.readouterr().out == f"{ESC}[32mok{ESC}[0m{ESC}[m\n"

    def test_default_mode_is_both(self, capsys):
        assert main(["--level", "3", "%{bold}a", "hex:#ff0000"]) == 0
        out = capsys.readouterr().out
        assert out == f"{ESC}[38;2;255;0;0m{ESC}[1ma{ESC}[m{ESC}[m\n"

    def test_no_color(self, capsys):
        assert main(["--no-color", "format", "%{red}plain"]) == 0
        assert capsys.readouterr().out == f"plain{ESC}[m\n"

    def test_no_color_beats_level(self, capsys):
        assert main(["--level", "3", "--no-color", "apply", "x", "bold"]) == 0
        assert capsys.readouterr().out == f"x{ESC}[m\n"

    def test_detected_tier_used_without_flags(self, capsys, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        assert main(["apply", "x", "bold"]) == 0
        assert capsys.readouterr().out == f"x{ESC}[m\n"


class TestDetectCommand:
    def test_detect(self, capsys, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        assert main(["detect"]) == 0
        assert capsys.readouterr().out.strip() == "0"

    def test_detect_reports_override(self, capsys):
        assert main(["--level", "2", "detect"]) == 0
        assert capsys.readouterr().out.strip() == "2"

    def test_explain(self, capsys, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        assert main(["--level", "3", "detect", "--explain"]) == 0
        out = capsys.readouterr().out
        assert "detected: 0 (none)" in out
        assert "rule:     no_color" in out
        assert "in effect: 3 (truecolor, overridden)" in out

    def test_attributes(self, capsys):
        assert main(["--no-color", "attributes"]) == 0
        out = capsys.readouterr().out
        assert ESC + "[" not in out.replace(ESC + "[m", "")
        assert "bg-bright-white" in out
        assert "hex:#ff8800" in out
        assert "truecolor" in out


class TestConfigCommand:
    def test_show_defaults(self, capsys):
        assert main(["config", "show"]) == 0
        out = capsys.readouterr().out
        assert "color_mode: auto" in out
        assert "No config file found" in out

    def test_bare_config_shows(self, capsys):
        assert main(["config"]) == 0
        assert "Current huecode configuration" in capsys.readouterr().out

    def test_init(self, capsys, tmp_path):
        path = tmp_path / "conf" / "huecode.yml"
        assert main(["config", "init", str(path), "--color-mode", "never", "--level", "1"]) == 0
        assert yaml.safe_load(path.read_text(encoding="utf-8"))["color_mode"] == "never"

    def test_init_refuses_overwrite(self, capsys, tmp_path):
        path = tmp_path / "huecode.yml"
        path.write_text("level: 1\n", encoding="utf-8")
        assert main(["config", "init", str(path)]) == 1
        assert "already exists" in capsys.readouterr().err

    def test_config_file_sets_tier(self, capsys, tmp_path):
        path = tmp_path / "c.yml"
        path.write_text("color_mode: never\n", encoding="utf-8")
        assert main(["--config", str(path), "apply", "x", "red"]) == 0
        assert capsys.readouterr().out == f"x{ESC}[m\n"
        assert default_styler.level == SupportTier.NONE

    def test_flag_beats_config_file(self, capsys, tmp_path):
        path = tmp_path / "c.yml"
        path.write_text("level: 0\n", encoding="utf-8")
        assert main(["--config", str(path), "--level", "1", "apply", "x", "red"]) == 0
        assert capsys.readouterr().out == f"{ESC}[31mx{ESC}[m\n"

    def test_discovered_file_with_method_keys(self, capsys, tmp_path):
        (tmp_path / "huecode.yml").write_text("save: yes\nvalidate: no\n", encoding="utf-8")
        assert main(["--level", "0", "format", "x"]) == 0
        assert capsys.readouterr().out == f"x{ESC}[m\n"

    def test_missing_config_file_is_an_error(self, capsys, tmp_path):
        assert main(["--config", str(tmp_path / "missing.yml"), "detect"]) == 1
        assert "Config file not found" in capsys.readouterr().err


class TestWindowsHook:
    def test_vt_enabled_on_windows(self, capsys):
        with patch("huecode.cli.is_windows", return_value=True), patch(
            "huecode.cli.windows_enable_vt", return_value=(True, "winapi method")
        ) as mock_enable:
            assert main(["--level", "1", "apply", "x"]) == 0
        mock_enable.assert_called_once_with(skip_registry=True)

    def test_vt_not_touched_without_color(self, capsys):
        with patch("huecode.cli.is_windows", return_value=True), patch(
            "huecode.cli.windows_enable_vt"
        ) as mock_enable:
            assert main(["--no-color", "apply", "x"]) == 0
        mock_enable.assert_not_called()
