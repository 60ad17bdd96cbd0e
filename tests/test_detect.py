"""
Tests for terminal color support detection.
"""
import pytest

from huecode.detect import (
    FALLBACK_RULE,
    RULES,
    DetectionContext,
    ci_rule,
    detect,
    explain,
    force_color_floor,
    teamcity_rule,
    term_basic_rule,
    term_program_rule,
    windows_build_rule,
)
from huecode.platform_info import PlatformVersion
from huecode.tiers import SupportTier


def _detect(**env):
    return detect(env, on_windows=False)


class TestForceColorFloor:
    """FORCE_COLOR only raises the fallback floor."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("", 0), ("0", 0), ("1", 1), ("2", 2), ("3", 3), ("7", 3), ("-2", 0),
            ("yes", 1), ("true", 1), ("0x2", 1), ("1.5", 1), (" 2 ", 2),
        ],
    )
    def test_floor_values(self, value, expected):
        assert force_color_floor({"FORCE_COLOR": value}) == expected

    def test_unset(self):
        assert force_color_floor({}) == 0

    def test_floor_used_when_nothing_matches(self):
        assert _detect(FORCE_COLOR="2") == SupportTier.EXTENDED

    def test_floor_does_not_cap_detection(self):
        assert _detect(FORCE_COLOR="1", COLORTERM="truecolor") == SupportTier.TRUECOLOR

    def test_floor_applies_to_dumb_terminal(self):
        assert _detect(FORCE_COLOR="2", TERM="dumb") == SupportTier.EXTENDED


class TestNoColor:
    """NO_COLOR disables everything."""

    def test_no_color_wins(self):
        assert _detect(NO_COLOR="1", COLORTERM="truecolor", TERM="xterm-256color") == 0

    def test_no_color_beats_force_color(self):
        assert _detect(NO_COLOR="1", FORCE_COLOR="3") == 0

    def test_no_color_beats_ci(self):
        assert _detect(NO_COLOR="x", CI="true", GITHUB_ACTIONS="true") == 0

    def test_empty_no_color_is_ignored(self):
        assert _detect(NO_COLOR="", COLORTERM="truecolor") == 3

    def test_explain_names_rule(self):
        result = explain({"NO_COLOR": "1"}, on_windows=False)
        assert result.tier == SupportTier.NONE
        assert result.rule == "no_color"


class TestBuildAgents:
    def test_azure_pipelines(self):
        assert _detect(TF_BUILD="True", AGENT_NAME="Hosted Agent", COLORTERM="truecolor") == 1

    def test_azure_needs_both_markers(self):
        assert _detect(TF_BUILD="True", COLORTERM="truecolor") == 3

    def test_github_actions(self):
        assert _detect(CI="true", GITHUB_ACTIONS="true") == 3

    def test_gitea_actions(self):
        assert _detect(CI="true", GITEA_ACTIONS="true") == 3

    @pytest.mark.parametrize(
        "marker", ["TRAVIS", "CIRCLECI", "APPVEYOR", "GITLAB_CI", "BUILDKITE", "DRONE"]
    )
    def test_basic_ci_vendors(self, marker):
        assert _detect(CI="true", **{marker: "true"}) == 1

    def test_codeship(self):
        assert _detect(CI="true", CI_NAME="codeship") == 1

    def test_unknown_ci_falls_through(self):
        assert _detect(CI="true", TERM="xterm-256color") == 2

    def test_vendor_without_ci_marker_is_ignored(self):
        assert ci_rule(DetectionContext(env={"GITHUB_ACTIONS": "true"})) is None

    def test_ci_marker_counts_when_empty(self):
        assert _detect(CI="", GITHUB_ACTIONS="") == 3


class TestTeamCity:
    @pytest.mark.parametrize(
        "version,expected",
        [
            ("9.1.7", 1),
            ("9.01.2", 1),
            ("9.0.5", 0),
            ("8.1.0", 0),
            ("10.0.3", 1),
            ("2023.05.1 (build 129203)", 1),
            ("", 0),
            ("garbage", 0),
        ],
    )
    def test_versions(self, version, expected):
        ctx = DetectionContext(env={"TEAMCITY_VERSION": version})
        assert teamcity_rule(ctx) == expected

    def test_ignores_floor(self):
        assert _detect(TEAMCITY_VERSION="8.0.0", FORCE_COLOR="3") == 0

    def test_absent(self):
        assert teamcity_rule(DetectionContext(env={})) is None


class TestTerminalIdentification:
    def test_colorterm_truecolor(self):
        assert _detect(COLORTERM="truecolor") == 3

    def test_kitty(self):
        assert _detect(TERM="xterm-kitty") == 3

    @pytest.mark.parametrize(
        "version,expected", [("3.4.19", 3), ("3", 3), ("2.9.2", 2), ("", 2), ("beta", 2)]
    )
    def test_iterm(self, version, expected):
        ctx = DetectionContext(
            env={"TERM_PROGRAM": "iTerm.app", "TERM_PROGRAM_VERSION": version}
        )
        assert term_program_rule(ctx) == expected

    def test_iterm_without_version(self):
        assert _detect(TERM_PROGRAM="iTerm.app") == 2

    def test_apple_terminal(self):
        assert _detect(TERM_PROGRAM="Apple_Terminal", TERM_PROGRAM_VERSION="453") == 2

    def test_other_program_falls_through(self):
        assert _detect(TERM_PROGRAM="vscode", TERM="xterm-256color") == 2

    @pytest.mark.parametrize("term", ["xterm-256color", "screen-256color", "putty-256"])
    def test_256_suffix(self, term):
        assert _detect(TERM=term) == 2

    @pytest.mark.parametrize(
        "term",
        ["xterm", "screen", "screen.xterm-new", "vt100", "vt220", "rxvt-unicode", "linux",
         "cygwin", "ansi", "konsole-color"],
    )
    def test_basic_terms(self, term):
        assert term_basic_rule(DetectionContext(env={"TERM": term})) == 1

    def test_unknown_term(self):
        assert _detect(TERM="wyse50") == 0

    def test_colorterm_any_value(self):
        assert _detect(COLORTERM="yes") == 1

    def test_empty_colorterm(self):
        assert _detect(COLORTERM="") == 0

    def test_dumb_terminal(self):
        assert _detect(TERM="dumb", COLORTERM="truecolor") == 0

    def test_empty_environment(self):
        result = explain({}, on_windows=False)
        assert result == (SupportTier.NONE, FALLBACK_RULE)


class TestWindows:
    def _ctx(self, version):
        return DetectionContext(env={}, on_windows=True, platform_version=version)

    def test_truecolor_build(self):
        assert windows_build_rule(self._ctx(PlatformVersion(10, 0, 19045))) == 3

    def test_256_build(self):
        assert windows_build_rule(self._ctx(PlatformVersion(10, 0, 14393))) == 2

    def test_threshold_build_is_excluded(self):
        assert windows_build_rule(self._ctx(PlatformVersion(10, 0, 10586))) is None

    def test_old_windows(self):
        assert windows_build_rule(self._ctx(PlatformVersion(6, 3, 9600))) is None

    def test_unknown_version_skips_rule(self):
        assert windows_build_rule(self._ctx(None)) is None

    def test_not_windows(self):
        ctx = DetectionContext(env={}, on_windows=False, platform_version=PlatformVersion(10, 0, 19045))
        assert windows_build_rule(ctx) is None

    def test_detect_on_windows(self):
        tier = detect({}, platform_version=PlatformVersion(10, 0, 22631), on_windows=True)
        assert tier == SupportTier.TRUECOLOR

    def test_dumb_term_checked_before_windows(self):
        tier = detect({"TERM": "dumb"}, platform_version=PlatformVersion(10, 0, 22631), on_windows=True)
        assert tier == SupportTier.NONE


class TestDetect:
    def test_rule_order(self):
        names = [name for name, _ in RULES]
        assert names[0] == "no_color"
        assert names.index("ci") < names.index("teamcity") < names.index("colorterm_truecolor")
        assert names[-1] == "colorterm_any"

    def test_deterministic(self):
        env = {"TERM": "xterm-256color", "COLORTERM": "truecolor"}
        assert detect(env, on_windows=False) == detect(env, on_windows=False)

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("COLORTERM", "truecolor")
        monkeypatch.setattr("huecode.detect.is_windows", lambda: False)
        assert detect() == SupportTier.TRUECOLOR

    def test_returns_support_tier(self):
        assert isinstance(_detect(TERM="xterm"), SupportTier)
