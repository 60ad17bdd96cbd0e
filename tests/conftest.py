import pytest

from huecode.constants import (
    AZURE_PIPELINES_MARKERS,
    BASIC_CI_MARKERS,
    ENV_ANSICON,
    ENV_CI,
    ENV_CI_NAME,
    ENV_COLORTERM,
    ENV_CONFIG_COLOR,
    ENV_CONFIG_LEVEL,
    ENV_CONFIG_LOG_LEVEL,
    ENV_CONFIG_PATH,
    ENV_FORCE_COLOR,
    ENV_NO_COLOR,
    ENV_TEAMCITY_VERSION,
    ENV_TERM,
    ENV_TERM_PROGRAM,
    ENV_TERM_PROGRAM_VERSION,
    TRUECOLOR_CI_MARKERS,
)
from huecode.logging_config import HuecodeLogger
from huecode.styler import Styler, default_styler

DETECTION_VARS = (
    ENV_FORCE_COLOR,
    ENV_NO_COLOR,
    ENV_TERM,
    ENV_COLORTERM,
    ENV_TERM_PROGRAM,
    ENV_TERM_PROGRAM_VERSION,
    ENV_CI,
    ENV_CI_NAME,
    ENV_TEAMCITY_VERSION,
    ENV_ANSICON,
    *AZURE_PIPELINES_MARKERS,
    *TRUECOLOR_CI_MARKERS,
    *BASIC_CI_MARKERS,
)

CONFIG_VARS = (ENV_CONFIG_PATH, ENV_CONFIG_LEVEL, ENV_CONFIG_COLOR, ENV_CONFIG_LOG_LEVEL)


@pytest.fixture(autouse=True)
def clean_color_env(monkeypatch, tmp_path):
    # deterministic: no color variables from the machine running the tests
    for name in DETECTION_VARS + CONFIG_VARS:
        monkeypatch.delenv(name, raising=False)
    # keep config discovery away from the developer's own files
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    default_styler.reset_level()
    yield
    default_styler.reset_level()
    HuecodeLogger.set_level("WARNING")


@pytest.fixture
def styler_at():
    def _make(level: int) -> Styler:
        return Styler(level=level)

    return _make
