"""
Pytest configuration and fixtures for glyphstyle tests.
"""

import pytest

from glyphstyle.config import ENV_CONFIG, ENV_DEFAULT_STYLE, ENV_LOG_LEVEL


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run from an empty directory with no GLYPHSTYLE_* variables set.

    Variables are set then deleted so that anything load_dotenv() writes
    during the test is rolled back afterwards.
    """
    for name in (ENV_CONFIG, ENV_DEFAULT_STYLE, ENV_LOG_LEVEL):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return tmp_path
