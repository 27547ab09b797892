from __future__ import annotations

import pytest

from natalwheel.config.settings import default_settings

from tests.helpers import make_chart, sample_payload


@pytest.fixture
def chart():
    return make_chart()


@pytest.fixture
def payload():
    return sample_payload()


@pytest.fixture
def settings():
    return default_settings()


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep settings reads and writes inside the test's temporary directory."""

    home = tmp_path / "natalwheel-home"
    monkeypatch.setenv("NATALWHEEL_HOME", str(home))
    return home
