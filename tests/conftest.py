import os

import pytest


@pytest.fixture(autouse=True)
def clean_dps_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove any DPS_* variables inherited from the host environment."""
    for key in list(os.environ):
        if key.upper().startswith("DPS_"):
            monkeypatch.delenv(key, raising=False)
