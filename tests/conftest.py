import pytest

from LanzouPy.config import Settings


@pytest.fixture
def settings(monkeypatch):
    for name in ("LANZOU_BASE_URL", "LANZOU_USER_AGENT", "LANZOU_TIMEOUT",
                 "LANZOU_CHALLENGE_RETRIES", "LANZOU_STRICT_TOKEN"):
        monkeypatch.delenv(name, raising=False)
    return Settings()
