import pytest

MODEGATE_ENV_VARS = [
    "MODEGATE_MODE",
    "MODEGATE_STATUS_PAGE_URL",
    "MODEGATE_RETRY_AFTER_SECONDS",
    "MODEGATE_STRICT_STARTUP",
    "MODEGATE_VERSION",
    "MODEGATE_ENV",
]


@pytest.fixture(autouse=True)
def _clean_modegate_env(monkeypatch):
    for name in MODEGATE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
