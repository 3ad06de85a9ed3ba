import pytest

ZELLER_ENV = (
    "ZELLER_ISO",
    "ZELLER_CALENDAR",
    "ZELLER_DAY_NAMES",
    "ZELLER_DAYFIRST",
    "ZELLER_LOGLEVEL",
    "ZELLER_LOGFILE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ZELLER_ENV:
        monkeypatch.delenv(name, raising=False)
