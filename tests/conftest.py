import hashlib

import pytest

from passcheck.exceptions import NetworkError


def sha1_upper(pwd: str) -> str:
    return hashlib.sha1(pwd.encode("utf-8")).hexdigest().upper()


class FakeFetcher:
    """Range fetcher returning a canned body and recording prefixes."""

    def __init__(self, body: str = "", error: Exception | None = None):
        self.body = body
        self.error = error
        self.calls: list[str] = []

    async def __call__(self, prefix: str) -> str:
        self.calls.append(prefix)
        if self.error is not None:
            raise self.error
        return self.body


class RecordingEffects:
    """UI effects that remember what they were asked to show."""

    def __init__(self):
        self.events: list[tuple] = []

    def display_hints(self, hints):
        self.events.append(("hints", list(hints)))

    def display_verdict(self, verdict):
        self.events.append(("verdict", verdict))

    def notify_error(self, message):
        self.events.append(("error", message))

    def notify_success(self, message):
        self.events.append(("success", message))

    def notify_loading(self, message):
        self.events.append(("loading", message))

    def notify_dismiss(self):
        self.events.append(("dismiss",))

    def of(self, kind):
        return [e for e in self.events if e[0] == kind]


def range_body_with(pwd: str, count: int = 42) -> str:
    suffix = sha1_upper(pwd)[5:]
    return "\r\n".join([
        "0018A45C4D1DEF81644B54AB7F969B88D65:1",
        f"{suffix}:{count}",
        "00D4F6E8FA6EECAD2A3AA415EEC418D38EC:2",
    ])


@pytest.fixture
def fetcher():
    return FakeFetcher()


@pytest.fixture
def failing_fetcher():
    return FakeFetcher(error=NetworkError(status=503))


@pytest.fixture
def effects():
    return RecordingEffects()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("PASSCHECK_API_BASE", "PASSCHECK_USER_AGENT", "PASSCHECK_TIMEOUT", "PASSCHECK_MIN_LENGTH"):
        monkeypatch.delenv(name, raising=False)
