"""Pytest configuration and fixtures."""

import concurrent.futures

import pytest
import requests

from linkshort.form.controller import ShortenerForm
from linkshort.form.dispatch import UiQueue
from linkshort.shorten import TinyUrlClient


def make_response(status_code: int, body: str = "") -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = body.encode("utf-8")
    response.encoding = "utf-8"
    return response


class FakeSession(requests.Session):
    """Session that records prepared requests instead of sending them."""

    def __init__(self, response=None, error=None):
        super().__init__()
        self.response = response
        self.error = error
        self.sent = []

    def send(self, request, **kwargs):
        self.sent.append((request, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


class ImmediateExecutor(concurrent.futures.Executor):
    """Executor running every task synchronously in the caller's thread."""

    def submit(self, fn, /, *args, **kwargs):
        future = concurrent.futures.Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except BaseException as exc:
            future.set_exception(exc)
        return future


class RecordingClipboard:
    def __init__(self):
        self.copied = []

    def __call__(self, text):
        self.copied.append(text)


@pytest.fixture(autouse=True)
def isolated_app_data(tmp_path, monkeypatch):
    """Keep every Chassis away from the real home directory."""
    monkeypatch.setenv("LINKSHORT_PATH", str(tmp_path / "appdata"))
    monkeypatch.delenv("LINKSHORT_PROPS_FILE", raising=False)
    return tmp_path / "appdata"


@pytest.fixture
def session():
    return FakeSession(response=make_response(200, "https://tinyurl.com/abc123"))


@pytest.fixture
def client(session):
    return TinyUrlClient(session=session)


@pytest.fixture
def clipboard():
    return RecordingClipboard()


@pytest.fixture
def ui_queue():
    return UiQueue()


@pytest.fixture
def form(client, ui_queue, clipboard):
    """Form whose requests complete synchronously but still go through the UI queue."""
    form = ShortenerForm(
        client=client,
        executor=ImmediateExecutor(),
        ui_queue=ui_queue,
        copy=clipboard,
    )
    yield form
    form.close()
