"""Tests for rendering form state into the window's widgets."""

import types

import pytest

pytest.importorskip("tkinter")

from linkshort.form import view
from linkshort.form.state import CopyRequested, FormState, Submit, reduce


class FakeVar:
    def __init__(self):
        self.value = None

    def set(self, value):
        self.value = value


class FakeWidget:
    def __init__(self):
        self.options = {}
        self.states = []

    def configure(self, **options):
        self.options.update(options)

    def state(self, flags):
        self.states.append(flags)


@pytest.fixture
def window():
    """Just enough of a ShortenerWindow for `render`, without a display."""
    return types.SimpleNamespace(
        result_var=FakeVar(), status_label=FakeWidget(), shorten_button=FakeWidget()
    )


class TestRender:
    def test_shorten_disabled_while_in_flight(self, window):
        state = reduce(FormState(), Submit(raw="a.com"))
        view.ShortenerWindow.render(window, state)

        assert window.shorten_button.states[-1] == ["disabled"]
        assert window.status_label.options["foreground"] == "gray"

    def test_copy_during_request_keeps_shorten_disabled(self, window):
        state = reduce(
            FormState(shortened_url="https://tinyurl.com/old"), Submit(raw="a.com")
        )
        state = reduce(state, CopyRequested())
        view.ShortenerWindow.render(window, state)

        assert window.shorten_button.states[-1] == ["disabled"]
        assert window.status_label.options["text"] == "Copied to clipboard!"
        assert window.result_var.value == "https://tinyurl.com/old"

    def test_shorten_enabled_when_idle(self, window):
        view.ShortenerWindow.render(window, FormState())

        assert window.shorten_button.states[-1] == ["!disabled"]
        assert window.status_label.options["text"] == " "


class TestWindowAssets:
    def test_no_bundled_icon_is_looked_up(self):
        assert not hasattr(view, "_icon_path")
