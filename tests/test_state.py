"""Tests for the form state reducer."""

import pydantic
import pytest

from linkshort.form.state import (
    COPIED_MESSAGE,
    COPY_FAILED_MESSAGE,
    EMPTY_INPUT_MESSAGE,
    SHORTENED_MESSAGE,
    CopyFailed,
    CopyRequested,
    FormState,
    RequestFailed,
    RequestSucceeded,
    Status,
    Submit,
    reduce,
)
from linkshort.shorten import FailureKind


class TestFormState:
    def test_initial_state(self):
        state = FormState()

        assert state.status is Status.Idle
        assert state.shortened_url == ""
        assert not state.in_flight

    def test_is_immutable(self):
        with pytest.raises(pydantic.ValidationError):
            FormState().shortened_url = "https://tinyurl.com/x"


class TestReduce:
    """Test state transitions."""

    def test_submit_empty(self):
        state = reduce(FormState(), Submit(raw="   "))

        assert state.status is Status.ValidationError
        assert state.message == EMPTY_INPUT_MESSAGE
        assert state.normalized_url == ""

    def test_submit_normalizes(self):
        state = reduce(FormState(), Submit(raw=" example.com "))

        assert state.status is Status.Pending
        assert state.input_url == " example.com "
        assert state.normalized_url == "http://example.com"

    def test_submit_while_pending_is_ignored(self):
        pending = reduce(FormState(), Submit(raw="a.com"))
        assert reduce(pending, Submit(raw="b.com")) is pending

    def test_request_succeeded(self):
        pending = reduce(FormState(), Submit(raw="a.com"))
        state = reduce(pending, RequestSucceeded(body="https://tinyurl.com/abc123"))

        assert state.shortened_url == "https://tinyurl.com/abc123"
        assert state.status is Status.Success
        assert state.message == SHORTENED_MESSAGE

    @pytest.mark.parametrize(
        "kind, message",
        [
            (FailureKind.HttpStatus, "Error: Could not shorten URL"),
            (FailureKind.Transport, "Error: Network or service problem"),
            (FailureKind.RequestConstruction, "Error shortening URL"),
        ],
    )
    def test_request_failed_keeps_previous_result(self, kind, message):
        previous = FormState(shortened_url="https://tinyurl.com/old")
        pending = reduce(previous, Submit(raw="a.com"))
        state = reduce(pending, RequestFailed(kind=kind))

        assert state.shortened_url == "https://tinyurl.com/old"
        assert state.status is Status.NetworkError
        assert state.message == message

    def test_copy_without_result_is_a_no_op(self):
        state = FormState(status=Status.ValidationError, message=EMPTY_INPUT_MESSAGE)
        assert reduce(state, CopyRequested()) is state

    def test_copy_with_result(self):
        state = reduce(
            FormState(shortened_url="https://tinyurl.com/xyz"), CopyRequested()
        )

        assert state.status is Status.Success
        assert state.message == COPIED_MESSAGE

    def test_copy_failed(self):
        state = reduce(
            FormState(shortened_url="https://tinyurl.com/xyz"), CopyFailed()
        )

        assert state.status is Status.NetworkError
        assert state.message == COPY_FAILED_MESSAGE
        assert state.shortened_url == "https://tinyurl.com/xyz"

    def test_status_never_returns_to_idle(self):
        state = FormState()
        for event in (
            Submit(raw="a.com"),
            RequestSucceeded(body="https://tinyurl.com/a"),
            CopyRequested(),
            Submit(raw=""),
        ):
            state = reduce(state, event)
            assert state.status is not Status.Idle

    def test_copy_while_in_flight_keeps_submissions_blocked(self):
        state = reduce(
            FormState(shortened_url="https://tinyurl.com/old"), Submit(raw="a.com")
        )
        for event in (CopyRequested(), CopyFailed()):
            state = reduce(state, event)
            assert state.in_flight
            assert reduce(state, Submit(raw="b.com")) is state

    @pytest.mark.parametrize(
        "event",
        [
            RequestSucceeded(body="https://tinyurl.com/new"),
            RequestFailed(kind=FailureKind.Transport),
        ],
    )
    def test_completion_clears_in_flight(self, event):
        pending = reduce(FormState(), Submit(raw="a.com"))
        assert pending.in_flight
        assert not reduce(pending, event).in_flight

    def test_unknown_event(self):
        with pytest.raises(TypeError):
            reduce(FormState(), object())
