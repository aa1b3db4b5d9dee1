"""
Immutable state of the shortener form, and the reducer that advances it.

The form never mutates state in place. Every user action or request completion
is an event; `reduce` takes the current `FormState` and an event and returns the
next snapshot (or the very same object when the event changes nothing).
"""

### stdlib imports
import enum
import typing

### vendor imports
import pydantic

### local imports
from .. import exceptions
from ..shorten import FailureKind, normalize_url

EMPTY_INPUT_MESSAGE = "Please enter a URL"
PENDING_MESSAGE = "Shortening..."
SHORTENED_MESSAGE = "URL shortened successfully!"
COPIED_MESSAGE = "Copied to clipboard!"
COPY_FAILED_MESSAGE = "Error: Could not copy to clipboard"

FAILURE_MESSAGES: dict[FailureKind, str] = {
    FailureKind.HttpStatus: "Error: Could not shorten URL",
    FailureKind.Transport: "Error: Network or service problem",
    FailureKind.RequestConstruction: "Error shortening URL",
}


class Status(enum.Enum):
    """
    Outcome of the most recent operation; drives the status label.

    `NetworkError` covers every failure that is not bad input, including a
    failed clipboard write (`CopyFailed`), whose message says so explicitly.
    Whether a request is outstanding is tracked separately by
    `FormState.in_flight`; a copy can replace `Pending` while one still is.
    """

    Idle = "idle"
    Pending = "pending"
    Success = "success"
    ValidationError = "validation-error"
    NetworkError = "network-error"


class FormState(pydantic.BaseModel):
    """Snapshot of everything the form displays."""

    model_config = pydantic.ConfigDict(frozen=True)

    input_url: str = ""
    """Raw text as it was last submitted."""

    normalized_url: str = ""
    """Input after trimming and scheme prefixing; what gets sent."""

    shortened_url: str = ""
    """Short link from the last successful request. Empty until then."""

    status: Status = Status.Idle
    message: str = ""

    in_flight: bool = False
    """A shortening request is outstanding. Only request completion clears it."""


class _Event(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(frozen=True)


class Submit(_Event):
    raw: str


class RequestSucceeded(_Event):
    body: str


class RequestFailed(_Event):
    kind: FailureKind


class CopyRequested(_Event):
    pass


class CopyFailed(_Event):
    pass


Event = typing.Union[
    Submit, RequestSucceeded, RequestFailed, CopyRequested, CopyFailed
]


def _submit(state: FormState, event: Submit) -> FormState:
    # Submissions are serialized; one outstanding request at a time
    if state.in_flight:
        return state

    try:
        normalized = normalize_url(event.raw)
    except exceptions.ValidationError:
        return state.model_copy(
            update={
                "input_url": event.raw,
                "status": Status.ValidationError,
                "message": EMPTY_INPUT_MESSAGE,
            }
        )

    return state.model_copy(
        update={
            "input_url": event.raw,
            "normalized_url": normalized,
            "status": Status.Pending,
            "message": PENDING_MESSAGE,
            "in_flight": True,
        }
    )


def reduce(state: FormState, event: Event) -> FormState:
    """Return the state that follows `state` once `event` has happened."""
    if isinstance(event, Submit):
        return _submit(state, event)

    if isinstance(event, RequestSucceeded):
        return state.model_copy(
            update={
                "shortened_url": event.body,
                "status": Status.Success,
                "message": SHORTENED_MESSAGE,
                "in_flight": False,
            }
        )

    if isinstance(event, RequestFailed):
        return state.model_copy(
            update={
                "status": Status.NetworkError,
                "message": FAILURE_MESSAGES[event.kind],
                "in_flight": False,
            }
        )

    if isinstance(event, CopyRequested):
        if not state.shortened_url:
            return state
        return state.model_copy(
            update={"status": Status.Success, "message": COPIED_MESSAGE}
        )

    if isinstance(event, CopyFailed):
        return state.model_copy(
            update={
                "status": Status.NetworkError,
                "message": COPY_FAILED_MESSAGE,
            }
        )

    raise TypeError(f"Unknown form event: {event!r}")
