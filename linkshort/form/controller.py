"""
Controller gluing the form state to the shortening client.

`ShortenerForm` owns the current `FormState`. User actions (`submit`,
`copy_result`) and request completions are turned into events and run through
`state.reduce`; subscribers are told about every new snapshot. Requests run on
an executor, and their completion is posted to a `UiQueue` so that state only
ever changes on the UI thread.
"""

### stdlib imports
import concurrent.futures
import logging
import typing

### local imports
from .. import exceptions
from ..shorten import FailureKind, Ok, Result, TinyUrlClient
from . import clipboard, dispatch, state

logger = logging.getLogger(__name__)

Subscriber = typing.Callable[[state.FormState], None]


class ShortenerForm:
    """
    Args:
        client (optional): Client used to reach the shortening endpoint.
        executor (optional): Executor requests are dispatched on. Defaults to
            a private single-worker thread pool, shut down by `close`.
        ui_queue (optional): Queue that completions are marshalled through.
            Whoever owns the UI thread is responsible for draining it.
        copy (optional): Function writing text to the clipboard.
    """

    def __init__(
        self,
        client: typing.Optional[TinyUrlClient] = None,
        executor: typing.Optional[concurrent.futures.Executor] = None,
        ui_queue: typing.Optional[dispatch.UiQueue] = None,
        copy: typing.Callable[[str], None] = clipboard.copy_text,
    ) -> None:
        self.client = client or TinyUrlClient()
        self.ui_queue = ui_queue or dispatch.UiQueue()
        self._copy = copy

        self._owns_executor = executor is None
        self._executor = executor or concurrent.futures.ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="linkshort"
        )

        self._subscribers: list[Subscriber] = []
        self._outstanding: typing.Optional[concurrent.futures.Future] = None
        self.state = state.FormState()

    def subscribe(self, callback: Subscriber) -> typing.Callable[[], None]:
        """Call `callback` with every new state. Returns an unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def dispatch(self, event: state.Event) -> state.FormState:
        previous = self.state
        self.state = state.reduce(previous, event)

        if self.state is not previous:
            for callback in list(self._subscribers):
                callback(self.state)
        return self.state

    def submit(
        self, raw_input: str
    ) -> typing.Optional["concurrent.futures.Future[Result]"]:
        """
        Validate and normalize `raw_input`, then shorten it in the background.

        Returns the future of the dispatched request, or `None` when nothing
        was sent (empty input, a request already outstanding, or a request
        that could not be built).
        """
        previous = self.state
        current = self.dispatch(state.Submit(raw=raw_input))
        if current is previous or not current.in_flight:
            return None

        try:
            request = self.client.prepare(current.normalized_url)
            future = self.client.submit(self._executor, request)
        except (exceptions.RequestConstructionError, RuntimeError) as exc:
            logger.warning("Could not dispatch shortening request: %s", exc)
            self.dispatch(
                state.RequestFailed(kind=FailureKind.RequestConstruction)
            )
            return None

        self._outstanding = future
        future.add_done_callback(self._on_done)
        return future

    def _on_done(self, future: concurrent.futures.Future) -> None:
        # Runs on the worker thread
        if future.cancelled():
            return
        self.ui_queue.post(self._complete, future, future.result())

    def _complete(self, future: concurrent.futures.Future, result: Result) -> None:
        if future is self._outstanding:
            self._outstanding = None

        if isinstance(result, Ok):
            self.dispatch(state.RequestSucceeded(body=result.body))
        else:
            self.dispatch(state.RequestFailed(kind=result.kind))

    def copy_result(self) -> bool:
        """Copy the short link to the clipboard. Does nothing if there isn't one."""
        shortened = self.state.shortened_url
        if not shortened:
            return False

        try:
            self._copy(shortened)
        except exceptions.ClipboardError as exc:
            logger.warning("%s", exc)
            self.dispatch(state.CopyFailed())
            return False

        self.dispatch(state.CopyRequested())
        return True

    def close(self) -> None:
        """Cancel any outstanding request and release the executor."""
        if self._outstanding is not None:
            self._outstanding.cancel()
            self._outstanding = None
        if self._owns_executor:
            self._executor.shutdown(wait=False, cancel_futures=True)
