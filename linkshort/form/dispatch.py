### stdlib imports
import queue
import typing


class UiQueue:
    """
    Thread-safe mailbox of callables that must run on the UI thread.

    Worker threads `post` to it; the UI thread calls `drain` once per tick
    (see `attach`), so UI-owned state is only ever touched from one thread.
    """

    def __init__(self) -> None:
        self._queue: "queue.SimpleQueue[tuple[typing.Callable, tuple]]" = (
            queue.SimpleQueue()
        )

    def post(self, callback: typing.Callable, *args: typing.Any) -> None:
        self._queue.put((callback, args))

    def drain(self) -> int:
        """Run every callable posted so far, returning how many ran."""
        count = 0
        while True:
            try:
                callback, args = self._queue.get_nowait()
            except queue.Empty:
                return count
            callback(*args)
            count += 1

    def attach(self, widget: typing.Any, interval: int = 50) -> None:
        """Drain the queue every `interval` milliseconds on a Tk widget's loop."""

        def tick():
            self.drain()
            widget.after(interval, tick)

        widget.after(interval, tick)
