"""
A small collection of bespoke exceptions raised while shortening a URL.

Every failure a user can trigger derives from `ShortenerException`; none of them
are fatal, the form stays interactive and the user may resubmit.
"""

### stdlib imports
import pathlib
import typing

### vendor imports

### local imports


class ShortenerException(Exception):
    pass


class ValidationError(ShortenerException):
    def __str__(self) -> str:
        return "No URL was given (input was empty or whitespace)"


class HttpStatusError(ShortenerException):
    def __init__(self, status_code: int) -> None:
        self.status_code = status_code

    def __str__(self) -> str:
        return f"Shortening endpoint responded with HTTP {self.status_code}"


class _CausedException(ShortenerException):
    def __init__(self, cause: typing.Optional[BaseException] = None) -> None:
        self.cause = cause


class TransportError(_CausedException):
    def __str__(self) -> str:
        return f"Could not reach the shortening endpoint: {self.cause!r}"


class RequestConstructionError(_CausedException):
    def __init__(
        self, url: str, cause: typing.Optional[BaseException] = None
    ) -> None:
        super().__init__(cause)
        self.url = url

    def __str__(self) -> str:
        return f"Could not build a shortening request for {self.url!r}: {self.cause!r}"


class ClipboardError(_CausedException):
    def __str__(self) -> str:
        return f"Could not write to the system clipboard: {self.cause!r}"


class ConfigError(_CausedException):
    def __init__(
        self, path: pathlib.Path, cause: typing.Optional[BaseException] = None
    ) -> None:
        super().__init__(cause)
        self.path = path

    def __str__(self) -> str:
        return f"Props file '{self.path}' is malformed: {self.cause}"
