"""
Module for shortening URLs through the TinyURL `api-create.php` endpoint.

The heavy lifting (generating the short alias) is done entirely by the remote
service; this module only normalizes the user's input, builds the request and
interprets the response.
"""

### stdlib imports
import concurrent.futures
import enum
import logging
import typing

### vendor imports
import pydantic
import requests

### local imports
from .. import exceptions

API_URL = "https://tinyurl.com/api-create.php"
"""Base URL of the shortening endpoint. The long URL is passed as `url`."""

_recognized_schemes = ("http://", "https://")

logger = logging.getLogger(__name__)


def normalize_url(raw: str) -> str:
    """
    Trim the raw user input and make sure it carries a recognized scheme.

    Input that starts with neither `http://` nor `https://` is prefixed with
    `http://`. Empty (or whitespace only) input raises `ValidationError`.
    """
    url = raw.strip()
    if not url:
        raise exceptions.ValidationError()

    if not url.startswith(_recognized_schemes):
        url = "http://" + url
    return url


class FailureKind(enum.Enum):
    """Reasons a shortening request can fail."""

    HttpStatus = "http-status"
    """The endpoint answered with anything other than HTTP 200."""

    Transport = "transport"
    """DNS, connection or timeout failure; no answer was received."""

    RequestConstruction = "request-construction"
    """The request could not be built, so nothing was sent."""

    @classmethod
    def from_exception(
        cls, exc: exceptions.ShortenerException
    ) -> "FailureKind":
        if isinstance(exc, exceptions.HttpStatusError):
            return cls.HttpStatus
        if isinstance(exc, exceptions.RequestConstructionError):
            return cls.RequestConstruction
        return cls.Transport


class Ok(pydantic.BaseModel):
    """Successful shortening; `body` is the response text, verbatim."""

    model_config = pydantic.ConfigDict(frozen=True)

    body: str


class Err(pydantic.BaseModel):
    """Failed shortening, tagged with the kind of failure."""

    model_config = pydantic.ConfigDict(frozen=True)

    kind: FailureKind
    detail: str = ""


Result = typing.Union[Ok, Err]


class TinyUrlClient:
    """
    Thin wrapper around a `requests.Session` talking to the shortening endpoint.

    Args:
        api_url (optional): Base URL of the endpoint. Defaults to `API_URL`.
        timeout (optional): Timeout in seconds handed to `requests`. `None`
            keeps the library default (wait forever).
        session (optional): Session used to send requests. A new one is
            created when omitted.
    """

    def __init__(
        self,
        api_url: str = API_URL,
        timeout: typing.Optional[float] = None,
        session: typing.Optional[requests.Session] = None,
    ) -> None:
        self.api_url = api_url
        self.timeout = timeout
        self.session = session or requests.Session()

    def prepare(self, url: str) -> requests.PreparedRequest:
        """
        Build the GET request for a normalized URL.

        The URL is percent-encoded as the `url` query parameter, so `&`, `#`
        and spaces reach the endpoint intact.
        """
        try:
            return requests.Request(
                "GET", self.api_url, params={"url": url}
            ).prepare()
        except (requests.RequestException, ValueError) as exc:
            raise exceptions.RequestConstructionError(url, exc) from exc

    def send(self, request: requests.PreparedRequest) -> str:
        """Send a prepared request, returning the short link on HTTP 200."""
        try:
            settings = self.session.merge_environment_settings(
                request.url, {}, None, None, None
            )
            response = self.session.send(
                request, timeout=self.timeout, **settings
            )
        except requests.RequestException as exc:
            raise exceptions.TransportError(exc) from exc

        if response.status_code != 200:
            raise exceptions.HttpStatusError(response.status_code)
        return response.text

    def shorten(self, url: str) -> str:
        return self.send(self.prepare(url))

    def fetch(self, request: requests.PreparedRequest) -> Result:
        """
        Send a prepared request and fold the outcome into a tagged result.

        Never raises; meant to be run on a worker thread.
        """
        try:
            return Ok(body=self.send(request))
        except exceptions.ShortenerException as exc:
            logger.warning("Shortening request failed: %s", exc)
            return Err(kind=FailureKind.from_exception(exc), detail=str(exc))
        except Exception as exc:
            logger.exception("Unexpected error while shortening %s", request.url)
            return Err(kind=FailureKind.Transport, detail=repr(exc))

    def submit(
        self,
        executor: concurrent.futures.Executor,
        request: requests.PreparedRequest,
    ) -> "concurrent.futures.Future[Result]":
        """Dispatch `fetch` on an executor without blocking the caller."""
        logger.debug("Dispatching shortening request: %s", request.url)
        return executor.submit(self.fetch, request)


def shorten_url(
    url: str, api_url: str = API_URL, timeout: typing.Optional[float] = None
) -> str:
    """Normalize `url` and return its shortened version, blocking until done."""
    return TinyUrlClient(api_url=api_url, timeout=timeout).shorten(
        normalize_url(url)
    )
