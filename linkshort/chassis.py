# stdlib imports
import datetime
import json
import logging
import os
import pathlib
import re
import typing

# vendor imports
import pydantic

# local imports
from . import exceptions
from .shorten import API_URL

### CONSTANTS ###
# Parent directory name for app data
PARENT_DIRECTORY_NAME = ".linkshort"

# Name of the props file inside the app data directory
PROPS_FILE_NAME = "props.json"

_log_format = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Props(pydantic.BaseModel):
    """User configurable values. Every one of them has a working default."""

    model_config = pydantic.ConfigDict(frozen=True, extra="forbid")

    API_URL: str = API_URL
    """Base URL of the shortening endpoint."""

    TIMEOUT: typing.Optional[float] = None
    """Request timeout in seconds. `None` keeps the HTTP client's default."""

    THEME: typing.Optional[str] = None
    """Name of the ttk theme to use for the window."""


class Chassis:
    """
    Resource management for the application: where its data lives, what the
    user configured, and where log output goes.

    All arguments are keyword arguments.

    Args:
        path (str, pathlib.Path, optional): Directory for storing application
            data in. Defaults to `~/.linkshort`. Can be overridden with the
            environment variable "LINKSHORT_PATH".
        props_file (str, pathlib.Path, optional): Path to the user configurable
            json file. Defaults to `props.json` inside `path`. A missing file
            means every value equals its default; the file is never written.
            Can be overridden with the environment variable
            "LINKSHORT_PROPS_FILE".
        overrides (dict): Prop values that take precedence over the file.
        features (dict): Dictionary of boolean flags to enable/disable
            optional features. Including (but not necessary limited to) the
            following options;
            `log`: Write a log file for the application session.
            `verbose`: Log at DEBUG level instead of WARNING.
    """

    def __init__(
        self,
        path=None,
        props_file=None,
        overrides: typing.Optional[dict] = None,
        features: typing.Optional[dict] = None,
    ):
        features = features or {}

        # Environment wins over arguments, arguments over defaults
        if env_path := os.environ.get("LINKSHORT_PATH", None):
            path = pathlib.Path(env_path)
        elif path:
            path = pathlib.Path(path)
        else:
            path = pathlib.Path(f"~/{PARENT_DIRECTORY_NAME}")
        self.path = path.expanduser().absolute()

        if env_props := os.environ.get("LINKSHORT_PROPS_FILE", None):
            props_file = pathlib.Path(env_props)
        elif props_file:
            props_file = pathlib.Path(props_file)
        else:
            props_file = self.path / PROPS_FILE_NAME
        self.props_file = props_file.expanduser().absolute()

        self.props = self._load_props(self.props_file, overrides or {})

        # Session information
        self.opened = datetime.datetime.now(datetime.timezone.utc)
        self.log_path = (
            self.path / "logs" / re.sub(r"\W", "", self.opened.isoformat())
        ).with_suffix(".log")
        self._configure_logging(features)

    @staticmethod
    def _load_props(props_file: pathlib.Path, overrides: dict) -> Props:
        values = {}
        if props_file.is_file():
            try:
                with props_file.open("r") as file_handle:
                    values = json.load(file_handle)
            except (OSError, json.JSONDecodeError) as exc:
                raise exceptions.ConfigError(props_file, exc) from exc

            if not isinstance(values, dict):
                raise exceptions.ConfigError(
                    props_file, ValueError("top-level value must be an object")
                )

        try:
            return Props(**{**values, **overrides})
        except pydantic.ValidationError as exc:
            raise exceptions.ConfigError(props_file, exc) from exc

    def _configure_logging(self, features: dict) -> None:
        level = logging.DEBUG if features.get("verbose", False) else logging.WARNING

        if features.get("log", False):
            self.log_path.parent.mkdir(parents=True, exist_ok=True)
            logging.basicConfig(
                filename=self.log_path,
                level=min(level, logging.INFO),
                format=_log_format,
            )
        else:
            logging.basicConfig(level=level, format=_log_format)

        logging.getLogger(__name__).debug(
            "Session opened %s with props from '%s'",
            self.opened.isoformat(),
            self.props_file,
        )
