# stdlib imports
import sys

# vendor imports
import click
import colorama as color

# local imports
from .. import exceptions
from ..chassis import Chassis
from ..form.clipboard import copy_text
from ..form.state import COPY_FAILED_MESSAGE, EMPTY_INPUT_MESSAGE, FAILURE_MESSAGES
from . import FailureKind, TinyUrlClient, normalize_url


def printError(message: str) -> None:
    """Print an error in red and abort execution"""
    click.echo(f"{color.Fore.RED}{message}{color.Fore.RESET}", err=True)
    sys.exit(1)


@click.command()
@click.argument("url", type=str, nargs=-1)
@click.option("--copy/--no-copy", default=True, help="Copy the short link.")
@click.option("--verbose", is_flag=True, help="Log at DEBUG level.")
def cli(url, copy, verbose):
    """Shorten whatever is passed in through args and copy it to the clipboard."""
    color.just_fix_windows_console()
    chassis = Chassis(features={"verbose": verbose})
    client = TinyUrlClient(
        api_url=chassis.props.API_URL, timeout=chassis.props.TIMEOUT
    )

    try:
        short = client.shorten(normalize_url(" ".join(url)))
    except exceptions.ValidationError:
        printError(EMPTY_INPUT_MESSAGE)
    except exceptions.ShortenerException as exc:
        printError(FAILURE_MESSAGES[FailureKind.from_exception(exc)])

    if not copy:
        click.echo(short)
        return

    try:
        copy_text(short)
    except exceptions.ClipboardError:
        click.echo(short)
        printError(COPY_FAILED_MESSAGE)

    click.echo(f"{color.Fore.YELLOW}{short}{color.Fore.RESET} copied to clipboard")


# If main, execute command
if __name__ == "__main__":
    cli()
