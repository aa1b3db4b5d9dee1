# vendor imports
import click

# local imports
from ..chassis import Chassis
from .view import run


@click.command()
@click.option("--log", "log_session", is_flag=True, help="Write a session log file.")
@click.option("--verbose", is_flag=True, help="Log at DEBUG level.")
def cli(log_session, verbose):
    """Open the Link Shortener window."""
    run(Chassis(features={"log": log_session, "verbose": verbose}))


# If main, open the window
if __name__ == "__main__":
    cli()
