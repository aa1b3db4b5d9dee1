### vendor imports
import pyperclip

### local imports
from .. import exceptions


def copy_text(text: str) -> None:
    """Place `text` on the system clipboard."""
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as exc:
        raise exceptions.ClipboardError(exc) from exc
