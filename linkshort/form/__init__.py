"""
Desktop form for shortening a URL.

`state` and `controller` carry all of the behavior and need no display;
`view` renders them with tkinter. Run `python -m linkshort.form` to open the
window.
"""
