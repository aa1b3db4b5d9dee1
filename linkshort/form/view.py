"""
Tkinter window for the shortener form.

The window holds no state of its own: it forwards button presses to a
`ShortenerForm` and re-renders whenever the form publishes a new `FormState`.
"""

### stdlib imports
import logging
import tkinter as tk
import typing
from tkinter import ttk

### local imports
from ..chassis import Chassis
from ..shorten import TinyUrlClient
from . import pentagram
from .controller import ShortenerForm
from .state import FormState, Status

logger = logging.getLogger(__name__)

WIDTH = 360
HEIGHT = 225

_status_colors = {
    Status.Idle: "gray",
    Status.Pending: "gray",
    Status.Success: "#009600",
    Status.ValidationError: "red",
    Status.NetworkError: "red",
}

# Spin speed of the decoration
_spin_interval = 20  # ms
_spin_step = 0.05  # radians


class ShortenerWindow:
    def __init__(
        self,
        root: tk.Tk,
        form: ShortenerForm,
        theme: typing.Optional[str] = None,
    ) -> None:
        self.root = root
        self.form = form
        self.rotation = 0.0

        self._apply_theme(theme)
        self._build()

        root.title("Link Shortener")
        root.resizable(False, False)
        self._center()

        self.render(form.state)
        self._unsubscribe = form.subscribe(self.render)
        form.ui_queue.attach(root)
        root.protocol("WM_DELETE_WINDOW", self.close)
        root.after(_spin_interval, self._spin)

    def _apply_theme(self, theme: typing.Optional[str]) -> None:
        style = ttk.Style(self.root)
        if theme:
            try:
                style.theme_use(theme)
            except tk.TclError:
                logger.info(
                    "Theme %r not available, reverting to platform default", theme
                )

    def _build(self) -> None:
        main = ttk.Frame(self.root, padding=(10, 20, 20, 20))
        main.pack(fill=tk.BOTH, expand=True)

        self.canvas = tk.Canvas(main, width=120, height=120, highlightthickness=0)
        self.canvas.pack(side=tk.LEFT, anchor=tk.N)
        self._circle = self.canvas.create_line(0, 0, 0, 0, width=3)
        self._star = self.canvas.create_polygon(
            0, 0, 0, 0, outline="black", fill="#8b0000", stipple="gray50", width=3
        )

        fields = ttk.Frame(main)
        fields.pack(side=tk.LEFT, anchor=tk.N)

        ttk.Label(fields, text="Enter URL:").grid(row=0, sticky=tk.EW, pady=(0, 3))

        self.url_var = tk.StringVar()
        self.url_entry = ttk.Entry(fields, textvariable=self.url_var, width=24)
        self.url_entry.grid(row=1, sticky=tk.EW, pady=(0, 3))
        self.url_entry.bind("<Return>", lambda _: self.on_shorten())

        self.shorten_button = ttk.Button(
            fields, text="Shorten", command=self.on_shorten
        )
        self.shorten_button.grid(row=2, sticky=tk.EW, pady=5)

        self.result_var = tk.StringVar()
        ttk.Entry(
            fields, textvariable=self.result_var, width=24, state="readonly"
        ).grid(row=3, sticky=tk.EW, pady=(0, 3))

        ttk.Button(fields, text="Copy", command=self.form.copy_result).grid(
            row=4, sticky=tk.EW
        )

        self.status_label = ttk.Label(fields, text=" ")
        self.status_label.grid(row=5, sticky=tk.EW, pady=(5, 0))

    def _center(self) -> None:
        self.root.update_idletasks()
        x = (self.root.winfo_screenwidth() - WIDTH) // 2
        y = (self.root.winfo_screenheight() - HEIGHT) // 2
        self.root.geometry(f"{WIDTH}x{HEIGHT}+{x}+{y}")

    def on_shorten(self) -> None:
        self.form.submit(self.url_var.get())

    def render(self, state: FormState) -> None:
        self.result_var.set(state.shortened_url)
        self.status_label.configure(
            text=state.message or " ", foreground=_status_colors[state.status]
        )
        self.shorten_button.state(["disabled" if state.in_flight else "!disabled"])

    def _spin(self) -> None:
        self.rotation += _spin_step

        width = int(self.canvas.cget("width"))
        height = int(self.canvas.cget("height"))
        size = min(width, height) / 2 - 10
        center_x, center_y = width / 2, height / 2

        self.canvas.coords(
            self._circle,
            *pentagram.flatten(pentagram.circle_points(center_x, center_y, size)),
        )
        self.canvas.coords(
            self._star,
            *pentagram.flatten(
                pentagram.pentagram_points(center_x, center_y, size, self.rotation)
            ),
        )
        self.root.after(_spin_interval, self._spin)

    def close(self) -> None:
        self._unsubscribe()
        self.form.close()
        self.root.destroy()


def run(chassis: Chassis) -> None:
    """Open the shortener window and block until it is closed."""
    client = TinyUrlClient(
        api_url=chassis.props.API_URL, timeout=chassis.props.TIMEOUT
    )
    root = tk.Tk()
    ShortenerWindow(root, ShortenerForm(client=client), theme=chassis.props.THEME)
    root.mainloop()
