"""NiceGUI front-end for the accessible sketch grid.

Every browser tab gets its own :class:`SketchController`.  The page is a thin
sink: it forwards clicks, keys and pointer drags to the dispatcher and repaints
whatever the core reports.  No stroke logic lives here.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, List, Optional

from nicegui import events, ui

from .config import InputMode, SessionSettings
from .controller import SketchController
from .dispatcher import Operation
from .geometry import CellAddress
from .messages import cell_label
from .sinks import NullSink
from .strokes import CellOutOfRangeError, Stroke, StrokeStateError

logger = logging.getLogger(__name__)

STATUS_HISTORY = 250

KEY_STEPS = {
    "ArrowUp": (-1, 0),
    "ArrowDown": (1, 0),
    "ArrowLeft": (0, -1),
    "ArrowRight": (0, 1),
}


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger for the front-end process."""
    log_level = getattr(logging, level.upper(), logging.INFO)
    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logger.info("Logging configured: level=%s", level)


class PageSink(NullSink):
    """Reflect core notifications in the page widgets."""

    def __init__(self, page: "SketchPage") -> None:
        self.page = page

    def on_painted_change(self, cell: CellAddress) -> None:
        tile = self.page.cells.get(cell)
        if tile is not None:
            tile.style(f"background-color: {self.page.paint_color}")

    def on_stroke_finalized(self, stroke: Stroke) -> None:
        logger.info("Stroke finalized with %d points", len(stroke))

    def on_announce(self, message: str) -> None:
        self.page.announce(message)

    def on_focus_change(self, cell: CellAddress) -> None:
        tile = self.page.cells.get(cell)
        if tile is not None:
            ui.run_javascript(f'document.getElementById("c{tile.id}")?.focus()')


class SketchPage:
    """Widgets and handlers of one browser tab."""

    paint_color = "black"
    blank_color = "white"

    def __init__(self, settings: Optional[SessionSettings] = None) -> None:
        self.controller = SketchController(settings=settings or SessionSettings())
        self.controller.add_sink(PageSink(self))
        self.cells: Dict[CellAddress, ui.element] = {}
        self.status_messages: List[str] = []
        self.alpha = self.controller.settings.curve.alpha
        self.live_region: Optional[ui.label] = None
        self.status_area: Optional[ui.textarea] = None
        self.surface: Optional[ui.interactive_image] = None
        self.mode_switch: Optional[ui.switch] = None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def announce(self, message: str) -> None:
        timestamp = time.strftime("%H:%M:%S")
        self.status_messages.append(f"[{timestamp}] {message}")
        del self.status_messages[:-STATUS_HISTORY]
        if self.live_region is not None:
            self.live_region.text = message
        if self.status_area is not None:
            self.status_area.value = "\n".join(self.status_messages)

    def _refresh(self) -> None:
        if self.surface is not None:
            self.surface.content = self.controller.renderer.render_elements(self.controller.session, self.alpha)

    def _run(self, action, *args, lazy: bool = False) -> Operation:
        """Call ``action``; with ``lazy`` the surface is only redrawn when a stroke changed."""
        op = Operation.NONE
        try:
            op = action(*args)
        except (StrokeStateError, CellOutOfRangeError) as exc:
            logger.error("Input rejected: %s", exc)
            ui.notify(str(exc), type="negative")
        if not lazy or op is not Operation.NONE:
            self._refresh()
        return op

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------
    def _handle_key(self, e: events.KeyEventArguments) -> None:
        if not e.action.keydown:
            return
        name = e.key.name
        if name in KEY_STEPS:
            self._run(self.controller.move, *KEY_STEPS[name])
        elif e.key.space:
            self._run(self.controller.activate)
        elif e.key.enter:
            self._run(self.controller.press_enter)
        elif e.key.escape:
            self._reset()

    def _handle_mouse(self, e: events.MouseEventArguments) -> None:
        if e.type == "mousedown":
            self._run(self.controller.press, e.image_x, e.image_y)
        elif e.type == "mousemove":
            self._run(self.controller.drag, e.image_x, e.image_y, lazy=True)
        elif e.type == "mouseup":
            self._run(self.controller.release)

    def _focus_cell(self, cell: CellAddress) -> None:
        # Programmatic focus after a cursor move lands here again.
        if cell == self.controller.session.cursor:
            return
        self._run(self.controller.focus, cell)

    def _activate_cell(self, cell: CellAddress) -> None:
        self._run(self.controller.activate, cell)

    def _set_mode(self, continuous: bool) -> None:
        mode = InputMode.CONTINUOUS_PAINT if continuous else InputMode.DIRECT_ACTIVATION
        self._run(self.controller.toggle_mode, mode)

    def _set_alpha(self, value) -> None:
        try:
            self.alpha = max(0.0, min(1.0, float(value)))
        except (TypeError, ValueError):
            return
        self._refresh()

    def _reset(self) -> None:
        self._run(self.controller.reset)
        for tile in self.cells.values():
            tile.style(f"background-color: {self.blank_color}")

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------
    def build(self) -> None:
        settings = self.controller.settings
        grid = settings.grid
        language = settings.language

        ui.page_title("Accessible sketch grid")
        ui.markdown("# Accessible sketch grid")
        ui.label(
            "Click cells or use the arrow keys to move, Space to paint, Enter to start or finish a stroke."
        ).classes("text-sm text-gray-500")
        ui.keyboard(on_key=self._handle_key, ignore=[])

        with ui.row().classes("w-full gap-6"):
            with ui.column().classes("gap-4"):
                with ui.card():
                    ui.label("Grid").classes("text-lg font-semibold")
                    with ui.element("div").props('role=grid aria-label="Drawing area"'):
                        for r in range(grid.rows):
                            with ui.row().props("role=row").classes("gap-0 no-wrap"):
                                for c in range(grid.cols):
                                    cell = CellAddress(r, c)
                                    tile = ui.element("div").props(
                                        f'role=gridcell tabindex=0 aria-label="{cell_label(cell, language)}"'
                                    )
                                    tile.on("click", lambda _, cell=cell: self._activate_cell(cell))
                                    tile.on("focus", lambda _, cell=cell: self._focus_cell(cell))
                                    tile.style(
                                        f"width: {grid.cell_size}px; height: {grid.cell_size}px; "
                                        f"border: 1px solid gray; background-color: {self.blank_color}"
                                    )
                                    self.cells[cell] = tile

                with ui.card():
                    ui.label("Controls").classes("text-lg font-semibold")
                    self.mode_switch = ui.switch(
                        "Continuous paint",
                        value=self.controller.session.continuous,
                        on_change=lambda e: self._set_mode(bool(e.value)),
                    )
                    ui.label("Curve alpha").classes("text-sm")
                    ui.slider(min=0.0, max=1.0, step=0.05, value=self.alpha, on_change=lambda e: self._set_alpha(e.value))
                    ui.button("Clear drawing", on_click=self._reset)

            with ui.column().classes("gap-4"):
                with ui.card():
                    ui.label("Surface").classes("text-lg font-semibold")
                    self.surface = ui.interactive_image(
                        size=(int(grid.width), int(grid.height)),
                        on_mouse=self._handle_mouse,
                        events=["mousedown", "mousemove", "mouseup"],
                        cross=False,
                    )
                with ui.card():
                    ui.label("Status").classes("text-lg font-semibold")
                    self.live_region = ui.label("").props("role=status aria-live=polite")
                    self.status_area = ui.textarea(value="").props("readonly").classes("w-96")

        self._refresh()


def run(**kwargs) -> None:
    ui.run(**kwargs)


@ui.page("/")
def index() -> None:
    SketchPage().build()


__all__ = ["SketchPage", "PageSink", "configure_logging", "run"]
