"""Render and announce sinks.

The core never draws anything itself.  It reports what changed through four
callbacks and leaves presentation to whichever sink is attached: a canvas, a
vector surface, a terminal or a test recorder.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Iterable, List, Optional

from ..geometry import CellAddress

if TYPE_CHECKING:
    from ..strokes import Stroke

logger = logging.getLogger(__name__)

CellCallback = Callable[[CellAddress], None]
StrokeCallback = Callable[["Stroke"], None]
AnnounceCallback = Callable[[str], None]


class NullSink:
    """Sink that ignores every notification.

    Subclasses override only the callbacks they care about.
    """

    def on_painted_change(self, cell: CellAddress) -> None:
        """A cell was added to the painted set."""

    def on_stroke_finalized(self, stroke: Stroke) -> None:
        """A stroke moved into the history."""

    def on_announce(self, message: str) -> None:
        """A status message for assistive technology."""

    def on_focus_change(self, cell: CellAddress) -> None:
        """The keyboard cursor moved to ``cell``."""


class CallbackSink(NullSink):
    """Adapter that forwards notifications to plain callables."""

    def __init__(
        self,
        *,
        painted_cb: Optional[CellCallback] = None,
        stroke_cb: Optional[StrokeCallback] = None,
        announce_cb: Optional[AnnounceCallback] = None,
        focus_cb: Optional[CellCallback] = None,
    ) -> None:
        self.painted_cb = painted_cb or (lambda cell: None)
        self.stroke_cb = stroke_cb or (lambda stroke: None)
        self.announce_cb = announce_cb or (lambda message: None)
        self.focus_cb = focus_cb or (lambda cell: None)

    def on_painted_change(self, cell: CellAddress) -> None:
        self.painted_cb(cell)

    def on_stroke_finalized(self, stroke: Stroke) -> None:
        self.stroke_cb(stroke)

    def on_announce(self, message: str) -> None:
        self.announce_cb(message)

    def on_focus_change(self, cell: CellAddress) -> None:
        self.focus_cb(cell)


class CompositeSink(NullSink):
    """Fan notifications out to several sinks in registration order."""

    def __init__(self, sinks: Iterable[NullSink] = ()) -> None:
        self.sinks: List[NullSink] = list(sinks)

    def add(self, sink: NullSink) -> None:
        self.sinks.append(sink)
        logger.debug("Sink attached: %s", type(sink).__name__)

    def remove(self, sink: NullSink) -> None:
        self.sinks.remove(sink)

    def on_painted_change(self, cell: CellAddress) -> None:
        for sink in self.sinks:
            sink.on_painted_change(cell)

    def on_stroke_finalized(self, stroke: Stroke) -> None:
        for sink in self.sinks:
            sink.on_stroke_finalized(stroke)

    def on_announce(self, message: str) -> None:
        for sink in self.sinks:
            sink.on_announce(message)

    def on_focus_change(self, cell: CellAddress) -> None:
        for sink in self.sinks:
            sink.on_focus_change(cell)


__all__ = ["NullSink", "CallbackSink", "CompositeSink"]
