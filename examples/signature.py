"""Example script that draws a short signature with the keyboard and prints the result."""
from __future__ import annotations

from sketchgrid import GridConfig, InputMode, SessionSettings, SketchController
from sketchgrid.sinks import CallbackSink


def build_signature() -> SketchController:
    settings = SessionSettings(grid=GridConfig(rows=8, cols=16, cell_size=20.0))
    controller = SketchController(settings=settings)
    controller.add_sink(CallbackSink(announce_cb=print))

    # Continuous paint: every cursor step extends the stroke.
    controller.move(4, 1)
    controller.toggle_mode(InputMode.CONTINUOUS_PAINT)
    for dr, dc in [(-1, 1), (-1, 1), (1, 1), (1, 1), (1, 1), (-1, 1), (-1, 1)]:
        controller.move(dr, dc)
    controller.toggle_mode(InputMode.DIRECT_ACTIVATION)

    # A pointer flourish underneath.
    controller.press(30.0, 130.0)
    for x in range(40, 200, 15):
        controller.drag(float(x), 130.0 + (x % 30) / 3)
    controller.release()
    return controller


def main() -> None:
    controller = build_signature()
    for d in controller.paths():
        print(d)
    print(controller.summary())
    print(controller.svg())


if __name__ == "__main__":
    main()
