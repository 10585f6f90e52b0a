"""Entry point for running the NiceGUI sketch grid."""

from sketchgrid.app import configure_logging, run


if __name__ in {"__main__", "__mp_main__"}:
    configure_logging("INFO")
    run(reload=False, host="0.0.0.0", port=8080)
