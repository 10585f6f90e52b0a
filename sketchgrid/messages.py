"""Localised status strings and accessible cell names.

Announcements are plain sentences meant for a polite live region.  Exact
wording is a presentation concern; the catalogs only have to agree on keys.
"""

from __future__ import annotations

from typing import Dict

from .geometry import CellAddress

CATALOGS: Dict[str, Dict[str, str]] = {
    "en": {
        "cell_label": "Row {row}, column {col}",
        "stroke_started": "Stroke started. {cell}.",
        "cell_painted": "Cell painted. {cell}.",
        "stroke_finished": "Stroke finished, {count} points.",
        "canvas_reset": "Canvas reset.",
        "paint_mode_on": "Continuous paint on.",
        "paint_mode_off": "Continuous paint off.",
    },
    "es": {
        "cell_label": "Fila {row}, columna {col}",
        "stroke_started": "Trazo iniciado. {cell}.",
        "cell_painted": "Celda pintada. {cell}.",
        "stroke_finished": "Trazo terminado, {count} puntos.",
        "canvas_reset": "Dibujo borrado.",
        "paint_mode_on": "Pintura continua activada.",
        "paint_mode_off": "Pintura continua desactivada.",
    },
}


def _catalog(language: str) -> Dict[str, str]:
    try:
        return CATALOGS[language]
    except KeyError:
        raise ValueError(f"Unsupported language: {language!r}") from None


def cell_label(addr: CellAddress, language: str = "en") -> str:
    """Accessible name of a grid cell, 1-based as read to the user."""
    return _catalog(language)["cell_label"].format(row=addr.row + 1, col=addr.col + 1)


def status(key: str, language: str = "en", **fields) -> str:
    catalog = _catalog(language)
    if key not in catalog:
        raise KeyError(f"Unknown status message: {key!r}")
    return catalog[key].format(**fields)


__all__ = ["CATALOGS", "cell_label", "status"]
