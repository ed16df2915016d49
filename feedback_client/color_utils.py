"""Helpers for turning theme colour tokens into Qt colours."""
from __future__ import annotations

from typing import Any

from PyQt6.QtGui import QColor


def coerce_alpha(value: Any, default: float = 1.0) -> float:
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return default
    if numeric != numeric:
        return default
    if numeric < 0.0:
        return 0.0
    if numeric > 1.0:
        return 1.0
    return numeric


def qcolor_from_token(value: Any, fallback: str = "#3366cc") -> QColor:
    color = QColor(str(value)) if value else QColor()
    if not color.isValid():
        color = QColor(fallback)
    return color


def with_alpha(color: QColor, alpha: Any) -> QColor:
    """Return a copy of ``color`` whose alpha is the 0..1 fraction ``alpha``."""
    if not color.isValid():
        return color
    new_alpha = int(round(255 * coerce_alpha(alpha)))
    if new_alpha == color.alpha():
        return color
    return QColor(color.red(), color.green(), color.blue(), new_alpha)


def css_rgba(color: QColor) -> str:
    return f"rgba({color.red()}, {color.green()}, {color.blue()}, {color.alpha()})"
