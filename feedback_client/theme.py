"""Theme colour tokens."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Mapping


class ThemeAttr(Enum):
    COLOR_ACCENT = "colorAccent"


@dataclass(frozen=True)
class Theme:
    name: str
    colors: Mapping[ThemeAttr, str]

    def color(self, attr: ThemeAttr) -> str:
        return self.colors[attr]


THEMES: Dict[str, Theme] = {
    "light": Theme("light", {ThemeAttr.COLOR_ACCENT: "#3366cc"}),
    "dark": Theme("dark", {ThemeAttr.COLOR_ACCENT: "#6699ff"}),
    "black": Theme("black", {ThemeAttr.COLOR_ACCENT: "#6699ff"}),
    "sepia": Theme("sepia", {ThemeAttr.COLOR_ACCENT: "#3366cc"}),
}

DEFAULT_THEME = "light"


def theme_for(name: str) -> Theme:
    token = (name or DEFAULT_THEME).strip().lower()
    return THEMES.get(token, THEMES[DEFAULT_THEME])
