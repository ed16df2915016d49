"""UI toolkit contract the presenters build widgets through.

``qt_toolkit.QtFeedbackToolkit`` implements it with PyQt6 widgets; tests use a
recording implementation. Views, contexts and screens are opaque handles here.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntFlag
from typing import Any, Callable, Optional, Tuple

from feedback_client.rich_text import RichText  # type: ignore
from feedback_client.theme import ThemeAttr  # type: ignore


class ArrowOrientation(Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


class ArrowConstraints(Enum):
    ALIGN_BALLOON = "align_balloon"
    ALIGN_ANCHOR = "align_anchor"


class Gravity(IntFlag):
    NO_GRAVITY = 0
    TOP = 0x30
    BOTTOM = 0x50
    START = 0x800003
    END = 0x800005
    CENTER = 0x11


TOOLTIP_CAPTION_LAYOUT = "abc_tooltip"
TOOLTIP_ARROW_DRAWABLE = "ic_tooltip_arrow_up"


@dataclass
class TooltipConfig:
    """Everything a balloon builder collects before ``build()``."""

    arrow_drawable: Optional[str] = None
    arrow_constraints: ArrowConstraints = ArrowConstraints.ALIGN_BALLOON
    arrow_orientation: ArrowOrientation = ArrowOrientation.BOTTOM
    arrow_size: int = 12
    margin_left: int = 0
    margin_right: int = 0
    margin_top: int = 0
    margin_bottom: int = 0
    background_color: Optional[str] = None
    dismiss_when_touch_outside: bool = True
    text: Optional[RichText] = None
    text_size: float = 12.0
    text_typeface: str = "sans-serif"
    text_color: str = "#ffffff"
    padding: int = 0
    layout: Optional[str] = None
    height: Optional[int] = None
    width_ratio: float = 0.0
    arrow_align_anchor_padding: int = 0


@dataclass
class SpotlightTarget:
    view: Any
    title: str
    description: str
    target_circle_color: Optional[str] = None
    outer_circle_color: Optional[str] = None
    outer_circle_alpha: float = 0.96
    cancelable: bool = True
    transparent_target: bool = False


class SpotlightListener:
    """Lifecycle callbacks for a spotlight overlay; every hook defaults to a no-op."""

    def on_target_hit(self, target: SpotlightTarget) -> None:
        return None

    def on_target_cancelled(self, target: SpotlightTarget) -> None:
        return None

    def on_dismissed(self, target: SpotlightTarget, user_initiated: bool) -> None:
        return None


class BannerHandle:
    def set_action(self, label: str, callback: Callable[[], None]) -> None: ...
    def set_action_text_color(self, color: str) -> None: ...
    def set_link_handler(self, handler: Callable[[str], None]) -> None: ...
    def show(self) -> None: ...
    def dismiss(self) -> None: ...


class CaptionView:
    def set_text(self, text: str) -> None: ...
    def set_max_lines(self, lines: Optional[int]) -> None: ...


class ToastHandle:
    def set_view(self, view: CaptionView) -> None: ...
    def set_gravity(self, gravity: Gravity, x_offset: int, y_offset: int) -> None: ...
    def show(self) -> None: ...
    def cancel(self) -> None: ...


class Balloon:
    def show_align_top(self, anchor: Any, x_offset: int = 0, y_offset: int = 0) -> None: ...
    def show_align_bottom(self, anchor: Any, x_offset: int = 0, y_offset: int = 0) -> None: ...
    def dismiss(self) -> None: ...


class FeedbackToolkit:
    def make_banner(self, container: Any, text: RichText, duration: int) -> BannerHandle: ...
    def make_toast(self, context: Any, text: str, duration: int) -> ToastHandle: ...
    def inflate(self, context: Any, layout: str) -> CaptionView: ...
    def create_balloon(self, context: Any, config: TooltipConfig) -> Balloon: ...
    def show_spotlight(self, screen: Any, target: SpotlightTarget, listener: SpotlightListener) -> Any: ...
    def content_description(self, view: Any) -> str: ...
    def location_on_screen(self, view: Any) -> Tuple[int, int]: ...
    def host_screen(self, view: Any) -> Optional[Any]: ...
    def set_on_long_click(self, view: Any, handler: Callable[[Any], bool]) -> None: ...
    def themed_color(self, context: Any, attr: ThemeAttr) -> str: ...
    def dp_to_px(self, dp: float) -> int: ...
    def is_landscape(self, context: Any) -> bool: ...
