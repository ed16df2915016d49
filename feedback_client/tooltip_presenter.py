"""Directional pop-over balloons anchored to a view."""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Optional

from feedback_client.rich_text import from_html  # type: ignore
from feedback_client.screens import ScreenKind, screen_kind  # type: ignore
from feedback_client.theme import ThemeAttr  # type: ignore
from feedback_client.toolkit import (  # type: ignore
    TOOLTIP_ARROW_DRAWABLE,
    ArrowConstraints,
    ArrowOrientation,
    Balloon,
    FeedbackToolkit,
    TooltipConfig,
)

_LOGGER = logging.getLogger("WikiFeedback.Client.tooltip_presenter")

TOOLTIP_ARROW_SIZE = 24
TOOLTIP_SIDE_MARGIN = 8
TOOLTIP_TEXT_SIZE_SP = 14.0
TOOLTIP_TEXT_TYPEFACE = "sans-serif-medium"
TOOLTIP_TEXT_COLOR = "#ffffff"
TOOLTIP_PADDING = 16
TOOLTIP_ANCHOR_GAP_DP = 8.0
LANDSCAPE_WIDTH_RATIO = 0.4
PORTRAIT_WIDTH_RATIO = 0.8


class BalloonBuilder:
    """Fluent collector for a TooltipConfig; ``build()`` hands it to the toolkit."""

    def __init__(self, toolkit: FeedbackToolkit, context: Any) -> None:
        self._toolkit = toolkit
        self._context = context
        self._config = TooltipConfig()

    @property
    def config(self) -> TooltipConfig:
        return replace(self._config)

    def _set(self, **changes: Any) -> "BalloonBuilder":
        self._config = replace(self._config, **changes)
        return self

    def set_arrow_drawable_resource(self, drawable: str) -> "BalloonBuilder":
        return self._set(arrow_drawable=drawable)

    def set_arrow_constraints(self, constraints: ArrowConstraints) -> "BalloonBuilder":
        return self._set(arrow_constraints=constraints)

    def set_arrow_orientation(self, orientation: ArrowOrientation) -> "BalloonBuilder":
        return self._set(arrow_orientation=orientation)

    def set_arrow_size(self, size: int) -> "BalloonBuilder":
        return self._set(arrow_size=int(size))

    def set_margin_left(self, margin: int) -> "BalloonBuilder":
        return self._set(margin_left=int(margin))

    def set_margin_right(self, margin: int) -> "BalloonBuilder":
        return self._set(margin_right=int(margin))

    def set_margin_top(self, margin: int) -> "BalloonBuilder":
        return self._set(margin_top=int(margin))

    def set_margin_bottom(self, margin: int) -> "BalloonBuilder":
        return self._set(margin_bottom=int(margin))

    def set_background_color(self, color: str) -> "BalloonBuilder":
        return self._set(background_color=color)

    def set_dismiss_when_touch_outside(self, dismiss: bool) -> "BalloonBuilder":
        return self._set(dismiss_when_touch_outside=bool(dismiss))

    def set_text(self, text: Any) -> "BalloonBuilder":
        return self._set(text=from_html(text))

    def set_text_size(self, size: float) -> "BalloonBuilder":
        return self._set(text_size=float(size))

    def set_text_typeface(self, typeface: str) -> "BalloonBuilder":
        return self._set(text_typeface=typeface)

    def set_text_color(self, color: str) -> "BalloonBuilder":
        return self._set(text_color=color)

    def set_padding(self, padding: int) -> "BalloonBuilder":
        return self._set(padding=int(padding))

    def set_layout(self, layout: str) -> "BalloonBuilder":
        return self._set(layout=layout)

    def set_height(self, height: int) -> "BalloonBuilder":
        return self._set(height=int(height))

    def set_width_ratio(self, ratio: float) -> "BalloonBuilder":
        return self._set(width_ratio=float(ratio))

    def set_arrow_align_anchor_padding(self, padding: int) -> "BalloonBuilder":
        return self._set(arrow_align_anchor_padding=int(padding))

    def build(self) -> Balloon:
        return self._toolkit.create_balloon(self._context, self.config)


class TooltipPresenter:
    def __init__(self, toolkit: FeedbackToolkit) -> None:
        self._toolkit = toolkit

    def _builder(self, context: Any, top_or_bottom_margin: int, above_or_below: bool, auto_dismiss: bool) -> BalloonBuilder:
        return (
            BalloonBuilder(self._toolkit, context)
            .set_arrow_drawable_resource(TOOLTIP_ARROW_DRAWABLE)
            .set_arrow_constraints(ArrowConstraints.ALIGN_ANCHOR)
            .set_arrow_orientation(ArrowOrientation.BOTTOM if above_or_below else ArrowOrientation.TOP)
            .set_arrow_size(TOOLTIP_ARROW_SIZE)
            .set_margin_left(TOOLTIP_SIDE_MARGIN)
            .set_margin_right(TOOLTIP_SIDE_MARGIN)
            .set_margin_top(0 if above_or_below else top_or_bottom_margin)
            .set_margin_bottom(top_or_bottom_margin if above_or_below else 0)
            .set_background_color(self._toolkit.themed_color(context, ThemeAttr.COLOR_ACCENT))
            .set_dismiss_when_touch_outside(auto_dismiss)
        )

    def get_tooltip(self, context: Any, text: Any, above_or_below: bool, auto_dismiss: bool) -> Balloon:
        return (
            self._builder(context, 0, above_or_below, auto_dismiss)
            .set_text(text)
            .set_text_size(TOOLTIP_TEXT_SIZE_SP)
            .set_text_typeface(TOOLTIP_TEXT_TYPEFACE)
            .set_text_color(TOOLTIP_TEXT_COLOR)
            .set_padding(TOOLTIP_PADDING)
            .build()
        )

    def get_layout_tooltip(
        self,
        context: Any,
        layout: str,
        layout_height: int,
        arrow_anchor_padding: int,
        top_or_bottom_margin: int,
        above_or_below: bool,
        auto_dismiss: bool,
    ) -> Balloon:
        ratio = LANDSCAPE_WIDTH_RATIO if self._toolkit.is_landscape(context) else PORTRAIT_WIDTH_RATIO
        return (
            self._builder(context, top_or_bottom_margin, above_or_below, auto_dismiss)
            .set_layout(layout)
            .set_height(layout_height)
            .set_width_ratio(ratio)
            .set_arrow_align_anchor_padding(arrow_anchor_padding)
            .build()
        )

    def show_tooltip(self, anchor: Any, text: Any, above_or_below: bool, auto_dismiss: bool) -> Balloon:
        balloon = self.get_tooltip(anchor, text, above_or_below, auto_dismiss)
        return self._show(balloon, anchor, above_or_below, auto_dismiss)

    def show_layout_tooltip(
        self,
        anchor: Any,
        layout: str,
        layout_height: int,
        arrow_anchor_padding: int,
        top_or_bottom_margin: int,
        above_or_below: bool,
        auto_dismiss: bool,
    ) -> Balloon:
        balloon = self.get_layout_tooltip(
            anchor,
            layout,
            layout_height,
            arrow_anchor_padding,
            top_or_bottom_margin,
            above_or_below,
            auto_dismiss,
        )
        return self._show(balloon, anchor, above_or_below, auto_dismiss)

    def _show(self, balloon: Balloon, anchor: Any, above_or_below: bool, auto_dismiss: bool) -> Balloon:
        gap = self._toolkit.dp_to_px(TOOLTIP_ANCHOR_GAP_DP)
        if above_or_below:
            balloon.show_align_top(anchor, 0, gap)
        else:
            balloon.show_align_bottom(anchor, 0, -gap)
        if not auto_dismiss:
            host: Optional[Any] = self._toolkit.host_screen(anchor)
            if host is not None and screen_kind(host) is ScreenKind.MAIN:
                host.set_current_tooltip(balloon)
                _LOGGER.debug("Recorded persistent tooltip on main screen")
        return balloon


__all__ = ["BalloonBuilder", "TooltipPresenter"]
